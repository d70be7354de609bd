import os

import pytest

from streamlit.testing.v1 import AppTest

APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def test_app_renders(app):
    assert not app.exception
    assert app.title[0].value == "Material Properties Visualization"
    selection = app.session_state["selection"]
    assert selection.focused.id == "SAE1015-AR"


def test_compare_checkbox_toggles_selection(app):
    app.checkbox(key="cmp_SAE1040-N").check().run()
    assert not app.exception
    assert [m.id for m in app.session_state["selection"].comparison] == ["SAE1040-N"]


def test_focus_button_changes_material(app):
    app.button(key="sel_SAE1030-A").click().run()
    assert not app.exception
    assert app.session_state["selection"].focused.id == "SAE1030-A"
