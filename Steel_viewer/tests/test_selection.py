import pytest

from steel_viewer.models.selection import SelectionState


def test_initial_focus_is_explicit(catalog):
    state = SelectionState(catalog, focused=catalog[3])
    assert state.focused is catalog[3]
    assert state.comparison == []


def test_initial_focus_must_be_in_catalog(catalog, make_material):
    with pytest.raises(ValueError):
        SelectionState(catalog, focused=make_material(id="OTHER"))


def test_select_replaces_focus(catalog):
    state = SelectionState(catalog, focused=catalog[0])
    assert state.select(catalog[5])
    assert state.focused is catalog[5]


def test_select_unknown_material_is_a_noop(catalog, make_material):
    state = SelectionState(catalog, focused=catalog[0])
    assert not state.select(make_material(id="NOT-IN-CATALOG"))
    assert state.focused is catalog[0]


def test_toggle_twice_restores_previous_set(catalog):
    state = SelectionState(catalog, focused=catalog[0])
    state.toggle_comparison(catalog[2])
    before = [m.id for m in state.comparison]

    assert state.toggle_comparison(catalog[4]) is True
    assert state.toggle_comparison(catalog[4]) is False
    assert [m.id for m in state.comparison] == before


def test_toggle_matches_by_id(catalog):
    state = SelectionState(catalog, focused=catalog[0])
    state.toggle_comparison(catalog[1])
    state.toggle_comparison(catalog[1])
    state.toggle_comparison(catalog[1])
    assert [m.id for m in state.comparison] == [catalog[1].id]
    assert state.is_compared(catalog[1])


def test_toggle_unknown_material_is_ignored(catalog, make_material):
    state = SelectionState(catalog, focused=catalog[0])
    assert not state.toggle_comparison(make_material(id="NOT-IN-CATALOG"))
    assert state.comparison == []


def test_chart_materials_puts_focus_first_without_duplicates(catalog):
    state = SelectionState(catalog, focused=catalog[0])
    state.toggle_comparison(catalog[2])
    state.toggle_comparison(catalog[0])
    state.toggle_comparison(catalog[1])
    assert [m.id for m in state.chart_materials()] == [catalog[0].id, catalog[2].id, catalog[1].id]
