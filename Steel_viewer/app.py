import streamlit as st
import os
import sys

# Ensure the project root is in the path so we can import 'steel_viewer'
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from steel_viewer.database.materials import get_catalog
from steel_viewer.logging_setup import configure_logging
from steel_viewer.models.material import DataError
from steel_viewer.models.selection import SelectionState
from steel_viewer.ui.sidebar import render_sidebar
from steel_viewer.ui.properties import render_properties
from steel_viewer.ui.charts import render_comparison
from steel_viewer.ui.visualization import plot_material_3d

st.set_page_config(page_title="Material Properties Visualization", layout="wide", page_icon="🔩")


def load_css():
    css_path = os.path.join(os.path.dirname(__file__), "steel_viewer", "ui", "style.css")
    with open(css_path) as f:
        st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def main():
    configure_logging()
    load_css()

    st.title("Material Properties Visualization")
    st.caption("Explore steel materials and their properties in 3D")

    # Initialize Session State
    if 'selection' not in st.session_state:
        try:
            catalog = get_catalog()
        except DataError as exc:
            st.error(f"Could not load the material catalog: {exc}")
            st.stop()
        st.session_state.selection = SelectionState(catalog, focused=catalog[0])

    selection = st.session_state.selection

    # 1. Material Selector (Sidebar)
    render_sidebar(selection)

    material = selection.focused

    # 2. 3D Viewer
    try:
        fig_3d = plot_material_3d(material)
    except DataError as exc:
        st.error(f"Cannot render {material.label}: {exc}")
    else:
        st.plotly_chart(fig_3d, use_container_width=True)

    # 3. Properties and Comparison
    col_props, col_cmp = st.columns([1, 1])

    with col_props:
        try:
            render_properties(material)
        except DataError as exc:
            st.error(f"Cannot compute metrics for {material.label}: {exc}")

    with col_cmp:
        try:
            render_comparison(selection.chart_materials())
        except DataError as exc:
            st.error(f"Cannot draw comparison charts: {exc}")


if __name__ == "__main__":
    main()
