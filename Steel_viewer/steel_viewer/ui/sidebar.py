import streamlit as st

from steel_viewer.analysis.microstructure import swatch_color
from steel_viewer.analysis.search import filter_materials, material_families
from steel_viewer.models.selection import SelectionState

ALL_FACET = "All"


def _render_facets(families):
    """Family filter buttons; the active one is drawn as primary."""
    active = st.session_state.get("category")
    options = [ALL_FACET] + families
    cols = st.sidebar.columns(len(options))
    for col, option in zip(cols, options):
        is_active = (active is None and option == ALL_FACET) or option == active
        if col.button(option, key=f"facet_{option}", type="primary" if is_active else "secondary",
                      use_container_width=True):
            st.session_state.category = None if option == ALL_FACET else option
            st.rerun()


def render_sidebar(selection: SelectionState):
    """Renders search, facets and the selectable material list."""
    st.sidebar.header("Material Selection")

    search = st.sidebar.text_input("Search", placeholder="Search materials...", label_visibility="collapsed")
    _render_facets(material_families(selection.catalog))

    materials = filter_materials(selection.catalog, search, st.session_state.get("category"))

    st.sidebar.markdown("---")

    if not materials:
        st.sidebar.info("No materials match the current filter.")
        return

    head = st.sidebar.columns([1, 6, 2])
    head[1].caption("Material / Heat Treatment")
    head[2].caption("Compare")

    for material in materials:
        c_sw, c_name, c_cmp = st.sidebar.columns([1, 6, 2])
        c_sw.markdown(
            f'<div class="swatch" style="background-color: {swatch_color(material)};"></div>',
            unsafe_allow_html=True,
        )

        is_focused = material.id == selection.focused.id
        if c_name.button(material.label, key=f"sel_{material.id}", type="primary" if is_focused else "secondary",
                         use_container_width=True):
            selection.select(material)
            st.rerun()

        wanted = c_cmp.checkbox("Compare", value=selection.is_compared(material), key=f"cmp_{material.id}",
                                label_visibility="collapsed")
        if wanted != selection.is_compared(material):
            selection.toggle_comparison(material)
            st.rerun()
