import streamlit as st

from steel_viewer.analysis.metrics import performance_rows
from steel_viewer.models.material import A5, BHN, E, G, MU, RO, SU, SY, MaterialRecord, PropertySpec

MECHANICAL = (SU, SY, A5, BHN, E, G)
PHYSICAL = (RO, MU)


def _format_value(prop: PropertySpec, material: MaterialRecord) -> str:
    value = prop.accessor(material)
    text = f"{value:g}"
    if prop.unit == "%":
        return f"{text}%"
    return f"{text} {prop.unit}" if prop.unit else text


def _property_row(prop: PropertySpec, material: MaterialRecord):
    c1, c2 = st.columns([3, 2])
    c1.markdown(f"**{prop.label} ({prop.key})**", help=prop.description)
    c2.write(_format_value(prop, material))


def render_properties(material: MaterialRecord):
    """Header card and Mechanical / Physical / Performance tabs for the focused material."""
    with st.container(border=True):
        st.markdown(f'<div class="material-header"><h3>{material.name}</h3></div>', unsafe_allow_html=True)
        st.caption(f"{material.heat_treatment} · {material.standard}")
        if material.description:
            st.write(material.description)

    tab_mech, tab_phys, tab_perf = st.tabs(["Mechanical", "Physical", "Performance"])

    with tab_mech:
        st.markdown("##### Mechanical Properties")
        for prop in MECHANICAL:
            _property_row(prop, material)

    with tab_phys:
        st.markdown("##### Physical Properties")
        for prop in PHYSICAL:
            _property_row(prop, material)
        if material.ph is not None:
            c1, c2 = st.columns([3, 2])
            c1.markdown("**pH**")
            c2.write(f"{material.ph:g}")

    with tab_perf:
        st.markdown("##### Performance Metrics")
        for label, value in performance_rows(material):
            c1, c2 = st.columns([3, 2])
            c1.markdown(f"**{label}**")
            c2.write(value)
