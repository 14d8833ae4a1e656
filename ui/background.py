import streamlit as st

from particalc.presets import THEMES


def render_background(dark_mode: bool):
    """Paint the page behind the calculator for the active theme."""
    palette = THEMES["dark" if dark_mode else "light"]
    st.markdown(
        f"""
        <style>
        [data-testid="stAppViewContainer"] {{background:{palette['background']};color:{palette['text']};}}
        [data-testid="stVerticalBlockBorderWrapper"] {{background-color:{palette['panel']};border-radius:24px;}}
        </style>
        """,
        unsafe_allow_html=True,
    )
