import streamlit as st

from core.state import toggle_theme
from particalc import __version__


def render_topbar():
    """Mode toggle, version label and theme switch above the display."""
    left, center, right = st.columns([2, 2, 1])
    with left:
        scientific = st.toggle("Scientific", key="scientific")
    with center:
        st.caption(f"PARTICALC v{__version__}")
    with right:
        dark = st.session_state.get("dark_mode", False)
        st.button(
            "☀️" if dark else "🌙",
            key="theme_toggle",
            on_click=toggle_theme,
            help="Switch to light theme" if dark else "Switch to dark theme",
        )
    return scientific
