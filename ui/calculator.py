import html

import streamlit as st

from particalc.presets import SCIENTIFIC_BUTTONS, STANDARD_BUTTONS, THEMES
from ui.components import render_button_grid
from ui.topbar import render_topbar


def render_display(display: str, dark_mode: bool) -> None:
    palette = THEMES["dark" if dark_mode else "light"]
    st.markdown(
        f"""
        <div class="calc-display" style="background:{palette['display_bg']};color:{palette['text']};
        text-align:right;font-size:2.25rem;font-weight:700;padding:16px 20px;border-radius:16px;
        overflow-x:auto;margin-bottom:12px;">{html.escape(display)}</div>
        """,
        unsafe_allow_html=True,
    )


def render_calculator():
    """Render the calculator panel and return the current display text."""
    with st.container(border=True):
        scientific = render_topbar()
        display = st.session_state["display"]
        render_display(display, st.session_state.get("dark_mode", False))
        render_button_grid(STANDARD_BUTTONS)
        if scientific:
            st.divider()
            render_button_grid(SCIENTIFIC_BUTTONS)
    return display
