import streamlit as st

from core.config import get_settings
from core.logs import configure_logging
from core.state import init_state
from ui.background import render_background
from ui.calculator import render_calculator


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    st.set_page_config(page_title=settings.page_title, page_icon="🧮", layout="centered")
    init_state(settings)

    # The calculator owns the theme flag; the page follows it.
    render_background(st.session_state["dark_mode"])
    render_calculator()


if __name__ == "__main__":
    main()
