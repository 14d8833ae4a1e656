from typing import Optional

import streamlit as st
import structlog

from core.config import Settings, get_settings
from core.functions import apply_token
from particalc.models import CalculatorState

logger = structlog.get_logger()

# Session keys backing ``CalculatorState``. Widgets bind to ``scientific``
# directly; the rest are only written through the helpers below.
STATE_KEYS = tuple(CalculatorState.model_fields)


def _prefers_dark(settings: Settings) -> bool:
    if settings.theme == "auto":
        return st.context.theme.type == "dark"
    return settings.theme == "dark"


def init_state(settings: Optional[Settings] = None) -> None:
    """Seed calculator keys in ``st.session_state`` on the first run."""
    settings = settings or get_settings()
    defaults = CalculatorState(
        scientific=settings.scientific_default,
        dark_mode=_prefers_dark(settings),
    )
    for key, val in defaults.model_dump().items():
        st.session_state.setdefault(key, val)


def get_state() -> CalculatorState:
    """Snapshot of the calculator state for this session."""
    return CalculatorState(
        **{k: st.session_state[k] for k in STATE_KEYS if k in st.session_state}
    )


def press(token: str) -> None:
    """Button callback: apply ``token`` to the display and remember it."""
    before = st.session_state.get("display", CalculatorState().display)
    after = apply_token(before, token)
    st.session_state["display"] = after
    st.session_state["last_token"] = token
    logger.debug("Button pressed", token=token, before=before, after=after)


def toggle_theme() -> None:
    st.session_state["dark_mode"] = not st.session_state.get("dark_mode", False)

