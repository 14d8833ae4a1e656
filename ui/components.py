from typing import List

import streamlit as st

from core.state import press
from particalc.presets import GRID_COLUMNS, WIDE_BUTTONS


def grid_rows(tokens: List[str], columns: int = GRID_COLUMNS) -> List[List[str]]:
    """Split ``tokens`` into rows, counting wide buttons as two cells."""
    rows: List[List[str]] = []
    row: List[str] = []
    used = 0
    for token in tokens:
        span = 2 if token in WIDE_BUTTONS else 1
        if used + span > columns:
            rows.append(row)
            row, used = [], 0
        row.append(token)
        used += span
    if row:
        rows.append(row)
    return rows


def calc_button(container, token: str) -> None:
    """One keypad button; the last pressed one renders highlighted."""
    highlighted = st.session_state.get("last_token") == token
    container.button(
        token,
        key=f"btn_{token}",
        on_click=press,
        args=(token,),
        type="primary" if highlighted else "secondary",
        use_container_width=True,
    )


def render_button_grid(tokens: List[str]) -> None:
    for row in grid_rows(tokens):
        spans = [2 if t in WIDE_BUTTONS else 1 for t in row]
        # pad short rows so buttons keep their width
        pad = GRID_COLUMNS - sum(spans)
        cols = st.columns(spans + ([pad] if pad else []))
        for col, token in zip(cols, row):
            calc_button(col, token)
