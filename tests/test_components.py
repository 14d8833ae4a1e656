from particalc.presets import SCIENTIFIC_BUTTONS, STANDARD_BUTTONS
from ui.components import grid_rows


def test_standard_grid_has_wide_equals():
    rows = grid_rows(STANDARD_BUTTONS)
    assert len(rows) == 5
    assert rows[-1] == ["0", ".", "="]
    assert all(len(r) == 4 for r in rows[:-1])


def test_scientific_grid_leaves_short_last_row():
    rows = grid_rows(SCIENTIFIC_BUTTONS)
    assert [len(r) for r in rows] == [4, 4, 4, 2]
    assert rows[-1] == ["x³", "x!"]
