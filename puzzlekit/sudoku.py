"""Validation of partially filled Sudoku boards."""

_DIGITS = frozenset("123456789")


def _unit_ok(cells) -> bool:
    digits = [cell for cell in cells if cell in _DIGITS]
    return len(digits) == len(set(digits))


def is_valid_sudoku(board) -> bool:
    """Whether no digit repeats in any row, column or 3x3 box; other cells are ignored."""
    rows = [list(row) for row in board]
    if len(rows) != 9 or any(len(row) != 9 for row in rows):
        raise ValueError("a Sudoku board is 9 rows of 9 cells")
    columns = zip(*rows)
    boxes = (
        [rows[r][c] for r in range(top, top + 3) for c in range(left, left + 3)]
        for top in range(0, 9, 3)
        for left in range(0, 9, 3)
    )
    return all(_unit_ok(unit) for units in (rows, columns, boxes) for unit in units)