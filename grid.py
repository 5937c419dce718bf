from __future__ import annotations

from typing import List, Sequence, TypeVar

from errors import ShapeError, ValidationError

T = TypeVar("T")

SIZE = 9
CELL_COUNT = SIZE * SIZE
BOX_ORIGINS = (0, 3, 6)

Matrix = List[List[T]]


def reshape(flat: Sequence[T]) -> Matrix:
    """Split 81 values into 9 consecutive rows of 9."""
    if len(flat) != CELL_COUNT:
        raise ShapeError(f"expected {CELL_COUNT} values, got {len(flat)}")
    return [list(flat[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]


def transpose(rows: Sequence[Sequence[T]]) -> Matrix:
    return [list(col) for col in zip(*rows)]


def flatten(rows: Sequence[Sequence[T]]) -> List[T]:
    return [value for row in rows for value in row]


def box(rows: Sequence[Sequence[T]], top_row: int, top_col: int) -> List[T]:
    """Return the 3x3 block at (top_row, top_col) in row-major order."""
    if top_row not in BOX_ORIGINS or top_col not in BOX_ORIGINS:
        raise ValueError(
            f"box origin must be in {BOX_ORIGINS}, got ({top_row}, {top_col})"
        )
    return [
        rows[r][c]
        for r in range(top_row, top_row + 3)
        for c in range(top_col, top_col + 3)
    ]


def all_boxes(rows: Sequence[Sequence[T]]) -> Matrix:
    return [box(rows, r, c) for r in BOX_ORIGINS for c in BOX_ORIGINS]


def cell_label(index: int) -> str:
    return f"r{index // SIZE + 1}c{index % SIZE + 1}"


def validate_hints(hints: Sequence[int]) -> List[int]:
    """Return a copy of the hint array, rejecting anything that is not 81 digits 0-9."""
    if len(hints) != CELL_COUNT:
        raise ValidationError(
            f"hint array must have {CELL_COUNT} entries, got {len(hints)}"
        )
    checked: List[int] = []
    for index, value in enumerate(hints):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"hint at {cell_label(index)} is not an integer: {value!r}"
            )
        if not 0 <= value <= 9:
            raise ValidationError(
                f"hint at {cell_label(index)} is outside 0..9: {value}"
            )
        checked.append(value)
    return checked
