from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from errors import ConfigurationError, ShapeError
from grid import SIZE, all_boxes, transpose

Mask = Tuple[Tuple[bool, ...], ...]
Region = Tuple[str, List[int]]

# The S drawn over the board. Each third of its rows and each third of its
# columns covers exactly nine cells.
S_SHAPE: Tuple[str, ...] = (
    "  XXXXX  ",
    " X     XX",
    "X        ",
    "X        ",
    " XXXXXXX ",
    "        X",
    "        X",
    "XX     X ",
    "  XXXXX  ",
)


@dataclass(frozen=True)
class Rows:
    indices: Tuple[int, ...]


@dataclass(frozen=True)
class Cols:
    indices: Tuple[int, ...]


GroupSpec = Union[Rows, Cols]

S_ENNEAD_SPECS: Tuple[GroupSpec, ...] = (
    Rows((0, 1, 2)),
    Rows((3, 4, 5)),
    Rows((6, 7, 8)),
    Cols((0, 1, 2)),
    Cols((3, 4, 5)),
    Cols((6, 7, 8)),
)


def mask_from_strings(lines: Sequence[str]) -> Mask:
    """Convert shape strings to booleans: space is outside, anything else inside."""
    if len(lines) != SIZE:
        raise ShapeError(f"shape needs {SIZE} lines, got {len(lines)}")
    mask = []
    for r, line in enumerate(lines):
        if len(line) != SIZE:
            raise ShapeError(
                f"shape line {r} must have {SIZE} characters, got {len(line)}: {line!r}"
            )
        mask.append(tuple(ch != " " for ch in line))
    return tuple(mask)


def select_enabled(enabled: Sequence[bool], line: Sequence[int]) -> List[int]:
    if len(enabled) != len(line):
        raise ShapeError(
            f"mask line has {len(enabled)} entries but board line has {len(line)}"
        )
    return [value for on, value in zip(enabled, line) if on]


def ennead_for_spec(
    mask: Sequence[Sequence[bool]],
    spec: GroupSpec,
    rows: Sequence[Sequence[int]],
) -> List[int]:
    """
    Collect the board cells covered by the mask on the rows or columns named
    by ``spec``. Lines are visited in spec order, cells left to right (top to
    bottom for columns).
    """
    if isinstance(spec, Rows):
        mask_lines, board_lines = mask, rows
    elif isinstance(spec, Cols):
        mask_lines, board_lines = transpose(mask), transpose(rows)
    else:
        raise ConfigurationError(f"unknown group spec: {spec!r}")

    ennead: List[int] = []
    for i in spec.indices:
        if isinstance(i, bool) or not isinstance(i, int):
            raise ConfigurationError(f"{spec!r} names line {i!r}, which is not an int")
        if not 0 <= i < SIZE:
            raise ConfigurationError(f"{spec!r} names line {i}, outside 0..{SIZE - 1}")
        ennead.extend(select_enabled(mask_lines[i], board_lines[i]))

    if len(ennead) != SIZE or len(set(ennead)) != SIZE:
        raise ConfigurationError(
            f"{spec!r} selects {len(ennead)} cells {ennead}, expected {SIZE} distinct"
        )
    return ennead


def all_enneads(
    mask: Sequence[Sequence[bool]],
    specs: Sequence[GroupSpec],
    rows: Sequence[Sequence[int]],
) -> List[List[int]]:
    return [ennead_for_spec(mask, spec, rows) for spec in specs]


def classic_regions(rows: Sequence[Sequence[int]]) -> List[Region]:
    regions: List[Region] = []
    regions.extend((f"row {i + 1}", list(row)) for i, row in enumerate(rows))
    regions.extend((f"col {i + 1}", col) for i, col in enumerate(transpose(rows)))
    regions.extend((f"box {i + 1}", b) for i, b in enumerate(all_boxes(rows)))
    return regions


def shaped_regions(
    mask: Sequence[Sequence[bool]],
    specs: Sequence[GroupSpec],
    rows: Sequence[Sequence[int]],
) -> List[Region]:
    return [
        (f"ennead {i + 1}", ennead)
        for i, ennead in enumerate(all_enneads(mask, specs, rows))
    ]
