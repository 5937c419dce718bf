from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from constraints import (
    ALL_CELLS,
    DIGITS,
    AllDifferentConstraint,
    Constraint,
    DomainConstraint,
    EqualsConstraint,
)
from errors import UnsatisfiableError, ValidationError
from grid import CELL_COUNT, cell_label, reshape, validate_hints
from regions import (
    S_ENNEAD_SPECS,
    S_SHAPE,
    GroupSpec,
    Region,
    classic_regions,
    mask_from_strings,
    shaped_regions,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classic:
    """Rows, columns and boxes."""

    def regions(self, rows: Sequence[Sequence[int]]) -> List[Region]:
        return classic_regions(rows)


@dataclass(frozen=True)
class Shaped:
    """Classic regions plus one ennead per group spec over the shape mask."""

    mask_lines: Tuple[str, ...] = S_SHAPE
    specs: Tuple[GroupSpec, ...] = S_ENNEAD_SPECS

    def regions(self, rows: Sequence[Sequence[int]]) -> List[Region]:
        mask = mask_from_strings(self.mask_lines)
        return classic_regions(rows) + shaped_regions(mask, self.specs, rows)


Variant = Union[Classic, Shaped]


class PuzzleModel:
    def __init__(self, variant: Optional[Variant] = None) -> None:
        self.variant: Variant = variant if variant is not None else Classic()
        # Region derivation errors surface here, before any hint is read.
        self._regions: List[Region] = self.variant.regions(reshape(ALL_CELLS))
        self.reset()

    def reset(self) -> None:
        self.pins: Dict[int, int] = {}

    def build(self, hints: Sequence[int]) -> "PuzzleModel":
        """Replace the current pins with the nonzero entries of an 81-value hint array."""
        checked = validate_hints(hints)
        self.reset()
        for index, value in enumerate(checked):
            if value:
                self.pin(index, value)
        log.debug(
            "built %s model: %d hints, %d regions",
            type(self.variant).__name__,
            len(self.pins),
            len(self._regions),
        )
        return self

    def pin(self, index: int, value: int) -> None:
        if not 0 <= index < CELL_COUNT:
            raise ValidationError(f"cell index {index} is outside 0..{CELL_COUNT - 1}")
        if value not in DIGITS:
            raise UnsatisfiableError(
                f"{cell_label(index)} cannot equal {value}: domain is 1..9"
            )
        current = self.pins.get(index)
        if current is not None and current != value:
            raise UnsatisfiableError(
                f"{cell_label(index)} is pinned to {current}, cannot also equal {value}"
            )
        self.pins[index] = value

    def unpin(self, index: int) -> None:
        self.pins.pop(index, None)

    def hints(self) -> List[int]:
        return [self.pins.get(index, 0) for index in ALL_CELLS]

    def regions(self) -> List[Region]:
        return [(name, list(cells)) for name, cells in self._regions]

    def domain_constraint(self) -> DomainConstraint:
        return DomainConstraint(ALL_CELLS)

    def hint_constraints(self) -> List[EqualsConstraint]:
        return [EqualsConstraint(index, value) for index, value in sorted(self.pins.items())]

    def distinct_constraints(self) -> List[AllDifferentConstraint]:
        return [AllDifferentConstraint(cells, name=name) for name, cells in self._regions]

    def constraints(self) -> List[Constraint]:
        constraints: List[Constraint] = [self.domain_constraint()]
        constraints.extend(self.hint_constraints())
        constraints.extend(self.distinct_constraints())
        return constraints

    def is_solution(self, values: Sequence[int]) -> bool:
        if len(values) != CELL_COUNT:
            return False
        assignment = dict(enumerate(values))
        return all(c.is_satisfied(assignment) for c in self.constraints())
