from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Sequence, Set, Tuple

from grid import CELL_COUNT, SIZE

Candidates = Dict[int, Set[int]]

DIGITS: FrozenSet[int] = frozenset(range(1, SIZE + 1))
ALL_CELLS: List[int] = list(range(CELL_COUNT))


def value_of(candidates: Candidates, cell: int) -> int:
    """Return assigned value if the cell is fixed to a single digit, else 0."""
    vals = candidates[cell]
    return next(iter(vals)) if len(vals) == 1 else 0


def ensure_non_empty(candidates: Candidates, cell: int) -> bool:
    return len(candidates[cell]) > 0


class Constraint:
    name: str = "constraint"

    def propagate(self, candidates: Candidates) -> Tuple[bool, bool]:
        """Returns (changed, ok)."""
        raise NotImplementedError

    def is_satisfied(self, assignment: Dict[int, int]) -> bool:
        """Return True if the fully assigned grid satisfies the constraint."""
        raise NotImplementedError


@dataclass
class DomainConstraint(Constraint):
    cells: Sequence[int]
    name: str = "domain"

    def propagate(self, candidates: Candidates) -> Tuple[bool, bool]:
        changed = False
        for cell in self.cells:
            outside = candidates[cell] - DIGITS
            if outside:
                candidates[cell] -= outside
                changed = True
                if not ensure_non_empty(candidates, cell):
                    return changed, False
        return changed, True

    def is_satisfied(self, assignment: Dict[int, int]) -> bool:
        return all(assignment[cell] in DIGITS for cell in self.cells)


@dataclass
class EqualsConstraint(Constraint):
    cell: int
    value: int
    name: str = "hint"

    def propagate(self, candidates: Candidates) -> Tuple[bool, bool]:
        vals = candidates[self.cell]
        if self.value not in vals:
            vals.clear()
            return True, False
        if len(vals) == 1:
            return False, True
        candidates[self.cell] = {self.value}
        return True, True

    def is_satisfied(self, assignment: Dict[int, int]) -> bool:
        return assignment[self.cell] == self.value


@dataclass
class AllDifferentConstraint(Constraint):
    cells: Sequence[int]
    name: str = "all-different"

    def propagate(self, candidates: Candidates) -> Tuple[bool, bool]:
        # Naked singles: a fixed cell removes its digit from every other cell
        # of the group. Cells that become fixed during the pass are picked up
        # on the next call.
        changed = False
        taken: Dict[int, int] = {}
        for cell in self.cells:
            val = value_of(candidates, cell)
            if not val:
                continue
            if val in taken:
                return changed, False
            taken[val] = cell
        if not taken:
            return changed, True
        for cell in self.cells:
            if value_of(candidates, cell):
                continue
            clash = candidates[cell].intersection(taken)
            if clash:
                candidates[cell] -= clash
                changed = True
                if not ensure_non_empty(candidates, cell):
                    return changed, False
        return changed, True

    def is_satisfied(self, assignment: Dict[int, int]) -> bool:
        vals = [assignment[cell] for cell in self.cells]
        return len(vals) == len(set(vals))

