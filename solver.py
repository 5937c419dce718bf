from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from constraints import ALL_CELLS, DIGITS, Candidates, Constraint, value_of
from errors import ValidationError
from grid import cell_label
from model import Classic, PuzzleModel, Shaped, Variant

log = logging.getLogger(__name__)

Solution = List[int]
TraceLogger = Callable[[str], None]

PROGRESS_INTERVAL_S = 60


@dataclass
class SolverResult:
    status: str
    solutions: List[Solution] = field(default_factory=list)
    duration_ms: int = 0
    message: str = ""

    @property
    def solution(self) -> Optional[Solution]:
        return self.solutions[0] if self.solutions else None

    @property
    def solutions_found(self) -> int:
        return len(self.solutions)


def _check_limit(k: Optional[int]) -> None:
    if k is None:
        return
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        raise ValidationError(f"solution limit must be a non-negative int or None, got {k!r}")


class SudokuSolver:
    def __init__(self, model: PuzzleModel, logger: Optional[TraceLogger] = None) -> None:
        self.model = model
        self.logger = logger

    def _initial_candidates(
        self, constraints: Sequence[Constraint]
    ) -> Optional[Candidates]:
        candidates: Candidates = {cell: set(DIGITS) for cell in ALL_CELLS}
        for cell, val in self.model.pins.items():
            candidates[cell] = {val}
        ok = self._propagate(candidates, list(constraints))
        return candidates if ok else None

    def _propagate(
        self, candidates: Candidates, constraints: Optional[List[Constraint]] = None
    ) -> bool:
        constraint_list = constraints or self.model.constraints()
        while True:
            changed_any = False
            for constraint in constraint_list:
                changed, ok = constraint.propagate(candidates)
                if not ok:
                    return False
                changed_any = changed_any or changed
            if not changed_any:
                break
        return all(candidates.values())

    def propagation_step(
        self, candidates: Candidates, constraints: Optional[List[Constraint]] = None
    ) -> Tuple[bool, Dict[int, Set[int]], bool]:
        """Propagate in place to a fixpoint; return (changed, removed digits per cell, ok)."""
        before = {cell: set(vals) for cell, vals in candidates.items()}
        if not self._propagate(candidates, constraints):
            return False, {}, False
        deltas = {}
        for cell, prev in before.items():
            removed = prev - candidates[cell]
            if removed:
                deltas[cell] = removed
        return bool(deltas), deltas, True

    def _is_complete(self, candidates: Candidates) -> bool:
        return all(len(vals) == 1 for vals in candidates.values())

    def _trace(self, message: str) -> None:
        if self.logger:
            self.logger(message)

    def _search(
        self,
        candidates: Candidates,
        constraints: List[Constraint],
        limit: Optional[int],
        solutions: List[Solution],
        start_time: float,
        last_report: List[float],
    ) -> bool:
        """Depth-first search; returns True once ``limit`` solutions are collected."""
        now = time.time()
        if now - last_report[0] >= PROGRESS_INTERVAL_S:
            filled = sum(1 for v in candidates.values() if len(v) == 1)
            log.info(
                "%ds elapsed; filled %d/81 cells; solutions found %d",
                int(now - start_time),
                filled,
                len(solutions),
            )
            last_report[0] = now
        if self._is_complete(candidates):
            solutions.append([value_of(candidates, cell) for cell in ALL_CELLS])
            return limit is not None and len(solutions) >= limit
        # min() keeps the first of equal-sized domains, so ties go to the lowest index.
        cell = min(
            (cell for cell in ALL_CELLS if len(candidates[cell]) > 1),
            key=lambda c: len(candidates[c]),
        )
        for val in sorted(candidates[cell]):
            new_cands = {k: set(v) for k, v in candidates.items()}
            new_cands[cell] = {val}
            if not self._propagate(new_cands, constraints):
                self._trace(f"Backtrack: {cell_label(cell)} != {val}")
                continue
            self._trace(f"Guess: {cell_label(cell)} = {val}")
            if self._search(
                new_cands, constraints, limit, solutions, start_time, last_report
            ):
                return True
        return False

    def solve(self, k: Optional[int] = 1) -> SolverResult:
        """Collect up to ``k`` solutions (all of them when ``k`` is None)."""
        _check_limit(k)
        if k == 0:
            return SolverResult(status="not-requested", message="No solutions requested.")
        start = time.time()
        log.info("solve start")
        constraints = self.model.constraints()
        solutions: List[Solution] = []
        candidates = self._initial_candidates(constraints)
        if candidates is not None:
            self._search(candidates, constraints, k, solutions, start, [start])
        duration_ms = int((time.time() - start) * 1000)
        log.info("solve end in %d ms; solutions found %d", duration_ms, len(solutions))
        if candidates is None:
            return SolverResult(
                status="no-solution",
                duration_ms=duration_ms,
                message="Contradiction in givens or constraints.",
            )
        if not solutions:
            return SolverResult(
                status="no-solution",
                duration_ms=duration_ms,
                message="No solution found.",
            )
        if len(solutions) > 1:
            return SolverResult(
                status="multiple",
                solutions=solutions,
                duration_ms=duration_ms,
                message="Multiple solutions exist.",
            )
        return SolverResult(
            status="solved",
            solutions=solutions,
            duration_ms=duration_ms,
            message="Solved successfully.",
        )


def solve(
    hints: Sequence[int],
    k: Optional[int] = 1,
    variant: Optional[Variant] = None,
    logger: Optional[TraceLogger] = None,
) -> List[Solution]:
    """
    Solve an 81-value hint array (0 for blanks) and return up to ``k``
    solutions as flat lists, in search order. An unsatisfiable puzzle gives an
    empty list; malformed hints raise ``ValidationError``.
    """
    _check_limit(k)
    model = PuzzleModel(variant).build(hints)
    return SudokuSolver(model, logger=logger).solve(k).solutions


def solve_sudoku(hints: Sequence[int]) -> List[Solution]:
    return solve(hints, k=1, variant=Classic())


def solve_s_doku(hints: Sequence[int]) -> List[Solution]:
    return solve(hints, k=2, variant=Shaped())
