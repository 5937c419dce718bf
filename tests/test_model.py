# tests/test_model.py
import pytest

from constraints import (
    AllDifferentConstraint,
    DomainConstraint,
    EqualsConstraint,
    value_of,
)
from errors import ConfigurationError, ShapeError, UnsatisfiableError, ValidationError
from model import Classic, PuzzleModel, Shaped
from regions import S_SHAPE, Rows


def test_build_pins_nonzero_hints(classic_puzzle):
    model = PuzzleModel().build(classic_puzzle)
    assert model.pins[0] == 2
    assert 1 not in model.pins
    assert len(model.pins) == sum(1 for v in classic_puzzle if v)
    assert model.hints() == classic_puzzle


def test_build_replaces_previous_pins():
    model = PuzzleModel()
    model.pin(5, 3)
    model.build([0] * 81)
    assert model.pins == {}


def test_build_rejects_malformed_hints():
    with pytest.raises(ValidationError):
        PuzzleModel().build([0] * 80)


def test_classic_constraint_set(classic_puzzle):
    model = PuzzleModel(Classic()).build(classic_puzzle)
    constraints = model.constraints()
    assert isinstance(constraints[0], DomainConstraint)
    assert len(model.hint_constraints()) == len(model.pins)
    assert len(model.distinct_constraints()) == 27
    assert all(len(c.cells) == 9 for c in model.distinct_constraints())


def test_shaped_model_adds_six_enneads():
    model = PuzzleModel(Shaped())
    names = [name for name, _ in model.regions()]
    assert len(names) == 33
    assert names[-6:] == [f"ennead {i}" for i in range(1, 7)]


def test_shaped_model_fails_fast_on_bad_mask():
    with pytest.raises(ShapeError):
        PuzzleModel(Shaped(mask_lines=S_SHAPE[:8]))


def test_shaped_model_fails_fast_on_bad_spec():
    with pytest.raises(ConfigurationError):
        PuzzleModel(Shaped(specs=(Rows((0, 1)),)))


def test_pin_conflicts_raise():
    model = PuzzleModel()
    model.pin(0, 4)
    model.pin(0, 4)
    with pytest.raises(UnsatisfiableError):
        model.pin(0, 5)
    with pytest.raises(UnsatisfiableError):
        model.pin(1, 10)
    with pytest.raises(ValidationError):
        model.pin(81, 1)
    model.unpin(0)
    model.pin(0, 5)
    assert model.pins == {0: 5}


def test_is_solution(solved_grid):
    model = PuzzleModel().build(solved_grid)
    assert model.is_solution(solved_grid)
    broken = list(solved_grid)
    broken[0], broken[1] = broken[1], broken[0]
    assert not PuzzleModel().is_solution(broken)
    assert not model.is_solution(solved_grid[:80])


def test_all_different_naked_single_elimination():
    cands = {i: set(range(1, 10)) for i in range(9)}
    cands[0] = {4}
    changed, ok = AllDifferentConstraint(list(range(9))).propagate(cands)
    assert changed and ok
    assert all(4 not in cands[i] for i in range(1, 9))
    assert value_of(cands, 0) == 4


def test_all_different_detects_duplicate_singletons():
    cands = {i: set(range(1, 10)) for i in range(9)}
    cands[0] = {4}
    cands[8] = {4}
    _, ok = AllDifferentConstraint(list(range(9))).propagate(cands)
    assert not ok


def test_all_different_detects_emptied_domain():
    cands = {0: {1}, 1: {1, 2}, 2: {2}}
    _, ok = AllDifferentConstraint([0, 1, 2]).propagate(cands)
    assert not ok


def test_equals_constraint():
    cands = {0: {1, 2, 3}}
    assert EqualsConstraint(0, 2).propagate(cands) == (True, True)
    assert cands[0] == {2}
    assert EqualsConstraint(0, 2).propagate(cands) == (False, True)
    assert EqualsConstraint(0, 3).propagate(cands) == (True, False)


def test_domain_constraint_trims_out_of_range_values():
    cands = {0: {0, 5, 10}, 1: {12}}
    changed, ok = DomainConstraint([0]).propagate(cands)
    assert changed and ok
    assert cands[0] == {5}
    _, ok = DomainConstraint([1]).propagate(cands)
    assert not ok


def test_distinct_constraints_cover_their_regions():
    model = PuzzleModel(Shaped())
    constraints = model.distinct_constraints()
    assert [(c.name, list(c.cells)) for c in constraints] == model.regions()
