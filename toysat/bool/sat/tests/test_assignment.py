import pytest

from toysat.bool.sat.assignment import Assignment
from toysat.bool.sat.literals import LiteralUniverse


@pytest.fixture
def universe():
    return LiteralUniverse(["a", "b", "c"])


def test_all_thawed(universe):
    assignment = Assignment.all_thawed(universe)
    assert assignment.values == (False, False, False)
    assert assignment.frozen_boundary == 0
    assert assignment.thawed_count == 3
    assert assignment.has_thawed()
    assert assignment.thawed_names == ("a", "b", "c")


def test_freeze_next_extends_a_copy(universe):
    parent = Assignment.all_thawed(universe)
    child = parent.freeze_next(True)
    grandchild = child.freeze_next(False)

    assert parent.values == (False, False, False)
    assert parent.frozen_boundary == 0
    assert child.values == (True, False, False)
    assert child.frozen_boundary == 1
    assert child.frozen_names == ("a",)
    assert grandchild.values == (True, False, False)
    assert grandchild.frozen_boundary == 2
    # the universe is shared, not copied
    assert child.universe is parent.universe
    assert grandchild.universe is parent.universe


def test_siblings_are_independent(universe):
    parent = Assignment.all_thawed(universe)
    left = parent.freeze_next(True)
    right = parent.freeze_next(False)
    assert left.value_of("a") is True
    assert right.value_of("a") is False


def test_nothing_left_to_freeze():
    assignment = Assignment.all_thawed(LiteralUniverse(["a"])).freeze_next(False)
    assert not assignment.has_thawed()
    with pytest.raises(ValueError):
        assignment.freeze_next(True)


def test_constructor_checks(universe):
    with pytest.raises(ValueError):
        Assignment(universe, [True])
    with pytest.raises(ValueError):
        Assignment(universe, [True, True, True], frozen_boundary=4)


def test_rendering(universe):
    assignment = Assignment(universe, [True, False, True], 2)
    assert str(assignment) == "a=True b=False c=True"
    assert assignment.as_dict() == {"a": True, "b": False, "c": True}
    assert list(assignment.as_dict()) == ["a", "b", "c"]


def test_value_of_unknown_name(universe):
    with pytest.raises(KeyError):
        Assignment.all_thawed(universe).value_of("z")


def test_equality(universe):
    assert Assignment(universe, [True, False, False], 1) == \
        Assignment.all_thawed(universe).freeze_next(True)
    assert Assignment(universe, [True, False, False], 1) != \
        Assignment(universe, [True, False, False], 2)


def test_hashable(universe):
    frozen = Assignment.all_thawed(universe).freeze_next(True)
    same = Assignment(universe, [True, False, False], 1)
    assert hash(frozen) == hash(same)
    assert len({frozen, same, Assignment(universe, [True, False, False], 2)}) == 2
