import pytest

from trip_capacity.business_objects import Item, StateValidationError
from trip_capacity.planning import ProblemState


def test_item_accepts_positive_integer_weight():
    it = Item(id="g1", weight=7)
    assert it.weight == 7


@pytest.mark.parametrize("weight", [0, -3])
def test_item_rejects_non_positive_weight(weight):
    with pytest.raises(StateValidationError):
        Item(id="g1", weight=weight)


@pytest.mark.parametrize("weight", [2.5, "3", True])
def test_item_rejects_non_integer_weight(weight):
    with pytest.raises(StateValidationError):
        Item(id="g1", weight=weight)


def test_item_requires_id():
    with pytest.raises(StateValidationError):
        Item(id="", weight=1)


def test_state_properties(five_items_three_trips):
    assert five_items_three_trips.weights == [3, 2, 2, 1, 1]
    assert five_items_three_trips.max_weight == 3
    assert five_items_three_trips.total_weight == 9
    assert [it.id for it in five_items_three_trips.items] == ["w1", "w2", "w3", "w4", "w5"]


def test_state_rejects_empty_items():
    with pytest.raises(StateValidationError):
        ProblemState(items=[], trips=1)


@pytest.mark.parametrize("trips", [0, -1, True, 1.0])
def test_state_rejects_bad_trip_count(trips):
    with pytest.raises(StateValidationError):
        ProblemState(items=[Item(id="a", weight=1)], trips=trips)


def test_state_rejects_duplicate_ids():
    with pytest.raises(StateValidationError, match="Duplicate"):
        ProblemState(items=[Item(id="a", weight=1), Item(id="a", weight=2)], trips=1)


def test_from_weights_checks_declared_count():
    with pytest.raises(StateValidationError, match="Expected 4 weights but received 3"):
        ProblemState.from_weights([1, 2, 3], trips=1, expected_count=4)


def test_large_totals_stay_exact():
    state = ProblemState.from_weights([2**40, 2**40, 2**40], trips=1)
    assert state.total_weight == 3 * 2**40
