import pytest

from trip_capacity.business_objects import StateValidationError
from trip_capacity.planning import ProblemState
from trip_capacity.planning.solvers.exhaustive import exact_min_capacity


@pytest.mark.parametrize(
    "trips, weights, expected",
    [
        (2, [1, 2, 3], 3),
        (1, [5], 5),
        (4, [10, 10, 10, 10], 10),
        (1, [1, 2, 3, 4, 5], 15),
        (3, [3, 2, 2, 1, 1], 3),
        (2, [4, 3, 3, 2, 2, 2], 8),
        (2, [7, 7, 7], 14),
        (5, [1, 1], 1),
    ],
)
def test_exact_min_capacity(trips, weights, expected):
    assert exact_min_capacity(ProblemState.from_weights(weights, trips)) == expected


def test_refuses_large_inputs():
    state = ProblemState.from_weights([1] * 13, trips=3)
    with pytest.raises(StateValidationError, match="limited to 12 items"):
        exact_min_capacity(state)


def test_item_limit_is_configurable():
    state = ProblemState.from_weights([1] * 13, trips=13)
    assert exact_min_capacity(state, max_items=13) == 1
