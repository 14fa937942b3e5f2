import pytest

from trip_capacity.planning import ProblemState


@pytest.fixture
def three_items_two_trips():
    return ProblemState.from_weights([1, 2, 3], trips=2)


@pytest.fixture
def five_items_three_trips():
    return ProblemState.from_weights([3, 2, 2, 1, 1], trips=3)


@pytest.fixture
def greedy_gap_problem():
    # 4+2+2 | 3+3+2 carries everything at 8; largest-fit needs 9.
    return ProblemState.from_weights([4, 3, 3, 2, 2, 2], trips=2)
