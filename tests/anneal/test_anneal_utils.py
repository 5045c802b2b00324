import pytest

import math

from mock import Mock

from landuse.anneal.utils import select_swap, accept


def test_select_swap():
    r = Mock()
    r.choice.side_effect = [(0, 1), (2, 3)]
    positions = [(0, 1), (2, 3)]
    assert select_swap(positions, r) == ((0, 1), (2, 3))

    # Two independent draws from the list of agents
    assert [c[1][0] for c in r.choice.mock_calls] == [positions, positions]
    assert not r.random.called


@pytest.mark.parametrize("delta", [1e-9, 1.0, 1000.0])
def test_accept_improvement(delta):
    # Improvements never need a random draw
    r = Mock()
    assert accept(delta, 1.0, r)
    assert not r.random.called


@pytest.mark.parametrize("delta,temperature,u,expected", [
    # exp(0) == 1.0 always beats u < 1.0
    (0.0, 1.0, 0.999, True),
    # exp(-1) ~= 0.368
    (-1.0, 1.0, 0.3, True),
    (-1.0, 1.0, 0.4, False),
    # Higher temperatures accept more
    (-1.0, 10.0, 0.9, True),
    (-1.0, 0.1, 0.001, False),
])
def test_accept_metropolis(delta, temperature, u, expected):
    r = Mock()
    r.random.return_value = u
    assert accept(delta, temperature, r) is expected
    assert r.random.call_count == 1
    assert (math.exp(delta / temperature) > u) is expected
