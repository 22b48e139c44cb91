import math

import pytest

from puzzlekit.graph import network_delay_time, shortest_times

TIMES = [[2, 1, 1], [2, 3, 1], [3, 4, 1]]


def test_network_delay_example():
    assert network_delay_time(TIMES, 4, 2) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 3, 1) == -1
    assert shortest_times([[1, 2, 1]], 3, 1)[3] == math.inf


def test_delay_is_largest_shortest_time():
    times = [[1, 2, 4], [1, 3, 1], [3, 2, 1], [2, 4, 2], [3, 4, 7]]
    dist = shortest_times(times, 4, 1)
    assert network_delay_time(times, 4, 1) == max(dist.values())


def test_shortest_times_invariants():
    times = [[1, 2, 4], [1, 3, 1], [3, 2, 1], [2, 4, 2], [3, 4, 7], [4, 1, 3]]
    dist = shortest_times(times, 4, 1)
    assert set(dist) == {1, 2, 3, 4}
    assert dist[1] == 0
    for u, v, w in times:
        assert dist[v] <= dist[u] + w


def test_single_node():
    assert network_delay_time([], 1, 1) == 0


def test_invalid_source_raises():
    with pytest.raises(ValueError):
        shortest_times(TIMES, 4, 5)


def test_edge_outside_nodes_raises():
    with pytest.raises(ValueError):
        network_delay_time([[1, 9, 1]], 4, 1)