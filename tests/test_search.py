import math

import pytest

from evolearn.search import dijkstra_path, dijkstra_paths

INF = math.inf

CHAIN = [
    [0.0, 1.0, 5.0],
    [INF, 0.0, 1.0],
    [INF, INF, 0.0],
]

LARGER = [
    [0.0, 4.0, 1.0, INF, 9.0],
    [4.0, 0.0, 2.0, 5.0, INF],
    [1.0, 2.0, 0.0, 8.0, 10.0],
    [INF, 5.0, 8.0, 0.0, 2.0],
    [9.0, INF, 10.0, 2.0, 0.0],
]


def _cost(graph, source, path):
    total = 0.0
    node = source
    for hop in path:
        total += graph[node][hop]
        node = hop
    return total


def test_chain_prefers_cheaper_indirect_route():
    assert dijkstra_paths(CHAIN, 0) == [[], [1], [1, 2]]


def test_single_target_matches_all_paths():
    paths = dijkstra_paths(LARGER, 0)
    for target in range(len(LARGER)):
        assert dijkstra_path(LARGER, 0, target) == paths[target]


def test_unreachable_nodes_have_empty_paths():
    assert dijkstra_paths(CHAIN, 2) == [[], [], []]
    assert dijkstra_path(CHAIN, 1, 0) == []


def test_paths_end_at_target_and_use_existing_edges():
    for source in range(len(LARGER)):
        paths = dijkstra_paths(LARGER, source)
        assert paths[source] == []
        for target, path in enumerate(paths):
            if target == source:
                continue
            assert path[-1] == target
            assert math.isfinite(_cost(LARGER, source, path))


def test_paths_are_no_longer_than_direct_edges_or_two_hops():
    for source in range(len(LARGER)):
        paths = dijkstra_paths(LARGER, source)
        for target, path in enumerate(paths):
            if target == source:
                continue
            best = _cost(LARGER, source, path)
            assert best <= LARGER[source][target]
            for middle in range(len(LARGER)):
                assert best <= LARGER[source][middle] + LARGER[middle][target]


def test_non_square_graph_rejected():
    with pytest.raises(ValueError):
        dijkstra_paths([[0.0, 1.0]], 0)


def test_out_of_range_nodes_rejected():
    with pytest.raises(ValueError):
        dijkstra_paths(CHAIN, 3)
    with pytest.raises(ValueError):
        dijkstra_path(CHAIN, 0, 5)