"""Dijkstra shortest paths over a dense distance matrix."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def _shortest_tree(graph: Sequence[Sequence[float]], source: int) -> list[int | None]:
    """Return each node's predecessor on a shortest path from ``source``.

    ``graph[u][v]`` is the distance from ``u`` to ``v``; infinity means no edge.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a node of the graph")
    dist = [math.inf] * size
    previous: list[int | None] = [None] * size
    visited = [False] * size
    dist[source] = 0.0
    heap = [(0.0, source)]
    while heap:
        distance, u = heapq.heappop(heap)
        if visited[u] or distance > dist[u]:
            continue
        visited[u] = True
        for v, weight in enumerate(graph[u]):
            if visited[v]:
                continue
            alt = distance + weight
            if alt < dist[v]:
                dist[v] = alt
                previous[v] = u
                heapq.heappush(heap, (alt, v))
    return previous


def _walk_back(previous: list[int | None], target: int) -> list[int]:
    if not 0 <= target < len(previous):
        raise ValueError(f"target {target} is not a node of the graph")
    hops = []
    node: int | None = target
    while previous[node] is not None:
        hops.append(node)
        node = previous[node]
    hops.reverse()
    return hops


def dijkstra_paths(graph: Sequence[Sequence[float]], source: int) -> list[list[int]]:
    """Return, for every node, the hops from ``source`` to it.

    The source itself is not included; the path to the source or to an
    unreachable node is empty.
    """
    previous = _shortest_tree(graph, source)
    return [_walk_back(previous, target) for target in range(len(graph))]


def dijkstra_path(graph: Sequence[Sequence[float]], source: int, target: int) -> list[int]:
    """Return the hops from ``source`` to ``target``, empty if unreachable."""
    return _walk_back(_shortest_tree(graph, source), target)