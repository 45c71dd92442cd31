"""Shortest paths on weighted graphs given as adjacency matrices."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence


def dijkstra(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every vertex.

    ``graph[u][v]`` is the weight of the edge from u to v; 0 means no edge.
    Unreachable vertices get ``math.inf``.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("graph must be a square matrix")
    if not 0 <= source < n:
        raise ValueError(f"source must be between 0 and {n - 1}")
    if any(weight < 0 for row in graph for weight in row):
        raise ValueError("edge weights must be non-negative")

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in enumerate(graph[u]):
            if weight and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist