"""Weighted directed graph on an adjacency matrix, with Dijkstra's shortest paths."""

from __future__ import annotations

import math
from typing import List


class Graph:
    """Directed graph of vertices 0..n-1; a weight of zero means no edge."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.edges: List[List[int]] = [[0] * vertex_count for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of bounds")

    def add_edge(self, src: int, dst: int, weight: int) -> None:
        """Set the weight of the edge src -> dst, replacing any earlier one."""
        self._check(src)
        self._check(dst)
        self.edges[src][dst] = weight


def dijkstra(graph: Graph, source: int) -> List[float]:
    """Shortest distance from source to each vertex; math.inf where unreachable.

    Weights must not be negative.
    """
    graph._check(source)
    distances: List[float] = [math.inf] * graph.vertex_count
    distances[source] = 0
    visited = [False] * graph.vertex_count
    while True:
        frontier = [(d, v) for v, d in enumerate(distances) if not visited[v] and d < math.inf]
        if not frontier:
            return distances
        dist_u, u = min(frontier)
        visited[u] = True
        for v, weight in enumerate(graph.edges[u]):
            if weight and not visited[v] and dist_u + weight < distances[v]:
                distances[v] = dist_u + weight