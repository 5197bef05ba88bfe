"""Priority-queue relaxation over the adjacency lists."""

from __future__ import annotations

import heapq

from ..network.graph import CityGraph
from .models import Algorithm, ShortestPathResult


def dijkstra_shortest_paths(graph: CityGraph, source: int) -> ShortestPathResult:
    """Compute single-source shortest paths in O(E log V).

    Decrease-key is simulated by pushing a fresh heap entry; entries whose recorded
    distance is worse than the vertex's current best are skipped when popped.
    """
    graph.check_index(source)
    distance: list[int | None] = [None] * graph.vertex_count
    predecessor: list[int | None] = [None] * graph.vertex_count
    distance[source] = 0
    heap: list[tuple[int, int]] = [(0, source)]

    while heap:
        u_dist, u = heapq.heappop(heap)
        if u_dist > distance[u]:
            continue
        for edge in graph.neighbors(u):
            candidate = u_dist + edge.weight
            current = distance[edge.target]
            if current is None or candidate < current:
                distance[edge.target] = candidate
                predecessor[edge.target] = u
                heapq.heappush(heap, (candidate, edge.target))

    return ShortestPathResult(
        algorithm=Algorithm.DIJKSTRA,
        source=source,
        distance=tuple(distance),
        predecessor=tuple(predecessor),
    )
