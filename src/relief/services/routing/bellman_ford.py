"""Full edge relaxation, tolerant of negative weights."""

from __future__ import annotations

from ...models.errors import NegativeCycle
from ..network.graph import CityGraph
from .models import Algorithm, ShortestPathResult


def bellman_ford_shortest_paths(graph: CityGraph, source: int) -> ShortestPathResult:
    """Relax every edge ``V - 1`` times, then verify no edge can still relax.

    Raises ``NegativeCycle`` when a cycle of negative total weight is reachable from
    ``source``. :class:`CityGraph` rejects negative roads, so this only triggers for
    other graph-shaped inputs.
    """
    graph.check_index(source)
    distance: list[int | None] = [None] * graph.vertex_count
    predecessor: list[int | None] = [None] * graph.vertex_count
    distance[source] = 0
    edges = graph.edges

    for _ in range(graph.vertex_count - 1):
        for edge in edges:
            u_dist = distance[edge.source]
            if u_dist is None:
                continue
            candidate = u_dist + edge.weight
            current = distance[edge.target]
            if current is None or candidate < current:
                distance[edge.target] = candidate
                predecessor[edge.target] = edge.source

    for edge in edges:
        u_dist = distance[edge.source]
        if u_dist is None:
            continue
        current = distance[edge.target]
        if current is not None and u_dist + edge.weight < current:
            raise NegativeCycle(
                f"Negative cycle reachable from vertex {source} through edge {edge.source} -> {edge.target}."
            )

    return ShortestPathResult(
        algorithm=Algorithm.BELLMAN_FORD,
        source=source,
        distance=tuple(distance),
        predecessor=tuple(predecessor),
    )
