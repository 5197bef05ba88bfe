"""All-pairs transitive closure projected onto one source."""

from __future__ import annotations

from ..network.graph import CityGraph
from .models import Algorithm, ShortestPathResult


def _closure(graph: CityGraph) -> tuple[list[list[int | None]], list[list[int | None]]]:
    n = graph.vertex_count
    dist: list[list[int | None]] = [[None] * n for _ in range(n)]
    next_hop: list[list[int | None]] = [[None] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0
        next_hop[i][i] = i
    for edge in graph.edges:
        # A self-loop never shortens a path, so the diagonal stays at zero.
        if edge.source == edge.target:
            continue
        # Dense matrix: the last parallel edge declared for a pair wins.
        dist[edge.source][edge.target] = edge.weight
        next_hop[edge.source][edge.target] = edge.target

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            row_i = dist[i]
            hop_i = next_hop[i]
            for j in range(n):
                d_kj = row_k[j]
                if d_kj is None:
                    continue
                through = d_ik + d_kj
                if row_i[j] is None or through < row_i[j]:
                    row_i[j] = through
                    hop_i[j] = hop_i[k]
    return dist, next_hop


def _predecessor_from_next_hops(next_hop: list[list[int | None]], source: int, target: int) -> int | None:
    current = source
    for _ in range(len(next_hop)):
        step = next_hop[current][target]
        if step is None:
            return None
        if step == target:
            return current
        current = step
    return None


def floyd_warshall_shortest_paths(graph: CityGraph, source: int) -> ShortestPathResult:
    """Run the O(V^3) closure and read the ``source`` row off the result.

    Unlike the adjacency-based methods, only the most recently declared weight of a
    set of parallel edges is seen here. Predecessors are recovered by walking the
    next-hop chain from ``source`` until the step that lands on each target.
    """
    graph.check_index(source)
    dist, next_hop = _closure(graph)

    predecessor: list[int | None] = [None] * graph.vertex_count
    for target in range(graph.vertex_count):
        if target == source or dist[source][target] is None:
            continue
        predecessor[target] = _predecessor_from_next_hops(next_hop, source, target)

    return ShortestPathResult(
        algorithm=Algorithm.FLOYD_WARSHALL,
        source=source,
        distance=tuple(dist[source]),
        predecessor=tuple(predecessor),
    )
