"""Single entry point selecting a shortest-path algorithm by name."""

from __future__ import annotations

import logging
import time

from ..network.graph import CityGraph
from .bellman_ford import bellman_ford_shortest_paths
from .dijkstra import dijkstra_shortest_paths
from .floyd_warshall import floyd_warshall_shortest_paths
from .models import Algorithm, ShortestPathResult


def shortest_paths(
    graph: CityGraph,
    source: int,
    algorithm: Algorithm | str = Algorithm.DIJKSTRA,
) -> ShortestPathResult:
    algorithm = Algorithm(algorithm)
    graph.check_index(source)
    started = time.perf_counter()
    match algorithm:
        case Algorithm.DIJKSTRA:
            result = dijkstra_shortest_paths(graph, source)
        case Algorithm.BELLMAN_FORD:
            result = bellman_ford_shortest_paths(graph, source)
        case Algorithm.FLOYD_WARSHALL:
            result = floyd_warshall_shortest_paths(graph, source)
    logging.debug(
        f"{algorithm.value} from vertex {source} finished in {(time.perf_counter() - started) * 1000:.2f} ms"
    )
    return result
