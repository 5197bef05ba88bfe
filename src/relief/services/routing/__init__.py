"""Shortest-path engine and relief routing exports."""

from .bellman_ford import bellman_ford_shortest_paths
from .dijkstra import dijkstra_shortest_paths
from .engine import shortest_paths
from .floyd_warshall import floyd_warshall_shortest_paths
from .models import Algorithm, ShortestPathResult
from .paths import predecessor_chain, reconstruct_path

__all__ = [
    "Algorithm",
    "ShortestPathResult",
    "bellman_ford_shortest_paths",
    "dijkstra_shortest_paths",
    "floyd_warshall_shortest_paths",
    "predecessor_chain",
    "reconstruct_path",
    "shortest_paths",
]
