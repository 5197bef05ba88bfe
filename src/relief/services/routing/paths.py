"""Path reconstruction from predecessor tables."""

from __future__ import annotations

from ...models.errors import GraphError
from ..network.graph import CityGraph
from .models import ShortestPathResult


def predecessor_chain(result: ShortestPathResult, target: int) -> list[int]:
    """Vertex indices from the chain's root to ``target``; empty when unreachable."""
    if not result.is_reachable(target):
        return []
    limit = len(result.predecessor)
    chain: list[int] = []
    current: int | None = target
    while current is not None:
        chain.append(current)
        if len(chain) > limit:
            raise GraphError(f"Predecessor table for vertex {target} contains a cycle.")
        current = result.predecessor[current]
    chain.reverse()
    return chain


def reconstruct_path(graph: CityGraph, result: ShortestPathResult, target: int) -> list[str]:
    graph.check_index(target)
    return [graph.name_of(index) for index in predecessor_chain(result, target)]


def path_cost(graph: CityGraph, chain: list[int]) -> int | None:
    """Sum of the cheapest edge between consecutive vertices, or None if one is missing."""
    total = 0
    for u, v in zip(chain, chain[1:]):
        weight = graph.edge_weight(u, v)
        if weight is None:
            return None
        total += weight
    return total
