"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ...models.domain import Person


class Algorithm(str, Enum):
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman_ford"
    FLOYD_WARSHALL = "floyd_warshall"

    @property
    def label(self) -> str:
        return {
            Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
            Algorithm.BELLMAN_FORD: "Bellman-Ford Algorithm",
            Algorithm.FLOYD_WARSHALL: "Floyd-Warshall Algorithm",
        }[self]

    @property
    def complexity(self) -> str:
        return {
            Algorithm.DIJKSTRA: "O(E log V)",
            Algorithm.BELLMAN_FORD: "O(V * E)",
            Algorithm.FLOYD_WARSHALL: "O(V^3)",
        }[self]


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Single-source distances and predecessors, indexed by vertex.

    ``None`` in ``distance`` means the vertex is unreachable; ``None`` in
    ``predecessor`` means the vertex has no prior vertex on its path.
    """

    algorithm: Algorithm
    source: int
    distance: tuple[Optional[int], ...]
    predecessor: tuple[Optional[int], ...]

    def is_reachable(self, target: int) -> bool:
        return self.distance[target] is not None


class RouteStatus(str, Enum):
    ROUTED = "routed"
    CITY_UNKNOWN = "city_unknown"
    NO_PATH = "no_path"


@dataclass(slots=True)
class BeneficiaryRoute:
    person: Person
    status: RouteStatus
    distance: Optional[int] = None
    path: List[str] = field(default_factory=list)


@dataclass(slots=True)
class AlgorithmOutcome:
    algorithm: Algorithm
    source: str
    destination: str
    distance: Optional[int]
    path: List[str]


@dataclass(slots=True)
class ReliefReport:
    source: str
    destination: Optional[str]
    ranked: List[Person]
    comparisons: List[AlgorithmOutcome]
    routes: List[BeneficiaryRoute]
    metadata: dict
