"""Directed weighted city graph used by the shortest-path engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from ...models.errors import IndexOutOfRange, InvalidSize, NegativeWeight, UnknownCity


@dataclass(frozen=True, slots=True)
class Edge:
    source: int
    target: int
    weight: int


class CityGraph:
    """Fixed-size directed multigraph whose vertices are named after cities.

    Vertex slots ``0..vertex_count-1`` are allocated up front and bound to names with
    :meth:`assign_city_name`. Parallel edges are kept as separate entries both in the
    edge list and in the adjacency of their source vertex.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise InvalidSize(f"Vertex count must be >= 0, got {vertex_count}.")
        self._vertex_count = vertex_count
        self._city_to_index: dict[str, int] = {}
        self._index_to_city: dict[int, str] = {}
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertex_count)]
        self._edges: list[Edge] = []

    @classmethod
    def from_declarations(
        cls,
        cities: Sequence[str],
        roads: Iterable[tuple[str, str, int]] = (),
    ) -> "CityGraph":
        """Build a graph binding ``cities[i]`` to vertex ``i`` and adding every road."""
        graph = cls(len(cities))
        for index, name in enumerate(cities):
            graph.assign_city_name(name, index)
        for from_city, to_city, weight in roads:
            graph.add_edge(from_city, to_city, weight)
        logging.info(f"Built city graph with {graph.vertex_count} cities and {len(graph.edges)} roads")
        return graph

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def cities(self) -> dict[str, int]:
        return dict(self._city_to_index)

    def check_index(self, index: int) -> int:
        if not 0 <= index < self._vertex_count:
            raise IndexOutOfRange(f"Vertex index {index} outside [0, {self._vertex_count}).")
        return index

    def assign_city_name(self, name: str, index: int) -> None:
        """Bind ``name`` to vertex ``index``.

        Rebinding an index drops its previous name. Binding a name that already belongs
        to another index moves it; that index is left unnamed.
        """
        self.check_index(index)
        previous_name = self._index_to_city.get(index)
        if previous_name is not None and previous_name != name:
            del self._city_to_index[previous_name]
        previous_index = self._city_to_index.get(name)
        if previous_index is not None and previous_index != index:
            del self._index_to_city[previous_index]
        self._city_to_index[name] = index
        self._index_to_city[index] = name

    def add_edge(self, from_city: str, to_city: str, weight: int) -> None:
        start = self.index_of(from_city)
        finish = self.index_of(to_city)
        if weight < 0:
            raise NegativeWeight(f"Road {from_city} -> {to_city} has negative distance {weight}.")
        edge = Edge(start, finish, weight)
        self._adjacency[start].append(edge)
        self._edges.append(edge)

    def index_of(self, name: str) -> int:
        try:
            return self._city_to_index[name]
        except KeyError:
            raise UnknownCity(f"City '{name}' not found in the graph.") from None

    def has_city(self, name: str) -> bool:
        return name in self._city_to_index

    def name_of(self, index: int) -> str:
        self.check_index(index)
        try:
            return self._index_to_city[index]
        except KeyError:
            raise UnknownCity(f"Vertex {index} has no city name.") from None

    def neighbors(self, index: int) -> Iterator[Edge]:
        return iter(self._adjacency[self.check_index(index)])

    def edge_weight(self, source: int, target: int) -> int | None:
        """Cheapest weight among the parallel edges ``source -> target``, if any."""
        weights = [edge.weight for edge in self.neighbors(source) if edge.target == target]
        return min(weights) if weights else None
