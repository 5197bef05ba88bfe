"""Relief routing orchestration service."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ...config import settings
from ...models.domain import Person
from ...schemas.relief import ReliefRequest
from ..network.graph import CityGraph
from ..ranking.priority import AgeThresholds, rank_beneficiaries
from .engine import shortest_paths
from .models import (
    Algorithm,
    AlgorithmOutcome,
    BeneficiaryRoute,
    ReliefReport,
    RouteStatus,
    ShortestPathResult,
)
from .paths import reconstruct_path


def route_beneficiaries(
    ranked: Sequence[Person],
    graph: CityGraph,
    result: ShortestPathResult,
) -> list[BeneficiaryRoute]:
    """Report distance and path from the result's source to every beneficiary, in order."""
    routes: list[BeneficiaryRoute] = []
    for person in ranked:
        if not graph.has_city(person.city):
            logging.warning(f"City '{person.city}' of beneficiary {person.name} not found in the graph")
            routes.append(BeneficiaryRoute(person=person, status=RouteStatus.CITY_UNKNOWN))
            continue
        target = graph.index_of(person.city)
        if not result.is_reachable(target):
            logging.warning(f"No path exists to {person.city} for beneficiary {person.name}")
            routes.append(BeneficiaryRoute(person=person, status=RouteStatus.NO_PATH))
            continue
        routes.append(
            BeneficiaryRoute(
                person=person,
                status=RouteStatus.ROUTED,
                distance=result.distance[target],
                path=reconstruct_path(graph, result, target),
            )
        )
    return routes


def compare_algorithms(
    graph: CityGraph,
    source: str,
    destination: str,
    algorithms: Iterable[Algorithm | str] | None = None,
) -> list[AlgorithmOutcome]:
    """Run each algorithm from ``source`` and report its view of ``destination``."""
    start = graph.index_of(source)
    finish = graph.index_of(destination)
    outcomes: list[AlgorithmOutcome] = []
    for algorithm in algorithms or settings.compare_algorithms:
        result = shortest_paths(graph, start, algorithm)
        outcomes.append(
            AlgorithmOutcome(
                algorithm=result.algorithm,
                source=source,
                destination=destination,
                distance=result.distance[finish],
                path=reconstruct_path(graph, result, finish),
            )
        )
    return outcomes


def plan_relief(payload: ReliefRequest, *, thresholds: AgeThresholds | None = None) -> ReliefReport:
    """Rank beneficiaries, compare algorithms and route everyone from the supply source."""
    graph = payload.network.build_graph()
    ranked = rank_beneficiaries(payload.people(), thresholds=thresholds)
    logging.info(f"Ranked {len(ranked)} beneficiaries")

    comparisons: list[AlgorithmOutcome] = []
    if payload.destination is not None:
        comparisons = compare_algorithms(graph, payload.source, payload.destination)

    algorithm = Algorithm(payload.algorithm or settings.default_algorithm)
    result = shortest_paths(graph, graph.index_of(payload.source), algorithm)
    routes = route_beneficiaries(ranked, graph, result)

    status_counts = {status.value: 0 for status in RouteStatus}
    for route in routes:
        status_counts[route.status.value] += 1
    logging.info(
        f"Routed beneficiaries from {payload.source} using {algorithm.value}: {status_counts}"
    )

    metadata = {
        "routing_algorithm": algorithm.value,
        "cities": graph.vertex_count,
        "roads": len(graph.edges),
        "route_status_counts": status_counts,
    }
    return ReliefReport(
        source=payload.source,
        destination=payload.destination,
        ranked=ranked,
        comparisons=comparisons,
        routes=routes,
        metadata=metadata,
    )
