"""Serializers for relief reports: console tables and JSON-ready dicts."""

from __future__ import annotations

from dataclasses import asdict
from typing import Sequence

from ...models.domain import Person
from ..routing.models import AlgorithmOutcome, BeneficiaryRoute, ReliefReport, RouteStatus

RULE = "-" * 53
ROUTE_RULE = "-" * 56


def format_path(path: Sequence[str]) -> str:
    return " -> ".join(path)


def format_ranked_table(people: Sequence[Person]) -> str:
    lines = [
        "--- Prioritized List of Beneficiaries (Sorted) ---",
        "Rank | Name                 | Age | Gender | City",
        RULE,
    ]
    for rank, person in enumerate(people, start=1):
        lines.append(
            f"{rank:<4} | {person.name:<20} | {person.age:<3} | {person.gender.value:<6} | {person.city}"
        )
    lines.append(RULE)
    lines.append("Time Complexity for Merge Sort: O(n log n)")
    return "\n".join(lines)


def format_outcome(outcome: AlgorithmOutcome) -> str:
    lines = [f"{outcome.algorithm.label}:"]
    if outcome.distance is None:
        lines.append(f"No path exists from {outcome.source} to {outcome.destination}.")
    else:
        lines.append(f"Shortest distance: {outcome.distance}")
        lines.append(f"Path: {format_path(outcome.path)}")
    lines.append(f"Time Complexity: {outcome.algorithm.complexity}")
    return "\n".join(lines)


def format_comparisons(outcomes: Sequence[AlgorithmOutcome]) -> str:
    if not outcomes:
        return ""
    first = outcomes[0]
    sections = [f"--- Shortest Path Results ({first.source} to {first.destination}) ---"]
    sections.extend(format_outcome(outcome) for outcome in outcomes)
    return "\n\n".join(sections)


def format_route_line(route: BeneficiaryRoute) -> str:
    prefix = f"{route.person.name:<21} | "
    if route.status is RouteStatus.CITY_UNKNOWN:
        return prefix + f"City '{route.person.city}' not found in the graph."
    if route.status is RouteStatus.NO_PATH:
        return prefix + f"No path exists to {route.person.city}."
    return prefix + f"Distance: {route.distance}, Path: {format_path(route.path)}"


def format_routes_table(source: str, routes: Sequence[BeneficiaryRoute]) -> str:
    lines = [
        f"--- Routes from {source} to each Beneficiary ---",
        "Beneficiary Name      | Route Information",
        ROUTE_RULE,
    ]
    lines.extend(format_route_line(route) for route in routes)
    lines.append(ROUTE_RULE)
    return "\n".join(lines)


def relief_report_to_text(report: ReliefReport) -> str:
    sections = [format_ranked_table(report.ranked)]
    if report.comparisons:
        sections.append(format_comparisons(report.comparisons))
    sections.append(format_routes_table(report.source, report.routes))
    return "\n\n".join(sections) + "\n"


def relief_report_to_json(report: ReliefReport) -> dict:
    return {
        "source": report.source,
        "destination": report.destination,
        "metadata": report.metadata,
        "ranked": [
            {"rank": rank, **asdict(person), "gender": person.gender.value}
            for rank, person in enumerate(report.ranked, start=1)
        ],
        "comparisons": [
            {
                "algorithm": outcome.algorithm.value,
                "complexity": outcome.algorithm.complexity,
                "distance": outcome.distance,
                "path": list(outcome.path),
            }
            for outcome in report.comparisons
        ],
        "routes": [
            {
                "name": route.person.name,
                "city": route.person.city,
                "status": route.status.value,
                "distance": route.distance,
                "path": list(route.path),
            }
            for route in report.routes
        ],
    }
