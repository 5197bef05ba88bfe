from src.relief.models.domain import Gender, Person
from src.relief.services.outputs.formatter import (
    format_comparisons,
    format_ranked_table,
    format_route_line,
    relief_report_to_json,
    relief_report_to_text,
)
from src.relief.services.routing.models import (
    Algorithm,
    AlgorithmOutcome,
    BeneficiaryRoute,
    ReliefReport,
    RouteStatus,
)


def _person(name: str, age: int, gender: Gender, city: str) -> Person:
    return Person(name=name, age=age, gender=gender, city=city)


def _report() -> ReliefReport:
    amy = _person("Amy", 8, Gender.FEMALE, "C")
    joe = _person("Joe", 70, Gender.MALE, "Atlantis")
    eve = _person("Eve", 30, Gender.FEMALE, "D")
    return ReliefReport(
        source="A",
        destination="C",
        ranked=[amy, joe, eve],
        comparisons=[
            AlgorithmOutcome(Algorithm.DIJKSTRA, "A", "C", 7, ["A", "B", "C"]),
            AlgorithmOutcome(Algorithm.FLOYD_WARSHALL, "A", "C", 7, ["A", "B", "C"]),
        ],
        routes=[
            BeneficiaryRoute(amy, RouteStatus.ROUTED, 7, ["A", "B", "C"]),
            BeneficiaryRoute(joe, RouteStatus.CITY_UNKNOWN),
            BeneficiaryRoute(eve, RouteStatus.NO_PATH),
        ],
        metadata={"routing_algorithm": "dijkstra"},
    )


def test_ranked_table_lists_people_in_order():
    table = format_ranked_table(_report().ranked)
    lines = table.splitlines()

    assert lines[1].startswith("Rank | Name")
    assert lines[3] == "1    | Amy                  | 8   | F      | C"
    assert lines[4].startswith("2    | Joe")


def test_route_lines_cover_every_status():
    routes = _report().routes

    assert format_route_line(routes[0]).endswith("Distance: 7, Path: A -> B -> C")
    assert format_route_line(routes[1]).endswith("City 'Atlantis' not found in the graph.")
    assert format_route_line(routes[2]).endswith("No path exists to D.")


def test_comparison_section_includes_complexity():
    text = format_comparisons(_report().comparisons)

    assert text.startswith("--- Shortest Path Results (A to C) ---")
    assert "Dijkstra's Algorithm:\nShortest distance: 7\nPath: A -> B -> C\nTime Complexity: O(E log V)" in text
    assert "Time Complexity: O(V^3)" in text


def test_comparison_without_path():
    outcome = AlgorithmOutcome(Algorithm.BELLMAN_FORD, "A", "B", None, [])

    assert "No path exists from A to B." in format_comparisons([outcome])


def test_report_text_contains_all_sections():
    text = relief_report_to_text(_report())

    assert "Prioritized List of Beneficiaries" in text
    assert "Shortest Path Results" in text
    assert "--- Routes from A to each Beneficiary ---" in text
    assert text.endswith("\n")


def test_report_json_is_serializable_shape():
    payload = relief_report_to_json(_report())

    assert payload["ranked"][0] == {"rank": 1, "name": "Amy", "age": 8, "gender": "F", "city": "C"}
    assert payload["comparisons"][1]["algorithm"] == "floyd_warshall"
    assert [route["status"] for route in payload["routes"]] == ["routed", "city_unknown", "no_path"]
    assert payload["routes"][1]["path"] == []


def test_ranked_table_ends_with_sort_complexity():
    table = format_ranked_table([_person("Amy", 8, Gender.FEMALE, "C")])

    assert table.splitlines()[-1] == "Time Complexity for Merge Sort: O(n log n)"
