import json
from pathlib import Path

import pytest
from openpyxl import Workbook

from src.relief.data import scenario_repository
from src.relief.models.domain import Gender
from src.relief.services.routing.models import Algorithm


def _write_csv(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def _write_xlsx(path: Path, rows: list[list]) -> Path:
    wb = Workbook()
    sheet = wb.active
    for row in rows:
        sheet.append(row)
    wb.save(path)
    return path


def test_load_beneficiaries_from_csv(tmp_path: Path):
    path = _write_csv(tmp_path / "people.csv", "Name,Age,Gender,City\nSam,8,m,X\nAmy,8,F,X\n\n")

    beneficiaries = scenario_repository.load_beneficiaries(path)

    assert [b.name for b in beneficiaries] == ["Sam", "Amy"]
    assert beneficiaries[0].gender is Gender.MALE
    assert beneficiaries[1].age == 8


def test_load_beneficiaries_from_xlsx(tmp_path: Path):
    path = _write_xlsx(
        tmp_path / "people.xlsx",
        [["Name", "Age", "Gender", "City"], ["Joe", 70, "M", "Y"], [None, None, None, None], ["Eve", 30, "F", "Z"]],
    )

    beneficiaries = scenario_repository.load_beneficiaries(path)

    assert [(b.name, b.age, b.city) for b in beneficiaries] == [("Joe", 70, "Y"), ("Eve", 30, "Z")]


def test_invalid_beneficiary_row_names_the_row(tmp_path: Path):
    path = _write_csv(tmp_path / "people.csv", "Name,Age,Gender,City\nSam,8,M,X\nBad,-4,M,X\n")

    with pytest.raises(ValueError, match="row 3"):
        scenario_repository.load_beneficiaries(path)


def test_missing_columns_are_reported(tmp_path: Path):
    path = _write_csv(tmp_path / "people.csv", "Name,Age\nSam,8\n")

    with pytest.raises(ValueError, match="missing columns"):
        scenario_repository.load_beneficiaries(path)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        scenario_repository.load_roads(tmp_path / "absent.csv")


def test_load_network_orders_cities_by_first_appearance(tmp_path: Path):
    path = _write_csv(tmp_path / "roads.csv", "From,To,Distance\nB,C,3\nA,B,4\nA,C,10\n")

    network = scenario_repository.load_network(path)

    assert network.cities == ["B", "C", "A"]
    assert len(network.roads) == 3


def test_load_network_with_explicit_cities(tmp_path: Path):
    path = _write_xlsx(tmp_path / "roads.xlsx", [["From", "To", "Distance"], ["A", "B", 4]])

    network = scenario_repository.load_network(path, cities=["A", "B", "Isolated"])

    assert network.cities == ["A", "B", "Isolated"]
    assert network.roads[0].distance == 4


def test_negative_road_row_is_rejected(tmp_path: Path):
    path = _write_csv(tmp_path / "roads.csv", "From,To,Distance\nA,B,-1\n")

    with pytest.raises(ValueError, match="row 2"):
        scenario_repository.load_roads(path)


def test_load_request_from_json(tmp_path: Path):
    path = tmp_path / "scenario.json"
    path.write_text(
        json.dumps(
            {
                "beneficiaries": [{"name": "Sam", "age": 8, "gender": "M", "city": "B"}],
                "network": {"cities": ["A", "B"], "roads": [{"from_city": "A", "to_city": "B", "distance": 2}]},
                "source": "A",
                "destination": "B",
                "algorithm": "bellman_ford",
            }
        ),
        encoding="utf-8",
    )

    request = scenario_repository.load_request(path)

    assert request.source == "A"
    assert request.algorithm is Algorithm.BELLMAN_FORD
    assert request.network.roads[0].distance == 2


def test_build_request_combines_files(tmp_path: Path):
    people = _write_csv(tmp_path / "people.csv", "Name,Age,Gender,City\nSam,8,M,B\n")
    roads = _write_csv(tmp_path / "roads.csv", "From,To,Distance\nA,B,4\n")

    request = scenario_repository.build_request(
        source="A", destination="B", beneficiaries_file=people, roads_file=roads
    )

    assert request.network.cities == ["A", "B"]
    assert request.people()[0].city == "B"


def test_header_only_csv_with_wrong_columns_is_rejected(tmp_path: Path):
    path = _write_csv(tmp_path / "people.csv", "Name,Age\n")

    with pytest.raises(ValueError, match="missing columns"):
        scenario_repository.load_beneficiaries(path)


def test_header_only_workbook_with_wrong_columns_is_rejected(tmp_path: Path):
    path = _write_xlsx(tmp_path / "roads.xlsx", [["From", "To"]])

    with pytest.raises(ValueError, match="missing columns"):
        scenario_repository.load_roads(path)
