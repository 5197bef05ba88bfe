"""Loaders for beneficiary registers, road networks and full relief scenarios."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence

from openpyxl import load_workbook
from pydantic import ValidationError

from ..config import settings
from ..schemas.relief import BeneficiaryInput, NetworkInput, ReliefRequest, RoadInput
from ..services.routing.models import Algorithm

BENEFICIARY_COLUMNS = ("name", "age", "gender", "city")
ROAD_COLUMNS = ("from", "to", "distance")


def _check_header(path: Path, names: Sequence[str], required: Sequence[str]) -> None:
    missing = set(required) - set(names)
    if missing:
        raise ValueError(f"File '{path}' missing columns: {', '.join(sorted(missing))}")


def _iter_csv_rows(path: Path, required: Sequence[str]) -> Iterator[dict[str, object]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"File '{path}' is missing a header row.")
        _check_header(path, [str(name).strip().lower() for name in reader.fieldnames], required)
        for row in reader:
            yield {str(key).strip().lower(): value for key, value in row.items() if key is not None}


def _iter_xlsx_rows(path: Path, required: Sequence[str]) -> Iterator[dict[str, object]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        rows = wb.active.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Workbook '{path}' is empty.")
        names = [str(cell).strip().lower() if cell is not None else "" for cell in header]
        _check_header(path, names, required)
        for row in rows:
            yield {name: value for name, value in zip(names, row) if name}
    finally:
        wb.close()


def _iter_rows(path: Path, required: Sequence[str]) -> Iterator[tuple[int, dict[str, object]]]:
    """Yield ``(row_number, row)`` for non-blank rows, header being row 1."""
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    if path.suffix.lower() in {".xlsx", ".xlsm"}:
        rows = _iter_xlsx_rows(path, required)
    else:
        rows = _iter_csv_rows(path, required)
    for row_number, row in enumerate(rows, start=2):
        if all(value is None or str(value).strip() == "" for value in row.values()):
            continue
        yield row_number, row


def load_beneficiaries(source: Optional[Path] = None) -> tuple[BeneficiaryInput, ...]:
    """Load the beneficiary register (Name, Age, Gender, City) from CSV or XLSX."""
    path = source or settings.beneficiaries_file
    beneficiaries: list[BeneficiaryInput] = []
    for row_number, row in _iter_rows(path, BENEFICIARY_COLUMNS):
        try:
            beneficiaries.append(BeneficiaryInput(**{key: row.get(key) for key in BENEFICIARY_COLUMNS}))
        except ValidationError as exc:
            raise ValueError(f"Invalid beneficiary on row {row_number} of '{path}': {exc}") from exc
    logging.info(f"Loaded {len(beneficiaries)} beneficiaries from {path}")
    return tuple(beneficiaries)


def load_roads(source: Optional[Path] = None) -> tuple[RoadInput, ...]:
    """Load road declarations (From, To, Distance) from CSV or XLSX."""
    path = source or settings.roads_file
    roads: list[RoadInput] = []
    for row_number, row in _iter_rows(path, ROAD_COLUMNS):
        try:
            roads.append(
                RoadInput(
                    from_city=str(row.get("from") or "").strip(),
                    to_city=str(row.get("to") or "").strip(),
                    distance=row.get("distance"),
                )
            )
        except ValidationError as exc:
            raise ValueError(f"Invalid road on row {row_number} of '{path}': {exc}") from exc
    logging.info(f"Loaded {len(roads)} roads from {path}")
    return tuple(roads)


def load_network(source: Optional[Path] = None, cities: Optional[Sequence[str]] = None) -> NetworkInput:
    """Build the network from a road file.

    Without an explicit city list, cities are indexed in order of first appearance.
    """
    roads = load_roads(source)
    if cities is None:
        ordered: dict[str, None] = {}
        for road in roads:
            ordered.setdefault(road.from_city)
            ordered.setdefault(road.to_city)
        cities = list(ordered)
    return NetworkInput(cities=list(cities), roads=list(roads))


def load_request(path: Path) -> ReliefRequest:
    """Load a complete relief scenario from a JSON document."""
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")
    return ReliefRequest.model_validate_json(path.read_text(encoding="utf-8"))


def build_request(
    *,
    source: str,
    destination: Optional[str] = None,
    beneficiaries_file: Optional[Path] = None,
    roads_file: Optional[Path] = None,
    algorithm: Optional[Algorithm] = None,
) -> ReliefRequest:
    return ReliefRequest(
        beneficiaries=list(load_beneficiaries(beneficiaries_file)),
        network=load_network(roads_file),
        source=source,
        destination=destination,
        algorithm=algorithm,
    )
