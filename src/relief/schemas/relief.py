"""Relief planning request schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..models.domain import Gender, Person
from ..services.network.graph import CityGraph
from ..services.routing.models import Algorithm


class BeneficiaryInput(BaseModel):
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    gender: Gender
    city: str = Field(..., min_length=1, description="Living place of the beneficiary.")

    @field_validator("name", "city", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: object) -> object:
        if isinstance(value, str):
            return Gender.parse(value)
        return value

    def to_person(self) -> Person:
        return Person(name=self.name, age=self.age, gender=self.gender, city=self.city)


class RoadInput(BaseModel):
    from_city: str = Field(..., min_length=1)
    to_city: str = Field(..., min_length=1)
    distance: int = Field(..., ge=0)


class NetworkInput(BaseModel):
    cities: List[str] = Field(..., description="City names; position in the list is the vertex index.")
    roads: List[RoadInput] = Field(default_factory=list)

    @field_validator("cities")
    @classmethod
    def _check_cities(cls, value: List[str]) -> List[str]:
        names = [name.strip() for name in value]
        if any(not name for name in names):
            raise ValueError("City names must be non-empty.")
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate city names: {', '.join(duplicates)}")
        return names

    @model_validator(mode="after")
    def _check_roads(self) -> "NetworkInput":
        known = set(self.cities)
        for road in self.roads:
            for name in (road.from_city, road.to_city):
                if name not in known:
                    raise ValueError(f"Road references unknown city '{name}'.")
        return self

    def build_graph(self) -> CityGraph:
        return CityGraph.from_declarations(
            self.cities,
            [(road.from_city, road.to_city, road.distance) for road in self.roads],
        )


class ReliefRequest(BaseModel):
    beneficiaries: List[BeneficiaryInput] = Field(default_factory=list)
    network: NetworkInput
    source: str = Field(..., description="Supply city aid is dispatched from.")
    destination: Optional[str] = Field(
        default=None,
        description="If given, every configured algorithm is compared on source -> destination.",
    )
    algorithm: Optional[Algorithm] = Field(
        default=None,
        description="Algorithm used to route beneficiaries. Defaults to settings.default_algorithm.",
    )

    @model_validator(mode="after")
    def _check_endpoints(self) -> "ReliefRequest":
        known = set(self.network.cities)
        if self.source not in known:
            raise ValueError(f"Source city '{self.source}' not found in the network.")
        if self.destination is not None and self.destination not in known:
            raise ValueError(f"Destination city '{self.destination}' not found in the network.")
        return self

    def people(self) -> list[Person]:
        return [beneficiary.to_person() for beneficiary in self.beneficiaries]
