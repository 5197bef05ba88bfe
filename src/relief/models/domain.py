"""Domain models for beneficiary records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Gender(str, Enum):
    FEMALE = "F"
    MALE = "M"

    @classmethod
    def parse(cls, value: str) -> "Gender":
        """Accept ``M``/``F`` or ``Male``/``Female`` in any case."""
        normalized = value.strip().upper()
        if normalized in {"F", "FEMALE"}:
            return cls.FEMALE
        if normalized in {"M", "MALE"}:
            return cls.MALE
        raise ValueError(f"Unknown gender '{value}'. Expected M or F.")


class AgeGroup(IntEnum):
    """Age bands in priority order; lower values are served first."""

    CHILD = 0
    ELDER = 1
    ADULT = 2


@dataclass(frozen=True, slots=True)
class Person:
    """A flood-affected beneficiary awaiting aid."""

    name: str
    age: int
    gender: Gender
    city: str
