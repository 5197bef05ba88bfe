"""Beneficiary prioritization.

People are served children first, then elders, then adults. Inside an age band women
come before men; children are ordered youngest first while elders and adults are
ordered oldest first. Names break the remaining ties alphabetically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ...config import settings
from ...models.domain import AgeGroup, Gender, Person


@dataclass(frozen=True, slots=True)
class AgeThresholds:
    child_max_age: int = field(default_factory=lambda: settings.child_max_age)
    elder_min_age: int = field(default_factory=lambda: settings.elder_min_age)

    def __post_init__(self) -> None:
        if self.elder_min_age <= self.child_max_age:
            raise ValueError("elder_min_age must be greater than child_max_age")


def age_group(person: Person, thresholds: AgeThresholds | None = None) -> AgeGroup:
    thresholds = thresholds or AgeThresholds()
    if person.age <= thresholds.child_max_age:
        return AgeGroup.CHILD
    if person.age >= thresholds.elder_min_age:
        return AgeGroup.ELDER
    return AgeGroup.ADULT


def priority_key(person: Person, thresholds: AgeThresholds | None = None) -> tuple:
    """Sort key where smaller tuples are served first."""
    group = age_group(person, thresholds)
    gender_rank = 0 if person.gender is Gender.FEMALE else 1
    age_rank = person.age if group is AgeGroup.CHILD else -person.age
    return (int(group), gender_rank, age_rank, person.name)


def higher_priority(a: Person, b: Person, thresholds: AgeThresholds | None = None) -> bool:
    """Return True when ``a`` must be served strictly before ``b``."""
    return priority_key(a, thresholds) < priority_key(b, thresholds)


def rank_beneficiaries(
    people: Iterable[Person],
    *,
    thresholds: AgeThresholds | None = None,
) -> list[Person]:
    """Return a new list of ``people`` in service order.

    ``sorted`` is stable, so records that compare equal on every key (identical
    records) keep their input order.
    """
    thresholds = thresholds or AgeThresholds()
    return sorted(people, key=lambda person: priority_key(person, thresholds))
