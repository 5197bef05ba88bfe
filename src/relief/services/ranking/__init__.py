"""Beneficiary ranking exports."""

from .priority import AgeThresholds, age_group, higher_priority, priority_key, rank_beneficiaries

__all__ = [
    "AgeThresholds",
    "age_group",
    "higher_priority",
    "priority_key",
    "rank_beneficiaries",
]
