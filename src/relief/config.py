"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="RELIEF_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Disaster Aid Priority & Routing"
    beneficiaries_file: Path = Field(
        default=Path("data/beneficiaries.csv"),
        description="Registered flood-affected people (Name, Age, Gender, City).",
    )
    roads_file: Path = Field(
        default=Path("data/roads.csv"),
        description="Road network declarations (From, To, Distance).",
    )
    child_max_age: int = Field(default=12, ge=0, description="Oldest age still ranked as a child.")
    elder_min_age: int = Field(default=60, ge=1, description="Youngest age ranked as an elder.")
    default_algorithm: Literal["dijkstra", "bellman_ford", "floyd_warshall"] = Field(
        default="dijkstra",
        description="Algorithm used when routing every beneficiary from the supply source.",
    )
    compare_algorithms: tuple[str, ...] = Field(
        default=("dijkstra", "bellman_ford", "floyd_warshall"),
        description="Algorithms run side by side for a source/destination pair.",
    )
    log_level: str = Field(default="INFO")

    @field_validator("beneficiaries_file", "roads_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("compare_algorithms", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            # Try comma-separated
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("compare_algorithms")
    @classmethod
    def _check_algorithm_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        known = {"dijkstra", "bellman_ford", "floyd_warshall"}
        unknown = [name for name in value if name not in known]
        if unknown:
            raise ValueError(f"Unknown shortest-path algorithm(s): {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def _check_age_bands(self) -> "Settings":
        if self.elder_min_age <= self.child_max_age:
            raise ValueError("elder_min_age must be greater than child_max_age")
        return self


settings = Settings()
