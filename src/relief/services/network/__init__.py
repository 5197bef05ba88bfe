"""City network exports."""

from .graph import CityGraph, Edge

__all__ = ["CityGraph", "Edge"]
