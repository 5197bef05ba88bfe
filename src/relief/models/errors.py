"""Error kinds raised by the ranking and routing core."""

from __future__ import annotations


class ReliefError(Exception):
    """Base class for caller-input errors."""


class GraphError(ReliefError, ValueError):
    """Invalid graph construction or query."""


class InvalidSize(GraphError):
    """Negative vertex count."""


class IndexOutOfRange(GraphError, IndexError):
    """Vertex index outside ``[0, vertex_count)``."""


class UnknownCity(GraphError, LookupError):
    """City name that was never bound to a vertex."""


class NegativeWeight(GraphError):
    """Road declared with a negative distance."""


class NegativeCycle(GraphError):
    """Edge relaxation still improved a distance after ``V - 1`` passes."""
