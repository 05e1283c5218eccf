"""
errors.py — Typed Graph Errors
==============================
Every structural misuse of a graph surfaces as one of these.  Query
outcomes (not bipartite, no cycle, not isomorphic) are plain return
values and never raise.

All errors inherit from GraphError, so callers can catch the family in
one place and branch on `kind` when they need to tell them apart.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GraphError(Exception):
    """Base error for graph construction and lookup."""

    message: str

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass
class DuplicateVertex(GraphError):
    """A label was added to a VertexIndex twice."""

    label: Any = None


@dataclass
class UnknownVertex(GraphError):
    """A label (or index) that was never added was referenced."""

    label: Any = None


@dataclass
class DuplicateEdge(GraphError):
    """The same unordered vertex pair was declared twice where edges must be unique."""

    source: Any = None
    target: Any = None


@dataclass
class UnsupportedEdge(GraphError):
    """The representation cannot store this kind of edge (e.g. directed incidence)."""

    source: Any = None
    target: Any = None


@dataclass
class SizeMismatch(GraphError):
    """Two isomorphism candidates differ in vertex count, or a matrix is not square."""

    expected: Optional[int] = None
    actual: Optional[int] = None


__all__ = [
    "GraphError",
    "DuplicateVertex",
    "UnknownVertex",
    "DuplicateEdge",
    "UnsupportedEdge",
    "SizeMismatch",
]
