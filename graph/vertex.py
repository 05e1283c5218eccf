"""
vertex.py — Vertex Index & Traversal State
==========================================
Bidirectional mapping between caller-supplied vertex labels and the dense
integer indices every representation stores internally.

Design decisions:
  - Indices are handed out in insertion order and never reused, so an
    index stays valid for the whole life of the graph.
  - No removal; graphs only grow.
  - VertexState is keyed by vertex index in every traversal.
"""

from enum import Enum
from typing import Dict, Hashable, Iterator, List

from graph.errors import DuplicateVertex, UnknownVertex


# ---------------------------------------------------------------------------
# Vertex State Enum — per-run traversal bookkeeping
# ---------------------------------------------------------------------------
class VertexState(Enum):
    UNVISITED = "unvisited"   # not reached yet in this run
    ON_STACK  = "on_stack"    # ancestor on the active DFS path
    VISITED   = "visited"     # fully processed


# ---------------------------------------------------------------------------
# VertexIndex
# ---------------------------------------------------------------------------
class VertexIndex:
    """
    Attributes:
        _index  : {label: index}
        _labels : [label, …] — position is the index
    """

    def __init__(self, labels=()):
        self._index:  Dict[Hashable, int] = {}
        self._labels: List[Hashable]      = []
        for label in labels:
            self.add(label)

    def add(self, label: Hashable) -> int:
        """Assign the next sequential index to `label`."""
        if label in self._index:
            raise DuplicateVertex(f"Vertex already exists: {label}", label=label)
        idx = len(self._labels)
        self._index[label] = idx
        self._labels.append(label)
        return idx

    def index_of(self, label: Hashable) -> int:
        try:
            return self._index[label]
        except (KeyError, TypeError):
            raise UnknownVertex(f"Unknown vertex: {label}", label=label) from None

    def label_of(self, index: int) -> Hashable:
        if not 0 <= index < len(self._labels):
            raise UnknownVertex(f"No vertex at index {index}", label=index)
        return self._labels[index]

    def labels(self) -> List[Hashable]:
        return list(self._labels)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label) -> bool:
        return label in self._index

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._labels)

    def __repr__(self) -> str:
        return f"VertexIndex({self._labels!r})"
