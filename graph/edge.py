"""
edge.py — Graph Edge
====================
Immutable record of one `add_edge` call.

Design decisions:
  - `source` and `target` are vertex labels, NOT indices.  This keeps
    edges serialisable and independent of any one representation.
  - `multiplicity` replaces weights: an edge declared with multiplicity 3
    stands for three parallel edges between the same endpoints.
  - `directed` is stored per-edge so a single graph can mix both kinds;
    the graph-level flag only supplies the default.
  - `id` is the position in the owning graph's edge log.  Neighbour
    entries carry it so a traversal can recognise the edge it arrived by.
"""

from dataclasses import dataclass
from typing import Hashable, Optional, Sequence, Union


@dataclass(frozen=True)
class Edge:
    source:       Hashable
    target:       Hashable
    directed:     Optional[bool] = None   # None → use the graph default
    multiplicity: int            = 1
    id:           Optional[int]  = None

    def __post_init__(self):
        if self.directed is not None and not isinstance(self.directed, bool):
            raise ValueError(f"Edge directed flag must be a boolean, got {self.directed!r}")
        if not isinstance(self.multiplicity, int) or isinstance(self.multiplicity, bool):
            raise ValueError(f"Edge multiplicity must be an integer, got {self.multiplicity!r}")
        if self.multiplicity < 1:
            raise ValueError(f"Edge multiplicity must be >= 1, got {self.multiplicity}")

    # ------------------------------------------------------------------
    # Coercion / serialisation
    # ------------------------------------------------------------------
    @classmethod
    def coerce(cls, spec: Union["Edge", Sequence, dict]) -> "Edge":
        """
        Accept an Edge, a dict, or a tuple `(a, b[, directed[, multiplicity]])`.
        """
        if isinstance(spec, Edge):
            return spec
        if isinstance(spec, dict):
            return cls.from_dict(spec)
        if not isinstance(spec, (list, tuple)):
            raise ValueError(f"Edge must be a list, tuple or dict, got {spec!r}")
        if not 2 <= len(spec) <= 4:
            raise ValueError(f"Edge tuple must have 2 to 4 items, got {len(spec)}")
        return cls(*spec)

    def to_dict(self) -> dict:
        return {
            "source":       self.source,
            "target":       self.target,
            "directed":     self.directed,
            "multiplicity": self.multiplicity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        missing = [key for key in ("source", "target") if key not in data]
        if missing:
            raise ValueError(f"Edge dict is missing {', '.join(missing)}")
        return cls(
            source=data["source"],
            target=data["target"],
            directed=data.get("directed"),
            multiplicity=data.get("multiplicity", 1),
        )

    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, x{self.multiplicity})"
