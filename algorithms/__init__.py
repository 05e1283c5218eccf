"""
algorithms/__init__.py — Query Registry
=======================================
Single source of truth for every graph query the service exposes.

    from algorithms import REGISTRY, get_query

REGISTRY is a dict:
    {
        "cycle": QueryInfo(key, label, fn, required, optional, …),
        …
    }

QueryInfo is a lightweight dataclass.  The HTTP layer consumes it, so
exposing a new query is: write the function, add one entry here.
Isomorphism is not listed because it runs on two matrices rather than
on the stored graph.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all query functions
# ---------------------------------------------------------------------------
from algorithms.bipartite    import bipartition, is_bipartite, two_coloring
from algorithms.connectivity import (
    ComponentPolicy, Connectivity, analyze, components, count_components, is_connected,
)
from algorithms.cycle        import CycleResult, detect_cycle, find_cycle_indices, format_cycle, has_cycle
from algorithms.degree       import EdgeCounter, all_degrees, vertex_degree
from algorithms.isomorphism  import (
    IsomorphismMatcher, are_isomorphic, find_isomorphism, is_isomorphism, match_graphs,
)
from algorithms.queries      import (
    query_bipartite, query_connectivity, query_cycle, query_degree, query_isomorphism,
)
from algorithms.traversal    import Event, Traversal, TraversalEvent, UndirectedView, preorder


# ---------------------------------------------------------------------------
# QueryInfo — metadata card for each query
# ---------------------------------------------------------------------------
@dataclass
class QueryInfo:
    key:              str                    # registry key, e.g. "cycle"
    label:            str                    # human label, e.g. "Cycle Detection"
    fn:               Callable               # fn(graph, **params)
    required:         List[str] = field(default_factory=list)   # params the caller must send
    optional:         List[str] = field(default_factory=list)
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""         # e.g. "O(V + E)"
    description:      str       = ""         # one-liner for listings


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, QueryInfo] = {

    "connectivity": QueryInfo(
        key="connectivity", label="Connectivity", fn=query_connectivity,
        optional=["policy"], tags=["traversal"],
        complexity_time="O(V + E)",
        description="Whether every vertex is reachable from the first, plus the component count.",
    ),

    "components": QueryInfo(
        key="components", label="Connected Components", fn=components,
        optional=["policy"], tags=["traversal"],
        complexity_time="O(V + E)",
        description="Vertex groups of each connected component, in discovery order.",
    ),

    "bipartite": QueryInfo(
        key="bipartite", label="Bipartite Check", fn=bipartition,
        tags=["traversal", "coloring"],
        complexity_time="O(V + E)",
        description="Two-colours the graph; no partition means an edge joins equal colours.",
    ),

    "cycle": QueryInfo(
        key="cycle", label="Cycle Detection", fn=detect_cycle,
        tags=["traversal"],
        complexity_time="O(V + E)",
        description="Reports the first cycle found by an index-order DFS scan.",
    ),

    "degree": QueryInfo(
        key="degree", label="Vertex Degree", fn=vertex_degree,
        required=["label"], tags=["reporter"],
        complexity_time="O(deg)",
        description="Adjacency entries of one vertex, parallel edges counted per copy.",
    ),

    "degrees": QueryInfo(
        key="degrees", label="All Degrees", fn=all_degrees,
        tags=["reporter"],
        complexity_time="O(V + E)",
        description="Degree of every vertex.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_query(key: str) -> Optional[QueryInfo]:
    """Return QueryInfo by key, or None."""
    return REGISTRY.get(key)


def list_queries() -> List[QueryInfo]:
    """Return all registered queries in insertion order."""
    return list(REGISTRY.values())


def queries_by_tag(tag: str) -> List[QueryInfo]:
    return [q for q in REGISTRY.values() if tag in q.tags]


__all__ = [
    "QueryInfo", "REGISTRY", "get_query", "list_queries", "queries_by_tag",
    "Event", "Traversal", "TraversalEvent", "UndirectedView", "preorder",
    "CycleResult", "detect_cycle", "find_cycle_indices", "format_cycle", "has_cycle",
    "bipartition", "is_bipartite", "two_coloring",
    "ComponentPolicy", "Connectivity", "analyze", "components", "count_components", "is_connected",
    "IsomorphismMatcher", "are_isomorphic", "find_isomorphism", "is_isomorphism", "match_graphs",
    "EdgeCounter", "all_degrees", "vertex_degree",
    "query_bipartite", "query_connectivity", "query_cycle", "query_degree", "query_isomorphism",
]
