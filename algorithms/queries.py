"""
queries.py — Core Query Facade
==============================
The flat surface offered to I/O collaborators (the HTTP layer, scripts,
tests).  Every function takes an already-built graph or already-parsed
matrices and returns plain values; query outcomes never raise, only
structural misuse does.
"""

from typing import Dict, Hashable, List, Optional

from graph import Graph, build_graph
from algorithms.bipartite import is_bipartite
from algorithms.connectivity import ComponentPolicy, Connectivity, analyze
from algorithms.cycle import detect_cycle
from algorithms.degree import vertex_degree
from algorithms.isomorphism import Matrix, find_isomorphism


def query_connectivity(
    graph: Graph,
    policy: ComponentPolicy = ComponentPolicy.INCLUDE_ISOLATED,
) -> Connectivity:
    return analyze(graph, policy)


def query_bipartite(graph: Graph) -> bool:
    return is_bipartite(graph)


def query_cycle(graph: Graph) -> Optional[List[Hashable]]:
    """Closed label sequence (first label repeated last), or None."""
    result = detect_cycle(graph)
    return result.vertices if result is not None else None


def query_isomorphism(first: Matrix, second: Matrix) -> Optional[Dict[int, int]]:
    """Index mapping first → second, or None.  Raises SizeMismatch."""
    return find_isomorphism(first, second)


def query_degree(graph: Graph, label: Hashable) -> int:
    return vertex_degree(graph, label)


__all__ = [
    "build_graph",
    "query_connectivity",
    "query_bipartite",
    "query_cycle",
    "query_isomorphism",
    "query_degree",
]
