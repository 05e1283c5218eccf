import pytest

from graph import build_graph


REPRESENTATIONS = ["list", "matrix", "incidence"]


@pytest.fixture(params=REPRESENTATIONS)
def representation(request):
    return request.param


@pytest.fixture
def triangle(representation):
    return build_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")], representation=representation)


def ring(k, representation="list"):
    """Undirected cycle 0-1-…-(k-1)-0 with integer labels."""
    labels = list(range(k))
    edges = [(i, (i + 1) % k) for i in range(k)]
    return build_graph(labels, edges, representation=representation)


def path(k, representation="list"):
    labels = list(range(k))
    return build_graph(labels, [(i, i + 1) for i in range(k - 1)], representation=representation)
