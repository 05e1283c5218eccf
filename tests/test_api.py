import pytest

import main
from config import AppConfig, QueryConfig


TRIANGLE = {"vertices": ["A", "B", "C"], "edges": [["A", "B"], ["B", "C"], ["C", "A"]]}


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


def build(client, payload=TRIANGLE):
    resp = client.post("/api/graph", json=payload)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


def test_query_listing(client):
    keys = [q["key"] for q in client.get("/api/queries").get_json()]
    assert keys == ["connectivity", "components", "bipartite", "cycle", "degree", "degrees"]


def test_build_graph(client):
    summary = build(client)
    assert summary["vertices"] == ["A", "B", "C"]
    assert summary["edge_count"] == 3
    assert summary["representation"] == "list"
    assert summary["adjacency_matrix"] == [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert client.get("/api/graph").get_json() == summary


def test_graph_summary_before_build(client):
    assert client.get("/api/graph").status_code == 404


def test_build_rejects_non_list_vertices(client):
    resp = client.post("/api/graph", json={"vertices": "ABC"})
    assert resp.status_code == 400


def test_build_errors_carry_their_kind(client):
    resp = client.post("/api/graph", json={"vertices": ["A", "A"]})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "DuplicateVertex"

    resp = client.post("/api/graph", json={"vertices": ["A"], "edges": [["A", "B"]]})
    assert resp.get_json()["kind"] == "UnknownVertex"

    resp = client.post("/api/graph", json={"vertices": ["A"], "representation": "incidence", "directed": True})
    assert resp.get_json()["kind"] == "UnsupportedEdge"

    resp = client.post("/api/graph", json={"vertices": ["A"], "representation": "tree"})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "ValueError"


@pytest.mark.parametrize("representation", ["list", "matrix", "incidence"])
def test_triangle_queries(client, representation):
    build(client, dict(TRIANGLE, representation=representation))

    cycle = client.post("/api/query/cycle").get_json()
    assert cycle == {"query": "cycle", "result": {"vertices": ["A", "B", "C", "A"], "spans_graph": True}}

    conn = client.post("/api/query/connectivity").get_json()["result"]
    assert conn == {"connected": True, "component_count": 1}

    assert client.post("/api/query/bipartite").get_json()["result"] is None
    assert client.post("/api/query/degrees").get_json()["result"] == {"A": 2, "B": 2, "C": 2}


def test_square_is_bipartite(client):
    build(client, {
        "vertices": ["A", "B", "C", "D"],
        "edges": [["A", "B"], ["B", "C"], ["C", "D"], ["D", "A"]],
    })
    result = client.post("/api/query/bipartite").get_json()["result"]
    assert result == [["A", "C"], ["B", "D"]]


def test_component_policy_parameter(client):
    build(client, {"vertices": ["A", "B", "C"], "edges": [["A", "B"]]})
    assert client.post("/api/query/components").get_json()["result"] == [["A", "B"], ["C"]]

    resp = client.post("/api/query/components", json={"policy": "exclude_isolated"})
    assert resp.get_json()["result"] == [["A", "B"]]

    resp = client.post("/api/query/components", json={"policy": "sometimes"})
    assert resp.status_code == 400


def test_degree_query(client):
    build(client)
    resp = client.post("/api/query/degree", json={"label": "A"})
    assert resp.get_json()["result"] == 2

    missing = client.post("/api/query/degree", json={})
    assert missing.status_code == 400

    unknown = client.post("/api/query/degree", json={"label": "Q"})
    assert unknown.status_code == 400
    assert unknown.get_json()["kind"] == "UnknownVertex"


def test_query_needs_a_graph(client):
    assert client.post("/api/query/cycle").status_code == 400


def test_unknown_query(client):
    build(client)
    assert client.post("/api/query/shortest-path").status_code == 404


def test_isomorphism_endpoint(client):
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]

    same = client.post("/api/isomorphism", json={"first": triangle, "second": triangle}).get_json()
    assert same == {"isomorphic": True, "mapping": [0, 1, 2]}

    differ = client.post("/api/isomorphism", json={"first": triangle, "second": path}).get_json()
    assert differ == {"isomorphic": False, "mapping": None}

    empty = client.post("/api/isomorphism", json={"first": [], "second": []}).get_json()
    assert empty == {"isomorphic": True, "mapping": []}


def test_isomorphism_size_mismatch(client):
    resp = client.post("/api/isomorphism", json={"first": [[0]], "second": [[0, 1], [1, 0]]})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "SizeMismatch"


def test_isomorphism_vertex_limit(client, monkeypatch):
    monkeypatch.setitem(main.app.config, "GRAPHKIT", AppConfig(query=QueryConfig(max_isomorphism_vertices=2)))
    matrix = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    resp = client.post("/api/isomorphism", json={"first": matrix, "second": matrix})
    assert resp.status_code == 400


def test_edge_counts_endpoint(client):
    resp = client.post("/api/edge-counts", json={"vertices": ["A", "B"], "matrix": [[0, 3], [1, 0]]})
    assert resp.get_json() == {"edges": [
        {"source": "A", "target": "B", "count": 3},
        {"source": "B", "target": "A", "count": 1},
    ]}

    bad = client.post("/api/edge-counts", json={"vertices": ["A", "B"], "matrix": [[0, 3]]})
    assert bad.status_code == 400
    assert bad.get_json()["kind"] == "SizeMismatch"


@pytest.mark.parametrize("edges", [["AB"], ["ABC"], [7], [{"source": "A"}], [["A", "B", "yes"]], "AB"])
def test_malformed_edges_are_rejected(client, edges):
    resp = client.post("/api/graph", json={"vertices": ["A", "B", "C"], "edges": edges})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "ValueError"
    assert client.get("/api/graph").status_code == 404


@pytest.mark.parametrize("url,body", [
    ("/api/graph", [1, 2]),
    ("/api/graph", {}),
    ("/api/graph", {"vertices": [["A"]]}),
    ("/api/graph", {"vertices": ["A"], "directed": "yes"}),
    ("/api/graph", {"vertices": ["A"], "representation": ["list"]}),
    ("/api/isomorphism", {"first": [1], "second": [1]}),
    ("/api/isomorphism", [[0]]),
    ("/api/edge-counts", {"vertices": ["A"], "matrix": [1]}),
    ("/api/edge-counts", {"vertices": ["A"], "matrix": [["x"]]}),
    ("/api/edge-counts", {"vertices": "AB", "matrix": [[0, 1], [1, 0]]}),
])
def test_bad_request_bodies_are_client_errors(client, url, body):
    resp = client.post(url, json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_bad_query_parameters_are_client_errors(client):
    build(client)
    resp = client.post("/api/query/degree", json={"label": ["A"]})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "UnknownVertex"

    assert client.post("/api/query/cycle", json=[1]).status_code == 400


def test_edge_order_is_the_same_for_every_representation(client):
    for representation in ("list", "matrix", "incidence"):
        build(client, {
            "vertices": ["A", "B", "C"],
            "edges": [["A", "C"], ["C", "B"], ["B", "A"]],
            "representation": representation,
        })
        result = client.post("/api/query/cycle").get_json()["result"]
        assert result["vertices"] == ["A", "C", "B", "A"]
