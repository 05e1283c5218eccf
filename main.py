"""
main.py — Graph Toolkit Flask API
=================================
The thin JSON layer in front of the graph core.  It turns request bodies
into graph-construction calls and turns query results back into JSON;
all the actual work happens in `graph/` and `algorithms/`.

Routes:
  GET  /api/queries              – registered graph queries
  POST /api/graph                – build a graph (stored in the session)
  GET  /api/graph                – summary of the current graph
  POST /api/query/<key>          – run a registered query on the current graph
  POST /api/isomorphism          – compare two adjacency matrices
  POST /api/edge-counts          – per-edge occurrence counts from a count matrix

State management:
  The built graph lives in the Flask session as `Graph.to_dict()` and is
  rebuilt per request.  Nothing is shared between sessions.

Errors:
  Every GraphError (and ValueError from bad input) becomes a 400 with
  {"error": message, "kind": error class name}.
"""

import dataclasses
import logging
import secrets
import sys
import os

from flask import Flask, jsonify, request, session

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from graph import Graph, GraphError, build_graph
from algorithms import EdgeCounter, get_query, list_queries, query_isomorphism
from config import get_config

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config["GRAPHKIT"] = get_config()


def settings():
    return app.config["GRAPHKIT"]


def configure_logging() -> None:
    cfg = settings().log
    logging.basicConfig(level=cfg.level.upper(), format=cfg.format)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph():
    """Deserialise graph from session, or None if nothing was built yet."""
    data = session.get("graph")
    if data is None:
        return None
    return Graph.from_dict(data)


def save_graph(graph: Graph):
    session["graph"] = graph.to_dict()


def graph_summary(graph: Graph) -> dict:
    return {
        "representation":   graph.representation,
        "directed":         graph.directed,
        "vertices":         graph.labels(),
        "edge_count":       graph.edge_count(),
        "adjacency_matrix": graph.adjacency_matrix(),
    }


def json_body() -> dict:
    """Request JSON as a dict; an empty body reads as {}."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def label_list(data: dict, key: str) -> list:
    """`data[key]` as a list of JSON scalar labels, or ValueError."""
    labels = data.get(key, [])
    if not isinstance(labels, list) or not all(
        isinstance(label, (str, int, float)) and not isinstance(label, bool) for label in labels
    ):
        raise ValueError(f"'{key}' must be a list of strings or numbers")
    return labels


def to_json(value):
    """Query results → JSON-friendly values (dataclasses, tuples, label-keyed dicts)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(GraphError)
def handle_graph_error(err: GraphError):
    logger.warning("rejected %s %s: %s", request.method, request.path, err)
    return jsonify({"error": str(err), "kind": err.kind}), 400


@app.errorhandler(ValueError)
def handle_value_error(err: ValueError):
    logger.warning("rejected %s %s: %s", request.method, request.path, err)
    return jsonify({"error": str(err), "kind": "ValueError"}), 400


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/queries")
def api_queries():
    return jsonify([
        {
            "key":             q.key,
            "label":           q.label,
            "required":        q.required,
            "optional":        q.optional,
            "tags":            q.tags,
            "complexity_time": q.complexity_time,
            "description":     q.description,
        }
        for q in list_queries()
    ])


# ---------------------------------------------------------------------------
# API: Graph Construction
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["POST"])
def api_graph_build():
    data     = json_body()
    if "vertices" not in data:
        raise ValueError("'vertices' is required")
    vertices = label_list(data, "vertices")
    edges    = data.get("edges", [])
    directed = data.get("directed", False)
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list")
    if not isinstance(directed, bool):
        raise ValueError("'directed' must be true or false")

    g = build_graph(
        vertices,
        edges,
        representation=data.get("representation", settings().query.default_representation),
        directed=directed,
    )
    save_graph(g)
    logger.info("built %r", g)
    return jsonify(graph_summary(g)), 201


@app.route("/api/graph", methods=["GET"])
def api_graph_get():
    g = get_graph()
    if g is None:
        return jsonify({"error": "No graph built yet"}), 404
    return jsonify(graph_summary(g))


# ---------------------------------------------------------------------------
# API: Run Query
# ---------------------------------------------------------------------------
@app.route("/api/query/<key>", methods=["POST"])
def api_query(key: str):
    info = get_query(key)
    if info is None:
        return jsonify({"error": f"Unknown query: {key}"}), 404

    g = get_graph()
    if g is None:
        return jsonify({"error": "Build a graph first"}), 400

    data = json_body()
    missing = [p for p in info.required if p not in data]
    if missing:
        return jsonify({"error": f"Missing parameter(s): {', '.join(missing)}", "kind": "ValueError"}), 400

    params = {p: data[p] for p in info.required + info.optional if p in data}
    if "policy" in info.optional:
        params.setdefault("policy", settings().query.component_policy)

    result = info.fn(g, **params)
    logger.debug("query %s on %r -> %r", key, g, result)
    return jsonify({"query": key, "result": to_json(result)})


# ---------------------------------------------------------------------------
# API: Isomorphism
# ---------------------------------------------------------------------------
@app.route("/api/isomorphism", methods=["POST"])
def api_isomorphism():
    data   = json_body()
    first  = data.get("first")
    second = data.get("second")
    if not isinstance(first, list) or not isinstance(second, list):
        return jsonify({"error": "'first' and 'second' must be matrices", "kind": "ValueError"}), 400

    limit = settings().query.max_isomorphism_vertices
    if max(len(first), len(second)) > limit:
        return jsonify({"error": f"Isomorphism is limited to {limit} vertices", "kind": "ValueError"}), 400

    mapping = query_isomorphism(first, second)
    return jsonify({
        "isomorphic": mapping is not None,
        "mapping":    [mapping[i] for i in range(len(mapping))] if mapping is not None else None,
    })


# ---------------------------------------------------------------------------
# API: Edge Counts
# ---------------------------------------------------------------------------
@app.route("/api/edge-counts", methods=["POST"])
def api_edge_counts():
    data = json_body()
    counter = EdgeCounter.from_matrix(label_list(data, "vertices"), data.get("matrix", []))
    return jsonify({
        "edges": [
            {"source": src, "target": tgt, "count": cnt}
            for (src, tgt), cnt in counter.edge_counts().items()
        ],
    })


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    configure_logging()
    server = settings().server
    logger.info("Graph Toolkit API listening on http://%s:%d", server.host, server.port)
    app.run(debug=server.debug, host=server.host, port=server.port)
