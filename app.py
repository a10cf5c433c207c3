"""
Symbol Table Service — a REST API over a prefix-tree symbol table.

Exposes either the R-way trie or the ternary search tree as a JSON API with
endpoints for exact lookup, insertion, deletion, prefix enumeration,
wildcard matching and longest-prefix queries.
Built with Flask. Configured through environment variables.
"""

from __future__ import annotations

import os
import time
import logging
from itertools import islice
from typing import Any, Iterable

from flask import Blueprint, Flask, current_app, jsonify, request

from ternary_search_tree import TernarySearchTree
from wide_trie import DEFAULT_RADIX, WideTrie

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger("trie-service")

BACKENDS = {"trie": WideTrie, "tst": TernarySearchTree}
DEFAULT_LIMIT = 25
MAX_KEY_LENGTH = 256

# Seed with sample data so the service is useful out-of-the-box
_SEED_WORDS = [
    "algorithm", "api", "app", "appl", "applic", "application", "array",
    "binary", "branch", "buffer", "build", "byte",
    "cache", "callback", "class", "client", "compiler",
    "database", "debug", "deploy", "endpoint", "exception",
    "flask", "function", "graph", "hash", "heap",
    "index", "interface", "json", "kernel", "lambda",
    "node", "object", "parser", "prefix", "queue",
    "radix", "recursion", "router", "schema", "server",
    "stack", "stream", "symbol", "token", "tree", "trie",
]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

def make_table(backend: str | None = None, radix: int | None = None) -> WideTrie | TernarySearchTree:
    """Build an empty symbol table from arguments or the environment."""
    backend = backend or os.environ.get("TRIE_BACKEND", "tst")
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend {backend!r}; expected one of {sorted(BACKENDS)}")
    if backend == "trie":
        if radix is None:
            raw = os.environ.get("TRIE_RADIX", str(DEFAULT_RADIX))
            try:
                radix = int(raw)
            except ValueError:
                raise ValueError(f"TRIE_RADIX must be an integer, got {raw!r}") from None
        return WideTrie(radix)
    return TernarySearchTree()


def seed_table(table: WideTrie | TernarySearchTree) -> int:
    """Insert the sample words *table* can hold; return how many were stored."""
    stored = 0
    for word in _SEED_WORDS:
        try:
            table.put(word, word)
        except ValueError as exc:
            logger.warning("Skipped seed word=%s: %s", word, exc)
            continue
        stored += 1
    logger.info("Seeded %s with %d words", type(table).__name__, stored)
    return stored


def create_app(table: WideTrie | TernarySearchTree | None = None, seed: bool | None = None) -> Flask:
    """Create the Flask application around *table* (configured if omitted)."""
    if table is None:
        table = make_table()
    if seed is None:
        seed = os.environ.get("TRIE_SEED", "1") == "1"
    seeded = seed_table(table) if seed else 0

    flask_app = Flask(__name__)
    flask_app.extensions["symbol_table"] = table
    flask_app.config["START_TIME"] = time.time()
    flask_app.config["SEED_WORDS"] = seeded
    flask_app.register_blueprint(api)
    return flask_app


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------

api = Blueprint("symbol_table", __name__)


def _table() -> WideTrie | TernarySearchTree:
    return current_app.extensions["symbol_table"]


def _uptime() -> float:
    return round(time.time() - current_app.config["START_TIME"], 2)


def _query() -> str:
    # Keys are matched exactly, surrounding whitespace included.
    return request.args.get("q", "")


def _limit() -> int:
    try:
        return int(request.args.get("limit", DEFAULT_LIMIT))
    except ValueError:
        return DEFAULT_LIMIT


def _take(keys: Iterable[str], limit: int) -> list[str]:
    return list(islice(keys, max(limit, 0)))


def _missing_query():
    return jsonify({"error": "Missing query parameter 'q'"}), 400


# ── Health & Info ─────────────────────────────────────────────────────────

@api.route("/")
def index():
    """Landing page with API documentation."""
    return jsonify({
        "service": "Symbol Table Service",
        "version": "1.0.0",
        "description": "REST API for prefix queries over a trie or ternary search tree",
        "endpoints": {
            "GET  /":                        "This help page",
            "GET  /health":                  "Health check",
            "GET  /stats":                   "Symbol table statistics",
            "GET  /search?q=<key>":          "Exact match lookup",
            "GET  /keys":                    "All keys in ascending order",
            "GET  /prefix?q=<pfx>":          "All keys starting with prefix",
            "GET  /match?q=<pattern>":       "Keys matching a pattern, '.' matches any character",
            "GET  /longest-prefix?q=<text>": "Longest stored key that prefixes the text",
            "POST /insert":                  "Insert a key  {\"key\": \"...\", \"value\": \"...\"}",
            "DELETE /delete?q=<key>":        "Delete a key",
        },
    })


@api.route("/health")
def health():
    """Liveness / readiness probe."""
    table = _table()
    return jsonify({
        "status": "healthy",
        "uptime_seconds": _uptime(),
        "backend": type(table).__name__,
        "size": len(table),
    })


@api.route("/stats")
def stats():
    """Symbol table statistics."""
    return jsonify({
        "total_keys": len(_table()),
        "uptime_seconds": _uptime(),
        "seed_words": current_app.config["SEED_WORDS"],
    })


# ── Core API ──────────────────────────────────────────────────────────────

@api.route("/search")
def search():
    """Exact key lookup."""
    q = _query()
    if not q:
        return _missing_query()
    table = _table()
    return jsonify({"key": q, "found": q in table, "value": table.get(q)})


@api.route("/keys")
def keys():
    """Return every key, up to ``limit``."""
    matches = _take(_table().keys(), _limit())
    return jsonify({"count": len(matches), "keys": matches})


@api.route("/prefix")
def prefix():
    """Return all keys sharing a given prefix (autocomplete)."""
    q = _query()
    if not q:
        return _missing_query()
    matches = _take(_table().keys_with_prefix(q), _limit())
    return jsonify({"prefix": q, "count": len(matches), "matches": matches})


@api.route("/match")
def match():
    """Return all keys matching a wildcard pattern."""
    q = _query()
    if not q:
        return _missing_query()
    matches = _take(_table().keys_that_match(q), _limit())
    return jsonify({"pattern": q, "count": len(matches), "matches": matches})


@api.route("/longest-prefix")
def longest_prefix():
    """Return the longest stored key that is a prefix of the query."""
    q = _query()
    if not q:
        return _missing_query()
    found = _table().longest_prefix_of(q)
    return jsonify({"query": q, "found": bool(found), "longest_prefix": found})


@api.route("/insert", methods=["POST"])
def insert():
    """Insert a key into the symbol table."""
    body: Any = request.get_json(silent=True)
    if body is None:
        body = {}
    if not isinstance(body, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400
    key = body.get("key")
    if not isinstance(key, str) or not key.strip():
        return jsonify({"error": "Missing 'key' in request body"}), 400
    value = body.get("value", key)

    if len(key) > MAX_KEY_LENGTH:
        return jsonify({"error": f"Key too long (max {MAX_KEY_LENGTH} chars)"}), 400

    table = _table()
    try:
        table.put(key, value)
    except ValueError as exc:
        logger.warning("Rejected key=%r: %s", key, exc)
        return jsonify({"error": str(exc)}), 400
    logger.info("Inserted key=%s", key)
    return jsonify({"inserted": key, "value": value, "size": len(table)}), 201


@api.route("/delete", methods=["DELETE"])
def delete():
    """Delete a key from the symbol table."""
    q = _query()
    if not q:
        return _missing_query()

    table = _table()
    deleted = table.delete(q)
    if deleted:
        logger.info("Deleted key=%s", q)
    status = 200 if deleted else 404
    return jsonify({"key": q, "deleted": deleted, "size": len(table)}), status


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------

app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    logger.info("Starting Symbol Table Service on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=debug)
