"""A small HTTP API serving a health check and cached Fibonacci numbers."""

from __future__ import annotations

import argparse
import threading
from typing import Optional, Sequence

from flask import Flask, jsonify, request

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

ALLOWED_ORIGIN = "http://localhost:3000"
_ALLOWED_METHODS = "GET, POST, PATCH, DELETE"
_ALLOWED_HEADERS = "authorization, accept, content-type"


def fibonacci(n: int, cache: dict[int, int]) -> int:
    """The ``n``-th Fibonacci number, storing every value computed in ``cache``.

    Results must fit a 32-bit signed integer; larger ones raise
    :class:`OverflowError`.
    """
    if n < 0:
        raise ValueError(f"Fibonacci index must not be negative, got {n}")
    if n in cache:
        return cache[n]
    cache.setdefault(0, 0)
    if n >= 1:
        cache.setdefault(1, 1)
    for k in range(2, n + 1):
        if k not in cache:
            value = cache[k - 1] + cache[k - 2]
            if value > _I32_MAX:
                raise OverflowError(f"Fibonacci number {k} does not fit in 32 bits")
            cache[k] = value
    return cache[n]


class FibonacciCache:
    """Fibonacci numbers shared between request threads under a lock."""

    def __init__(self) -> None:
        self._values: dict[int, int] = {}
        self._lock = threading.Lock()

    def compute(self, n: int) -> int:
        """The ``n``-th Fibonacci number, reusing earlier results."""
        with self._lock:
            return fibonacci(n, self._values)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __contains__(self, n: object) -> bool:
        with self._lock:
            return n in self._values


def _fail(message: str, status: int):
    return jsonify({"status": "fail", "message": message}), status


def create_app(cache: Optional[FibonacciCache] = None) -> Flask:
    """Build the application around ``cache`` (a fresh one by default)."""
    app = Flask(__name__)
    state = cache if cache is not None else FibonacciCache()

    @app.get("/api/healthz")
    def health_checker():
        return jsonify({"status": "OK", "message": "Alive!"})

    @app.get("/api/fibonacci")
    def fibonacci_handler():
        raw = request.args.get("n")
        if raw is None:
            return _fail("missing query parameter: n", 400)
        try:
            n = int(raw)
        except ValueError:
            return _fail(f"invalid value for n: {raw}", 400)
        if not _I32_MIN <= n <= _I32_MAX:
            return _fail(f"n out of range: {raw}", 400)
        try:
            result = state.compute(n)
        except ValueError as exc:
            return _fail(str(exc), 400)
        except OverflowError as exc:
            return jsonify({"status": "error", "message": str(exc)}), 500
        return jsonify({"status": "OK", "result": result})

    @app.after_request
    def add_cors_headers(response):
        if request.headers.get("Origin") == ALLOWED_ORIGIN:
            response.headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGIN
            response.headers["Access-Control-Allow-Credentials"] = "true"
            response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
            response.headers["Access-Control-Allow-Headers"] = _ALLOWED_HEADERS
            response.headers.add("Vary", "Origin")
        return response

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the API."""
    parser = argparse.ArgumentParser(
        prog="codedrills-fibapi", description="Fibonacci HTTP API."
    )
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    app = create_app()
    print("🚀 Server started successfully")
    app.run(host=args.host, port=args.port, threaded=True)
    return 0