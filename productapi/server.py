"""Application factory and command-line entry point for the HTTP server."""

from __future__ import annotations

import argparse
import logging
import time

from flask import Flask, Response, g, jsonify, request

from productapi.api import configure_api_routes
from productapi.wiring import UseCases, setup_use_cases

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
_CORS_ALLOW_METHODS = "GET,POST,HEAD,PUT,DELETE,PATCH"


def _http_status(error: Exception) -> int | None:
    """Return the HTTP status carried by an HTTP error, or None for other errors."""
    code = getattr(error, "code", None)
    if isinstance(code, int) and hasattr(error, "get_response"):
        return code
    return None


def _handle_error(error: Exception) -> tuple[Response, int]:
    code = _http_status(error)
    if code is not None:
        if code == 404:
            message = f"Cannot {request.method} {request.path}"
        else:
            message = getattr(error, "name", str(error))
    else:
        code = 500
        message = str(error)
    return jsonify({"error": message}), code


def _cors_preflight() -> Response | None:
    if request.method != "OPTIONS":
        return None
    if "Access-Control-Request-Method" not in request.headers:
        return None
    response = Response(status=204)
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = _CORS_ALLOW_METHODS
    requested_headers = request.headers.get("Access-Control-Request-Headers")
    if requested_headers:
        response.headers["Access-Control-Allow-Headers"] = requested_headers
    return response


def _start_timer() -> None:
    g.request_started = time.perf_counter()


def _finish_response(response: Response) -> Response:
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    started = g.get("request_started")
    elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
    logger.info(
        "%s | %.3fms | %s | %s | %s",
        response.status_code,
        elapsed_ms,
        request.remote_addr,
        request.method,
        request.path,
    )
    return response


def build_app(use_cases: UseCases) -> Flask:
    """Create the Flask application with error handling, CORS and logging."""
    app = Flask(__name__)
    app.register_error_handler(Exception, _handle_error)
    app.before_request(_start_timer)
    app.before_request(_cors_preflight)
    app.after_request(_finish_response)
    configure_api_routes(app, use_cases)
    return app


def main(argv: list[str] | None = None) -> int:
    """Start the HTTP server."""
    parser = argparse.ArgumentParser(prog="productapi", description="Run the product API server.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    app = build_app(setup_use_cases())
    logger.info("Server starting on :%d", args.port)
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())