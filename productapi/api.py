"""HTTP routes and handlers for the product API."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any

from flask import Blueprint, Flask, Response, jsonify, request

from productapi.domain import Product
from productapi.wiring import UseCases

_TIME_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)

_DOCS = {
    "message": "Src/simple API Documentation",
    "version": "1.0.0",
    "endpoints": {
        "product": {
            "GET /api/v1/product": "List products",
            "GET /api/v1/product/:id": "Get product by ID",
            "POST /api/v1/product": "Create new product",
            "PUT /api/v1/product/:id": "Update product",
            "DELETE /api/v1/product/:id": "Delete product",
        },
    },
}


def _parse_time(field_name: str, value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"field {field_name} must be an RFC 3339 time string")
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f"field {field_name} is not a valid RFC 3339 time: {value!r}")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    try:
        return datetime(
            int(year), int(month), int(day),
            int(hour), int(minute), int(second), microsecond, tzinfo=tz,
        )
    except ValueError as exc:
        raise ValueError(f"field {field_name} is not a valid time: {exc}") from None


def _product_from_body() -> Product:
    """Decode the JSON request body into a Product, raising ValueError if it cannot."""
    if not request.is_json:
        raise ValueError("request body must be JSON")
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")

    product = Product()
    for field_name in ("id", "name"):
        value = payload.get(field_name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"field {field_name} must be a string")
        setattr(product, field_name, value)
    for field_name in ("created_at", "updated_at"):
        value = payload.get(field_name)
        if value is not None:
            setattr(product, field_name, _parse_time(field_name, value))
    return product


def _error(status: int, message: str, details: str | None = None) -> tuple[Response, int]:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return jsonify(body), status


class ProductHandler:
    """Request handlers for the product resource."""

    def __init__(self, use_cases: UseCases) -> None:
        self._create = use_cases.create_product
        self._get = use_cases.get_product
        self._update = use_cases.update_product
        self._delete = use_cases.delete_product
        self._list = use_cases.list_product

    def create_product(self) -> tuple[Response, int]:
        """Handle POST /product."""
        try:
            product = _product_from_body()
        except ValueError as exc:
            return _error(400, "Invalid request body", str(exc))
        try:
            created = self._create.execute(product)
        except Exception as exc:
            return _error(500, "Failed to create product", str(exc))
        return jsonify(
            {"message": "Product created successfully", "data": created.to_dict()}
        ), 201

    def get_product(self, product_id: str) -> tuple[Response, int]:
        """Handle GET /product/<id>."""
        if not product_id:
            return _error(400, "ID parameter is required")
        try:
            product = self._get.execute(product_id)
        except Exception as exc:
            return _error(404, "Product not found", str(exc))
        return jsonify({"data": product.to_dict()}), 200

    def list_product(self) -> tuple[Response, int]:
        """Handle GET /product."""
        try:
            products = self._list.execute()
        except Exception as exc:
            return _error(500, "Failed to retrieve products", str(exc))
        return jsonify({"data": [product.to_dict() for product in products]}), 200

    def update_product(self, product_id: str) -> tuple[Response, int]:
        """Handle PUT /product/<id>."""
        if not product_id:
            return _error(400, "ID parameter is required")
        try:
            product = _product_from_body()
        except ValueError as exc:
            return _error(400, "Invalid request body", str(exc))
        product.id = product_id
        try:
            updated = self._update.execute(product)
        except Exception as exc:
            return _error(500, "Failed to update product", str(exc))
        return jsonify(
            {"message": "Product updated successfully", "data": updated.to_dict()}
        ), 200

    def delete_product(self, product_id: str) -> tuple[Response, int]:
        """Handle DELETE /product/<id>."""
        if not product_id:
            return _error(400, "ID parameter is required")
        try:
            self._delete.execute(product_id)
        except Exception as exc:
            return _error(500, "Failed to delete product", str(exc))
        return jsonify({"message": "Product deleted successfully"}), 200


def register_product_routes(app: Flask | Blueprint, use_cases: UseCases) -> None:
    """Attach the product routes to an app or blueprint."""
    handler = ProductHandler(use_cases)
    app.add_url_rule(
        "/product", "create_product", handler.create_product, methods=["POST"]
    )
    app.add_url_rule("/product", "list_product", handler.list_product, methods=["GET"])
    app.add_url_rule(
        "/product/<product_id>", "get_product", handler.get_product, methods=["GET"]
    )
    app.add_url_rule(
        "/product/<product_id>", "update_product", handler.update_product, methods=["PUT"]
    )
    app.add_url_rule(
        "/product/<product_id>",
        "delete_product",
        handler.delete_product,
        methods=["DELETE"],
    )


def configure_api_routes(app: Flask, use_cases: UseCases) -> None:
    """Register the health check, the versioned API and its documentation."""

    def health() -> Response:
        return jsonify({"status": "ok", "message": "Src/simple API is running"})

    def docs() -> Response:
        return jsonify(_DOCS)

    app.add_url_rule("/health", "health", health, methods=["GET"])

    v1 = Blueprint("api_v1", __name__, url_prefix="/api/v1")
    register_product_routes(v1, use_cases)
    v1.add_url_rule("/docs", "docs", docs, methods=["GET"])
    app.register_blueprint(v1)