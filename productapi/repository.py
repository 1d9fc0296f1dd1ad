"""In-memory product storage and identifier generation."""

from __future__ import annotations

import threading
import time
import uuid
from datetime import datetime, timezone

from productapi.domain import Product


class ProductNotFoundError(LookupError):
    """Raised when no product exists with the requested identifier."""

    def __init__(self, message: str = "product not found") -> None:
        super().__init__(message)


class InMemoryProductRepository:
    """Thread-safe product store kept in a dictionary."""

    def __init__(self) -> None:
        self._data: dict[str, Product] = {}
        self._lock = threading.Lock()

    def create(self, product: Product) -> Product:
        """Store a product, assigning an id if missing and stamping timestamps."""
        with self._lock:
            if not product.id:
                product.id = f"product_{time.time_ns()}"
            product.created_at = datetime.now(timezone.utc)
            product.updated_at = datetime.now(timezone.utc)
            self._data[product.id] = product
            return product

    def get_by_id(self, product_id: str) -> Product:
        """Return the product with the given id."""
        with self._lock:
            try:
                return self._data[product_id]
            except KeyError:
                raise ProductNotFoundError() from None

    def list(self) -> list[Product]:
        """Return all stored products."""
        with self._lock:
            return list(self._data.values())

    def update(self, product: Product) -> Product:
        """Replace an existing product and refresh its update timestamp."""
        with self._lock:
            if product.id not in self._data:
                raise ProductNotFoundError()
            product.updated_at = datetime.now(timezone.utc)
            self._data[product.id] = product
            return product

    def delete(self, product_id: str) -> None:
        """Remove the product with the given id."""
        with self._lock:
            if product_id not in self._data:
                raise ProductNotFoundError()
            del self._data[product_id]


class UUIDGenerator:
    """Generates random UUID strings as identifiers."""

    def generate_id(self) -> str:
        return str(uuid.uuid4())