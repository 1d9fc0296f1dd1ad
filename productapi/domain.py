"""Product entity and the domain rules that apply to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _format_time(value: datetime) -> str:
    """Format a timestamp as RFC 3339, trimming trailing fractional zeros."""
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if offset is None or offset == timedelta(0):
        return text + "Z"
    sign = "+" if offset >= timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class Product:
    """A product with a name and creation/update timestamps."""

    id: str = ""
    name: str = ""
    created_at: datetime = field(default=ZERO_TIME)
    updated_at: datetime = field(default=ZERO_TIME)

    def is_valid(self) -> bool:
        """A product is valid when it has a non-empty name."""
        return self.name != ""

    def update(self, name: str) -> None:
        """Rename the product and refresh its update timestamp."""
        self.name = name
        self.updated_at = _now()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the product."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


def new_product(name: str) -> Product:
    """Create a product with the given name, stamped with the current time."""
    now = _now()
    return Product(name=name, created_at=now, updated_at=now)


class InvalidProductError(ValueError):
    """Raised when a product fails domain validation."""

    def __init__(self, message: str = "invalid product entity") -> None:
        super().__init__(message)


class ProductDomainService:
    """Domain-level validation for products."""

    def validate_product(self, product: Product) -> None:
        """Raise InvalidProductError if the product breaks a domain rule."""
        if not product.is_valid():
            raise InvalidProductError()