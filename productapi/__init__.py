"""A JSON HTTP API for managing products kept in memory."""

__version__ = "1.0.0"

__all__ = ["__version__"]