"""API route modules."""

from . import scan, price

__all__ = ["scan", "price"]
