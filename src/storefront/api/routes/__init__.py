"""Route group exports."""

from . import health, products, vendors

__all__ = ["health", "products", "vendors"]
