"""
Domain models and value objects.

Contains the product record model shared by all pricing operations.
"""

from src.core.domain.product import Product

__all__ = [
    "Product",
]
