"""
Domain models: Product, Category.
"""

from src.core.domain.category import Category
from src.core.domain.product import Product

__all__ = [
    "Product",
    "Category",
]
