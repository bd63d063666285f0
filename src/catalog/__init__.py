"""Catalog — категории, товары и стратегии выборки товаров по категории."""

from .catalog import Catalog
from .errors import CatalogError, UnknownCategoryError
from .lookup import CategoryProductsLookup, ProductLookupStrategy, SortedByPriceLookup

__all__ = [
    "Catalog",
    "CatalogError",
    "UnknownCategoryError",
    "ProductLookupStrategy",
    "CategoryProductsLookup",
    "SortedByPriceLookup",
]
