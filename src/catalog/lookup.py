"""
Product Lookup — стратегии выборки товаров категории

Catalog делегирует get_products_by_category стратегии, поэтому новые
представления (сортировка, фильтрация) добавляются без изменения API каталога.

Стратегии:
- CategoryProductsLookup: товары категории как есть (порядок добавления)
- SortedByPriceLookup: товары категории, отсортированные по цене
"""

from abc import ABC, abstractmethod

from src.core.domain.category import Category
from src.core.domain.product import Product


class ProductLookupStrategy(ABC):
    """Интерфейс: по категории вернуть её товары."""

    @abstractmethod
    def get_products_by_category(self, category: Category) -> list[Product]:
        """
        Args:
            category: категория каталога

        Returns:
            Товары категории в порядке, определяемом стратегией
        """
        ...


class CategoryProductsLookup(ProductLookupStrategy):
    """Стратегия по умолчанию: товары в порядке добавления, без изменений."""

    def get_products_by_category(self, category: Category) -> list[Product]:
        return category.get_products()


class SortedByPriceLookup(ProductLookupStrategy):
    """Товары категории по возрастанию (или убыванию) цены.

    Сортировка стабильная: товары с одинаковой ценой сохраняют порядок добавления.
    """

    def __init__(self, descending: bool = False):
        self.descending = descending

    def get_products_by_category(self, category: Category) -> list[Product]:
        return sorted(
            category.get_products(),
            key=lambda product: product.price,
            reverse=self.descending,
        )
