"""
Catalog — каталог категорий и товаров

Каталог владеет категориями и стратегией выборки товаров.
Товары каталогу не принадлежат: он только выдаёт им идентификаторы
(create_product) и разрешает их handle категории (get_category).

Категории хранятся в порядке добавления.
"""

from itertools import count
from typing import Iterator, Optional

from src.catalog.errors import UnknownCategoryError
from src.catalog.lookup import CategoryProductsLookup, ProductLookupStrategy
from src.core.domain.category import Category
from src.core.domain.product import Product
from src.core.log import get_logger

logger = get_logger(__name__).bind(component="catalog")


class Catalog:
    """Каталог: упорядоченные категории + подключаемая стратегия выборки."""

    def __init__(self, lookup_strategy: Optional[ProductLookupStrategy] = None):
        """
        Args:
            lookup_strategy: стратегия выборки товаров (default: CategoryProductsLookup)
        """
        self.lookup_strategy = lookup_strategy or CategoryProductsLookup()

        self._categories: dict[int, Category] = {}
        self._category_ids = count(1)
        self._product_ids = count(1)

    # -------------------------------------------------------------------------
    # Категории
    # -------------------------------------------------------------------------

    def add_category(self, category: Category) -> None:
        """Добавление категории (каталог становится владельцем).

        Операция не выбрасывает исключений:
        - повторное добавление той же категории: no-op
        - другая категория с занятым category_id получает новый свободный идентификатор
        """
        registered = self._categories.get(category.category_id)
        if registered is category:
            logger.debug("Category already added", category_id=category.category_id)
            return

        if registered is not None:
            old_id = category.category_id
            category.category_id = self._next_category_id()
            logger.warning(
                "Category id collision, reassigned",
                name=category.name,
                old_category_id=old_id,
                new_category_id=category.category_id,
            )

        self._categories[category.category_id] = category
        logger.debug(
            "Category added",
            category_id=category.category_id,
            name=category.name,
        )

    def create_category(self, name: str) -> Category:
        """Создание категории со следующим свободным идентификатором и её добавление."""
        category = Category(category_id=self._next_category_id(), name=name)
        self.add_category(category)
        return category

    def _next_category_id(self) -> int:
        category_id = next(self._category_ids)
        while category_id in self._categories:
            category_id = next(self._category_ids)
        return category_id

    def get_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_category(self, category_id: int) -> Category:
        """
        Разрешение handle категории.

        Raises:
            UnknownCategoryError: категория не зарегистрирована
        """
        try:
            return self._categories[category_id]
        except KeyError:
            raise UnknownCategoryError(category_id) from None

    def category_of(self, product: Product) -> Category:
        """Категория-владелец товара (по product.category_id)."""
        return self.get_category(product.category_id)

    def __iter__(self) -> Iterator[Category]:
        return iter(self.get_categories())

    def __len__(self) -> int:
        return len(self._categories)

    def __bool__(self) -> bool:
        return True

    # -------------------------------------------------------------------------
    # Товары
    # -------------------------------------------------------------------------

    def create_product(self, name: str, price: float, category: Category) -> Product:
        """
        Создание товара с новым идентификатором, привязанного к category.

        Товар НЕ добавляется в категорию: для этого есть add_product_to_category.
        """
        product = Product(
            product_id=next(self._product_ids),
            name=name,
            price=price,
            category_id=category.category_id,
        )
        logger.debug(
            "Product created",
            product_id=product.product_id,
            name=product.name,
            category_id=product.category_id,
        )
        return product

    def add_product_to_category(self, product: Product, category: Category) -> None:
        """
        Добавление товара в категорию.

        Соответствие product.category_id и category не проверяется:
        расхождение только логируется.
        """
        if product.category_id != category.category_id:
            logger.warning(
                "Product category mismatch",
                product=product.name,
                product_category_id=product.category_id,
                target_category_id=category.category_id,
            )
        category.add_product(product)

    def get_products_by_category(self, category: Category) -> list[Product]:
        return self.lookup_strategy.get_products_by_category(category)
