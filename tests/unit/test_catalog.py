"""
Тесты для Catalog и стратегий выборки товаров

Покрытие:
- Добавление и создание категорий, порядок категорий
- Создание товаров и выдача идентификаторов
- get_products_by_category: ровно добавленные товары в порядке добавления
- Разрешение handle категории товара
- Подключаемые стратегии выборки
"""

import logging

import pytest

from src.catalog import (
    Catalog,
    CatalogError,
    CategoryProductsLookup,
    ProductLookupStrategy,
    SortedByPriceLookup,
    UnknownCategoryError,
)
from src.core.domain import Category, Product


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def electronics(catalog: Catalog) -> Category:
    return catalog.create_category("Electronics")


@pytest.fixture
def clothing(catalog: Catalog) -> Category:
    return catalog.create_category("Clothing")


# =============================================================================
# ТЕСТЫ: категории
# =============================================================================


class TestCategories:
    """Добавление и разрешение категорий."""

    def test_create_category_assigns_sequential_ids(self, catalog, electronics, clothing):
        assert electronics.category_id == 1
        assert clothing.category_id == 2
        assert catalog.get_categories() == [electronics, clothing]
        assert len(catalog) == 2

    def test_add_external_category(self, catalog):
        books = Category(category_id=7, name="Books")
        catalog.add_category(books)

        assert catalog.get_category(7) is books
        assert list(catalog) == [books]

    def test_create_skips_taken_ids(self, catalog):
        catalog.add_category(Category(category_id=1, name="Books"))
        toys = catalog.create_category("Toys")

        assert toys.category_id == 2

    def test_readd_same_category_is_noop(self, catalog, electronics, clothing):
        catalog.add_category(electronics)

        assert catalog.get_categories() == [electronics, clothing]
        assert electronics.category_id == 1

    def test_colliding_category_gets_fresh_id(self, catalog, electronics, clothing, caplog):
        other = Category(category_id=electronics.category_id, name="Other")

        with caplog.at_level(logging.WARNING, logger="src.catalog.catalog"):
            catalog.add_category(other)

        assert other.category_id == 3
        assert catalog.get_category(1) is electronics
        assert catalog.get_category(3) is other
        assert catalog.get_categories() == [electronics, clothing, other]
        assert "Category id collision, reassigned" in caplog.text

    def test_empty_catalog_is_truthy(self):
        catalog = Catalog()
        assert len(catalog) == 0
        assert bool(catalog) is True

    def test_unknown_category(self, catalog):
        with pytest.raises(UnknownCategoryError) as exc_info:
            catalog.get_category(42)

        assert exc_info.value.category_id == 42
        assert isinstance(exc_info.value, CatalogError)
        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == "Unknown category_id: 42"

    def test_get_categories_returns_copy(self, catalog, electronics):
        catalog.get_categories().clear()
        assert catalog.get_categories() == [electronics]


# =============================================================================
# ТЕСТЫ: товары
# =============================================================================


class TestProducts:
    """Создание товаров и добавление в категории."""

    def test_create_product_binds_category(self, catalog, electronics):
        phone = catalog.create_product("Smartphone", 1000.0, electronics)

        assert phone.product_id == 1
        assert phone.category_id == electronics.category_id
        assert catalog.category_of(phone) is electronics

    def test_create_product_does_not_add_to_category(self, catalog, electronics):
        catalog.create_product("Smartphone", 1000.0, electronics)
        assert catalog.get_products_by_category(electronics) == []

    def test_product_ids_unique_across_categories(self, catalog, electronics, clothing):
        phone = catalog.create_product("Smartphone", 1000.0, electronics)
        jeans = catalog.create_product("Jeans", 50.0, clothing)

        assert phone.product_id != jeans.product_id

    def test_products_by_category_exact_and_ordered(self, catalog, electronics, clothing):
        phone = catalog.create_product("Smartphone", 1000.0, electronics)
        laptop = catalog.create_product("Laptop", 1500.0, electronics)
        tshirt = catalog.create_product("T-Shirt", 20.0, clothing)
        jeans = catalog.create_product("Jeans", 50.0, clothing)

        catalog.add_product_to_category(laptop, electronics)
        catalog.add_product_to_category(tshirt, clothing)
        catalog.add_product_to_category(phone, electronics)
        clothing.add_product(jeans)

        assert catalog.get_products_by_category(electronics) == [laptop, phone]
        assert catalog.get_products_by_category(clothing) == [tshirt, jeans]

    def test_category_mismatch_not_rejected(self, catalog, electronics, clothing, caplog):
        jeans = catalog.create_product("Jeans", 50.0, clothing)

        with caplog.at_level(logging.WARNING, logger="src.catalog.catalog"):
            catalog.add_product_to_category(jeans, electronics)

        assert catalog.get_products_by_category(electronics) == [jeans]
        assert catalog.category_of(jeans) is clothing
        assert "Product category mismatch" in caplog.text


# =============================================================================
# ТЕСТЫ: стратегии
# =============================================================================


class TestLookupStrategies:
    """Подключаемые стратегии выборки товаров."""

    @pytest.fixture
    def category(self) -> Category:
        category = Category(category_id=1, name="Mixed")
        for product_id, name, price in (
            (1, "B", 30.0),
            (2, "A", 10.0),
            (3, "C", 30.0),
            (4, "D", 20.0),
        ):
            category.add_product(
                Product(product_id=product_id, name=name, price=price, category_id=1)
            )
        return category

    def test_default_strategy(self):
        assert isinstance(Catalog().lookup_strategy, CategoryProductsLookup)

    def test_default_returns_insertion_order(self, category):
        names = [p.name for p in CategoryProductsLookup().get_products_by_category(category)]
        assert names == ["B", "A", "C", "D"]

    def test_sorted_by_price_stable(self, category):
        names = [p.name for p in SortedByPriceLookup().get_products_by_category(category)]
        assert names == ["A", "D", "B", "C"]

    def test_sorted_by_price_descending(self, category):
        lookup = SortedByPriceLookup(descending=True)
        names = [p.name for p in lookup.get_products_by_category(category)]
        assert names == ["B", "C", "D", "A"]

    def test_catalog_uses_injected_strategy(self, category):
        catalog = Catalog(lookup_strategy=SortedByPriceLookup())
        catalog.add_category(category)

        prices = [p.price for p in catalog.get_products_by_category(category)]
        assert prices == [10.0, 20.0, 30.0, 30.0]

    def test_custom_strategy(self, category):
        class CheapOnly(ProductLookupStrategy):
            def get_products_by_category(self, category):
                return [p for p in category.get_products() if p.price < 25.0]

        catalog = Catalog(lookup_strategy=CheapOnly())
        assert [p.name for p in catalog.get_products_by_category(category)] == ["A", "D"]

    def test_strategy_is_abstract(self):
        with pytest.raises(TypeError):
            ProductLookupStrategy()
