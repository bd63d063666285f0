"""
Demo Scenario — фиксированный сценарий каталога и корзин

Сценарий:
1. Категории Electronics (Smartphone 1000, Laptop 1500) и Clothing (T-Shirt 20, Jeans 50)
2. Alice, DiscountedCart: Smartphone, T-Shirt, Laptop, Jeans
3. Bob, Cart: Laptop, T-Shirt, Jeans
4. Вывод корзин, удаление (Alice: Smartphone, Bob: Laptop), вывод "Updated Carts:"

Пользователи выводятся в порядке имени.
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from src.cart import Cart, DiscountedCart
from src.catalog import Catalog
from src.core.domain.product import Product
from src.core.log import configure_logging, get_logger

logger = get_logger(__name__).bind(component="scenario")

UPDATED_CARTS_HEADER = "Updated Carts:"


@dataclass(frozen=True)
class ScenarioConfig:
    """Конфигурация запуска сценария."""
    log_level: str = "WARNING"


@dataclass
class SampleData:
    """Каталог и товары сценария (товары по имени)."""

    catalog: Catalog
    products: dict[str, Product]


def build_sample_catalog() -> SampleData:
    """Каталог: Electronics (Smartphone, Laptop), Clothing (T-Shirt, Jeans)."""
    catalog = Catalog()
    electronics = catalog.create_category("Electronics")
    clothing = catalog.create_category("Clothing")

    products = {}
    for name, price, category in (
        ("Smartphone", 1000.0, electronics),
        ("Laptop", 1500.0, electronics),
        ("T-Shirt", 20.0, clothing),
        ("Jeans", 50.0, clothing),
    ):
        product = catalog.create_product(name, price, category)
        catalog.add_product_to_category(product, category)
        products[name] = product

    return SampleData(catalog=catalog, products=products)


def build_sample_carts(products: dict[str, Product]) -> dict[str, Cart]:
    """Корзины Alice (со скидкой) и Bob (обычная)."""
    users: dict[str, Cart] = {
        "Alice": DiscountedCart(),
        "Bob": Cart(),
    }

    for name in ("Smartphone", "T-Shirt", "Laptop", "Jeans"):
        users["Alice"].add_product(products[name])
    for name in ("Laptop", "T-Shirt", "Jeans"):
        users["Bob"].add_product(products[name])

    return users


def print_users(users: dict[str, Cart], out: TextIO) -> None:
    for user_name in sorted(users):
        print(f"User: {user_name}", file=out)
        users[user_name].print_cart(out)
        print(file=out)


def run_scenario(out: Optional[TextIO] = None) -> dict[str, Cart]:
    """
    Выполнение сценария с выводом в out (default: stdout).

    Returns:
        Корзины пользователей после удаления товаров
    """
    out = out or sys.stdout

    sample = build_sample_catalog()
    users = build_sample_carts(sample.products)
    logger.info("Scenario started", users=len(users), categories=len(sample.catalog))

    print_users(users, out)

    users["Alice"].remove_product(sample.products["Smartphone"])
    users["Bob"].remove_product(sample.products["Laptop"])

    print(UPDATED_CARTS_HEADER, file=out)
    print_users(users, out)

    logger.info("Scenario finished")
    return users


def main(config: Optional[ScenarioConfig] = None) -> int:
    config = config or ScenarioConfig()
    configure_logging(config.log_level)
    run_scenario()
    return 0
