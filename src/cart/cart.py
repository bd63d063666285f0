"""
Cart — корзина пользователя

Корзина хранит записи Product → (товар, количество).
Ключ: значение товара (frozen, хешируется по всем полям), а не идентичность
объекта. Товары из разных каталогов с одинаковым product_id не смешиваются.

Правила:
- add_product: +1 к количеству (или новая запись с quantity=1)
- remove_product: -1; при quantity=1 запись удаляется; отсутствующий товар: no-op
- Количество никогда не бывает 0 или отрицательным

Порядок итерации: порядок первого добавления записи. Запись, удалённая
и добавленная снова, оказывается в конце.

Расчёт итогов делегирован PricingPolicy (см. pricing_policy.py):
Cart и DiscountedCart отличаются только политикой.
"""

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from pydantic import BaseModel, Field

from src.cart.pricing_policy import (
    DiscountConfig,
    EveryNthEntryDiscount,
    PlainPricing,
    PricingPolicy,
)
from src.core.domain.product import Product
from src.core.log import get_logger
from src.core.math.pricing import format_amount, sum_amounts

logger = get_logger(__name__).bind(component="cart")


# =============================================================================
# ENTRY / SUMMARY
# =============================================================================


@dataclass
class CartEntry:
    """Запись корзины: товар и его количество (>= 1)."""

    product: Product
    quantity: int = 1


class CartLine(BaseModel):
    """Строка дампа корзины."""

    position: int = Field(..., ge=1, description="Позиция записи в порядке итерации (1-based)")
    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    line_total: float = Field(..., ge=0, description="Сумма строки после политики цены")
    discounted: bool = Field(default=False, description="Применена ли скидка к строке")

    model_config = {"frozen": True}

    def render(self) -> str:
        return (
            f"Product: {self.product_name}, Quantity: {self.quantity}, "
            f"Price: {format_amount(self.line_total)}"
        )


class CartSummary(BaseModel):
    """Снапшот корзины: заголовок, строки и итог."""

    title: str
    lines: list[CartLine] = Field(default_factory=list)
    total_price: float = Field(..., ge=0)

    model_config = {"frozen": True}

    def render(self) -> list[str]:
        return [
            self.title,
            *(line.render() for line in self.lines),
            f"Total Price: {format_amount(self.total_price)}",
        ]


# =============================================================================
# CART
# =============================================================================


class Cart:
    """Корзина без скидок (или с политикой, переданной явно)."""

    def __init__(self, pricing_policy: Optional[PricingPolicy] = None):
        self.pricing_policy = pricing_policy or PlainPricing()
        self._entries: dict[Product, CartEntry] = {}
        self.logger = logger.bind(cart=type(self).__name__)

    # -------------------------------------------------------------------------
    # Изменение
    # -------------------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        entry = self._entries.get(product)
        if entry is not None:
            entry.quantity += 1
        else:
            entry = CartEntry(product=product, quantity=1)
            self._entries[product] = entry

        self.logger.debug("Product added", product=product.name, quantity=entry.quantity)

    def remove_product(self, product: Product) -> None:
        entry = self._entries.get(product)
        if entry is None:
            self.logger.debug("Remove of absent product ignored", product=product.name)
            return

        if entry.quantity > 1:
            entry.quantity -= 1
            self.logger.debug("Product removed", product=product.name, quantity=entry.quantity)
        else:
            del self._entries[product]
            self.logger.debug("Entry removed", product=product.name)

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def quantity_of(self, product: Product) -> int:
        """Количество товара в корзине (0, если записи нет)."""
        entry = self._entries.get(product)
        return entry.quantity if entry is not None else 0

    def entries(self) -> list[CartEntry]:
        """Записи в порядке итерации (копии, изменение не влияет на корзину)."""
        return [CartEntry(product=e.product, quantity=e.quantity) for e in self._entries.values()]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        # истинна и пустой
        return True

    def __iter__(self) -> Iterator[CartEntry]:
        return iter(self.entries())

    # -------------------------------------------------------------------------
    # Итоги
    # -------------------------------------------------------------------------

    def summarize(self) -> CartSummary:
        """
        Расчёт строк и итога по текущей политике цены.

        Для каждой записи: line_total = price * quantity, затем
        pricing_policy.price_line(position, line_total). Итог: сумма строк.
        """
        lines = []
        for position, entry in enumerate(self._entries.values(), start=1):
            amount, discounted = self.pricing_policy.price_line(
                position, entry.product.total_for(entry.quantity)
            )
            lines.append(
                CartLine(
                    position=position,
                    product_name=entry.product.name,
                    quantity=entry.quantity,
                    line_total=amount,
                    discounted=discounted,
                )
            )

        return CartSummary(
            title=self.pricing_policy.title,
            lines=lines,
            total_price=sum_amounts(line.line_total for line in lines),
        )

    def total_price(self) -> float:
        return self.summarize().total_price

    def render(self) -> list[str]:
        return self.summarize().render()

    def print_cart(self, out: Optional[TextIO] = None) -> None:
        """Вывод дампа корзины (default: stdout)."""
        out = out or sys.stdout
        for line in self.render():
            print(line, file=out)


class DiscountedCart(Cart):
    """Корзина со скидкой на каждую N-ю запись (default: каждая 3-я, -10%)."""

    def __init__(self, config: Optional[DiscountConfig] = None):
        super().__init__(pricing_policy=EveryNthEntryDiscount(config))
