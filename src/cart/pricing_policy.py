"""
Pricing Policy — правило расчёта строк корзины

Cart не переопределяет вывод для скидочного варианта: вместо этого корзина
получает политику, которая задаёт заголовок дампа и цену каждой строки.

Политики:
- PlainPricing: строка оплачивается полностью, заголовок "Cart:"
- EveryNthEntryDiscount: каждая N-я ОТЛИЧНАЯ запись корзины (по порядку
  итерации, 1-based) умножается на price_mult, заголовок "Cart with discount:"

Скидка позиционная: считается по записям (товарам), а не по единицам товара.
Запись с quantity=5 на третьей позиции получает скидку целиком,
а три единицы одного товара на первой позиции не получают.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final

from src.core.math.pricing import apply_price_mult, validate_in_range

PLAIN_CART_TITLE: Final[str] = "Cart:"
DISCOUNTED_CART_TITLE: Final[str] = "Cart with discount:"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DiscountConfig:
    """Конфигурация периодической скидки.

    - every_nth: скидка на каждую every_nth запись (default 3)
    - price_mult: множитель цены строки со скидкой (default 0.9 = -10%)
    """
    every_nth: int = 3
    price_mult: float = 0.9

    def __post_init__(self):
        if self.every_nth < 1:
            raise ValueError(f"every_nth must be >= 1, got {self.every_nth}")
        validate_in_range(self.price_mult, "price_mult", min_value=0.0, max_value=1.0)


# =============================================================================
# POLICIES
# =============================================================================


class PricingPolicy(ABC):
    """Правило цены строки корзины."""

    title: str = PLAIN_CART_TITLE

    @abstractmethod
    def price_line(self, position: int, line_total: float) -> tuple[float, bool]:
        """Цена строки с учётом политики.

        Args:
            position: позиция записи в порядке итерации (1-based)
            line_total: price * quantity

        Returns:
            (итоговая сумма строки, применена ли скидка)
        """
        ...


class PlainPricing(PricingPolicy):
    """Без скидок."""

    title = PLAIN_CART_TITLE

    def price_line(self, position: int, line_total: float) -> tuple[float, bool]:
        return line_total, False


class EveryNthEntryDiscount(PricingPolicy):
    """Скидка на каждую N-ю запись корзины."""

    title = DISCOUNTED_CART_TITLE

    def __init__(self, config: DiscountConfig | None = None):
        self.config = config or DiscountConfig()

    def is_discounted(self, position: int) -> bool:
        return position % self.config.every_nth == 0

    def price_line(self, position: int, line_total: float) -> tuple[float, bool]:
        if not self.is_discounted(position):
            return line_total, False
        return apply_price_mult(line_total, self.config.price_mult), True
