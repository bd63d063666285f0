"""Cart — корзины пользователей и политики расчёта цены."""

from .cart import Cart, CartEntry, CartLine, CartSummary, DiscountedCart
from .pricing_policy import (
    DISCOUNTED_CART_TITLE,
    PLAIN_CART_TITLE,
    DiscountConfig,
    EveryNthEntryDiscount,
    PlainPricing,
    PricingPolicy,
)

__all__ = [
    "Cart",
    "DiscountedCart",
    "CartEntry",
    "CartLine",
    "CartSummary",
    "PricingPolicy",
    "PlainPricing",
    "EveryNthEntryDiscount",
    "DiscountConfig",
    "PLAIN_CART_TITLE",
    "DISCOUNTED_CART_TITLE",
]
