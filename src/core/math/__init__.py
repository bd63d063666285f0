"""
Core math modules

Денежные примитивы корзины: стоимость строк, скидки, сравнение и форматирование сумм.
"""

from src.core.math.pricing import (
    # Constants
    AMOUNT_SIGNIFICANT_DIGITS,
    EPS_AMOUNT_COMPARE_ABS,
    EPS_AMOUNT_COMPARE_REL,
    # Validation
    is_valid_float,
    validate_in_range,
    validate_non_negative,
    # Amounts
    amounts_equal,
    apply_price_mult,
    format_amount,
    line_total,
    sum_amounts,
)

__all__ = [
    "AMOUNT_SIGNIFICANT_DIGITS",
    "EPS_AMOUNT_COMPARE_ABS",
    "EPS_AMOUNT_COMPARE_REL",
    "is_valid_float",
    "validate_in_range",
    "validate_non_negative",
    "amounts_equal",
    "apply_price_mult",
    "format_amount",
    "line_total",
    "sum_amounts",
]
