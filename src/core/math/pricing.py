"""
Pricing — Денежные примитивы корзины

Модуль содержит базовые операции над суммами:
- Проверка корректности float (NaN/Inf)
- Стоимость строки корзины (price * quantity)
- Применение скидочного множителя
- Сравнение сумм с учётом машинной точности
- Форматирование сумм для вывода

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в итоговые суммы (ValueError)
2. Отрицательные цены и количества запрещены
3. Форматирование детерминировано: 6 значащих цифр, без хвостовых нулей
"""

import math
from typing import Final, Iterable

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения сумм
EPS_AMOUNT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения сумм
EPS_AMOUNT_COMPARE_ABS: Final[float] = 1e-9

# Количество значащих цифр при выводе суммы
AMOUNT_SIGNIFICANT_DIGITS: Final[int] = 6


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """Проверка, что значение не NaN и не Inf."""
    return not (math.isnan(value) or math.isinf(value))


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне.

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


# =============================================================================
# СУММЫ
# =============================================================================


def line_total(price: float, quantity: int) -> float:
    """
    Стоимость строки корзины.

    Формула: line_total = price * quantity

    Args:
        price: Цена за единицу (>= 0)
        quantity: Количество единиц (>= 0)

    Returns:
        Стоимость строки

    Raises:
        ValueError: Если price или quantity отрицательные, либо price NaN/Inf

    Examples:
        >>> line_total(20.0, 3)
        60.0
        >>> line_total(1500.0, 0)
        0.0
    """
    validate_non_negative(price, "price")
    if quantity < 0:
        raise ValueError(f"quantity must be non-negative, got {quantity}")

    return price * quantity


def apply_price_mult(amount: float, price_mult: float) -> float:
    """
    Применение скидочного множителя к сумме.

    Args:
        amount: Исходная сумма (>= 0)
        price_mult: Множитель в [0, 1] (например 0.9 = скидка 10%)

    Returns:
        amount * price_mult

    Examples:
        >>> apply_price_mult(1500.0, 0.9)
        1350.0
    """
    validate_non_negative(amount, "amount")
    validate_in_range(price_mult, "price_mult", min_value=0.0, max_value=1.0)

    return amount * price_mult


def sum_amounts(amounts: Iterable[float]) -> float:
    """
    Сумма списка сумм с защитой от NaN/Inf.

    Пустой список даёт 0.0.

    Raises:
        ValueError: Если хотя бы одно значение NaN/Inf
    """
    total = 0.0
    for amount in amounts:
        if not is_valid_float(amount):
            raise ValueError(f"amount must be a valid float (not NaN/Inf), got {amount}")
        total += amount
    return total


def amounts_equal(
    a: float,
    b: float,
    rel_tol: float = EPS_AMOUNT_COMPARE_REL,
    abs_tol: float = EPS_AMOUNT_COMPARE_ABS,
) -> bool:
    """
    Сравнение сумм с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> amounts_equal(0.1 + 0.2, 0.3)
        True
        >>> amounts_equal(1570.0, 1570.01)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_amount(amount: float, digits: int = AMOUNT_SIGNIFICANT_DIGITS) -> str:
    """
    Форматирование суммы для текстового вывода корзины.

    Используется общий формат с фиксированным числом значащих цифр:
    целые суммы выводятся без дробной части, хвостовые нули отбрасываются.

    Args:
        amount: Сумма
        digits: Число значащих цифр (default: 6)

    Returns:
        Строковое представление суммы

    Examples:
        >>> format_amount(1570.0)
        '1570'
        >>> format_amount(44.5)
        '44.5'
        >>> format_amount(0.0)
        '0'
    """
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")

    return f"{amount:.{digits}g}"
