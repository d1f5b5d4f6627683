"""
Numerical Safeguards — Безопасные числовые примитивы

Модуль обеспечивает численную устойчивость bounded (float) режима и общие
правила округления для обоих режимов:
- Проверка float на конечность (inf/NaN никогда не попадают в цикл деления)
- Clamp индекса цифры в допустимый диапазон
- Округление half-up (half away from zero для неотрицательных значений)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Округление детерминировано и не зависит от banker's rounding Python round()
2. Float округляется через кратчайшее десятичное представление (repr),
   поэтому 0.125 -> 0.13, а не 0.12
3. Все операции чистые и воспроизводимые
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final, TypeVar

Number = TypeVar("Number", float, Decimal)

# Шаг квантования для округления до целого
UNIT: Final[Decimal] = Decimal(1)

# Запас точности контекста округления
ROUNDING_HEADROOM: Final[int] = 4


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def quantum(places: int) -> Decimal:
    """Шаг квантования 10**-places (places >= 0)."""
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    return UNIT.scaleb(-places)


def round_half_up(value: Number, places: int = 0) -> Number:
    """
    Округление half-up до places десятичных знаков.

    Тип результата совпадает с типом входа: float -> float, Decimal -> Decimal.

    Args:
        value: Значение для округления
        places: Количество знаков после запятой (default: 0)

    Returns:
        Округлённое значение

    Examples:
        >>> round_half_up(0.125, 2)
        0.13
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(Decimal("0.45"), 1)
        Decimal('0.5')
    """
    step = quantum(places)

    if isinstance(value, Decimal):
        exact = value
    else:
        if not is_valid_float(value):
            raise ValueError(f"cannot round non-finite value {value}")
        exact = Decimal(repr(value))

    # Точности хватает на целую часть и places знаков
    context = Context(prec=max(exact.adjusted(), 0) + places + ROUNDING_HEADROOM)
    rounded = exact.quantize(step, rounding=ROUND_HALF_UP, context=context)

    if isinstance(value, Decimal):
        return rounded
    return float(rounded)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5, 0, 9)
        5
        >>> clamp(12, 0, 11)
        11
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def validate_radix(radix: int, name: str = "radix") -> None:
    """
    Проверка основания системы счисления.

    Raises:
        ValueError: radix < 2 (повторное деление не завершится)
    """
    if radix < 2:
        raise ValueError(f"{name} must be >= 2, got {radix}")
