"""
Fraction Conversion — Конвертация дробной части через десятичное представление

Двухэтапный конвейер, общий для обоих backend:

Stage 1 (base -> decimal):
    К цифрам добавляется синтетический хвостовой ноль, затем
    pointer = Σ d_k * base^-k  (k = 1 .. resolution + 1)
    и pointer округляется half-up до resolution десятичных знаков.

Stage 2 (decimal -> base):
    pointer = fraction * base
    перед каждой цифрой pointer округляется до resolution знаков
    (точное значение fraction * base^k их не превышает)
    позиции 1 .. resolution - 1: цифра = floor(pointer),
        далее pointer = (pointer - floor(pointer)) * base
    последняя позиция: цифра = round_half_up(pointer), clamp до base - 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число выходных цифр == resolution == число входных цифр
2. Clamp применяется ТОЛЬКО к последней цифре (lossy, намеренно)
3. При resolution == 1 единственная цифра считается последней
4. Если Stage 1 округляет дробь до 1, результат — resolution нулей и
   carry = 1 (единица переносится в целую часть)
5. В arbitrary-precision режиме дробь всё равно проходит через десятичное
   представление с ограниченной точностью (scale)
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence, TypeVar

from src.core.domain.numbers import DigitSequence
from src.core.math.arithmetic import Arithmetic
from src.core.math.numerical_safeguards import clamp, validate_radix

logger = logging.getLogger(__name__)

M = TypeVar("M")

# Дополнительные знаки scale для base^-k в decimal-string режиме
FRACTION_GUARD_DIGITS: Final[int] = 10


def working_scale(base: int, resolution: int) -> int:
    """
    Число десятичных знаков для base^-k в Stage 1.

    Дробь из resolution цифр в основании base отстоит от ближайшей границы
    округления (если не лежит на ней) не меньше чем на 1 / (2 * 10^r * base^r),
    поэтому scale растёт с resolution и разрядностью base.
    """
    return resolution + (resolution + 2) * len(str(base)) + FRACTION_GUARD_DIGITS


@dataclass(frozen=True)
class FractionConversion:
    """Результат конвертации дробной части."""

    digits: tuple[int, ...]

    # 1 если дробь округлилась до целой единицы
    carry: int

    # True если последняя цифра была ограничена base - 1
    clamped: bool


# =============================================================================
# STAGE 1
# =============================================================================


def fraction_to_decimal(
    digits: Sequence[int],
    base: int,
    arithmetic: Arithmetic[M],
    resolution: int | None = None,
) -> M:
    """
    Дробные цифры в основании base -> десятичная дробь.

    Args:
        digits: Индексы дробных цифр, старший разряд первым
        base: Основание исходной системы
        arithmetic: Backend
        resolution: Число десятичных знаков (default: len(digits))

    Returns:
        Десятичная дробь в [0, 1], округлённая half-up до resolution знаков

    Examples:
        >>> from src.core.math.arithmetic import NativeArithmetic
        >>> fraction_to_decimal([6], 12, NativeArithmetic())
        0.5
    """
    validate_radix(base, "base")
    if resolution is None:
        resolution = len(digits)

    scale = working_scale(base, resolution)
    radix = arithmetic.from_int(base)
    power = arithmetic.from_int(1)
    pointer = arithmetic.zero()

    # Синтетический хвостовой ноль гасит ошибку усечения
    for digit in [*digits, 0]:
        power = arithmetic.mul(power, radix)
        term = arithmetic.mul(arithmetic.from_int(digit), arithmetic.reciprocal(power, scale))
        pointer = arithmetic.add(pointer, term)

    # Снимаем ошибку усечения base^-k, затем округляем до resolution
    pointer = arithmetic.round_places(pointer, scale - FRACTION_GUARD_DIGITS)
    return arithmetic.round_places(pointer, resolution)


# =============================================================================
# STAGE 2
# =============================================================================


def decimal_to_fraction(
    fraction: M,
    base: int,
    resolution: int,
    arithmetic: Arithmetic[M],
    places: int | None = None,
) -> FractionConversion:
    """
    Десятичная дробь -> resolution дробных цифр в основании base.

    fraction * base^k имеет не больше places десятичных знаков, поэтому pointer
    округляется до places знаков перед каждым floor и round. Для точного
    backend это no-op, для float снимает ошибку вида 1.9999999999999996.

    Args:
        fraction: Десятичная дробь в [0, 1] с не более чем places знаками
        base: Основание целевой системы
        resolution: Число выходных цифр (>= 1)
        arithmetic: Backend
        places: Десятичные знаки fraction (default: resolution, как после Stage 1)

    Returns:
        FractionConversion (digits, carry, clamped)
    """
    validate_radix(base, "base")
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    if places is None:
        places = resolution

    one = arithmetic.from_int(1)
    if arithmetic.compare(fraction, one) >= 0:
        return FractionConversion(digits=(0,) * resolution, carry=1, clamped=False)

    radix = arithmetic.from_int(base)
    pointer = arithmetic.mul(fraction, radix)
    digits: DigitSequence = []
    clamped = False

    for position in range(1, resolution + 1):
        if position > 1:
            pointer = arithmetic.mul(arithmetic.sub(pointer, arithmetic.floor(pointer)), radix)
        pointer = arithmetic.round_places(pointer, places)

        if position < resolution:
            digits.append(arithmetic.to_int(arithmetic.floor(pointer)))
            continue

        # Последняя цифра: округление и clamp (например, "12" в base-12)
        rounded = arithmetic.to_int(arithmetic.round_places(pointer, 0))
        digit = clamp(rounded, max_value=base - 1)
        if digit != rounded:
            clamped = True
            logger.debug(
                "fraction_digit_clamped",
                extra={"rounded": rounded, "clamped_to": digit, "base": base},
            )
        digits.append(digit)

    return FractionConversion(digits=tuple(digits), carry=0, clamped=clamped)


def convert_fraction(
    digits: Sequence[int],
    source_base: int,
    target_base: int,
    arithmetic: Arithmetic[M],
) -> FractionConversion:
    """
    Дробная часть: source_base -> target_base с сохранением resolution.

    Examples:
        >>> from src.core.math.arithmetic import NativeArithmetic
        >>> convert_fraction([6], 12, 10, NativeArithmetic()).digits
        (5,)
    """
    resolution = len(digits)
    if resolution == 0:
        raise ValueError("fractional digits must not be empty")

    decimal_fraction = fraction_to_decimal(digits, source_base, arithmetic, resolution)
    return decimal_to_fraction(decimal_fraction, target_base, resolution, arithmetic)
