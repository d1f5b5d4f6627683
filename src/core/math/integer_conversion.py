"""
Integer Conversion — Конвертация целой части между основаниями

Алгоритм общий для обоих backend (Arithmetic):
- from_base: схема Горнера, magnitude = base * magnitude + digit
- to_base: повторное деление с остатком, младший разряд первым, затем reverse

ФОРМУЛЫ:
    from_base([d_1 .. d_n], b) = (((d_1 * b + d_2) * b + ...) * b + d_n)
    to_base(m, b): d = m mod b, m = m div b, пока m != 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_base([]) -> EmptyDigitsError
2. to_base(0) -> [0]
3. Результат to_base — старший разряд первым, без ведущих нулей
"""

from typing import Sequence, TypeVar

from src.core.domain.errors import EmptyDigitsError
from src.core.domain.numbers import DigitSequence
from src.core.math.arithmetic import Arithmetic
from src.core.math.numerical_safeguards import validate_radix

M = TypeVar("M")


def from_base(digits: Sequence[int], base: int, arithmetic: Arithmetic[M]) -> M:
    """
    Индексы цифр в основании base -> величина.

    Args:
        digits: Индексы цифр, старший разряд первым
        base: Основание исходной системы
        arithmetic: Backend

    Returns:
        Неотрицательная величина в представлении backend

    Raises:
        EmptyDigitsError: digits пуст
        MagnitudeOverflowError: bounded backend переполнен

    Examples:
        >>> from src.core.math.arithmetic import DecimalStringArithmetic
        >>> from_base([1, 0, 0, 0], 12, DecimalStringArithmetic())
        '1728'
    """
    if not digits:
        raise EmptyDigitsError("Cannot convert anything from a base because the array of digits is empty")
    validate_radix(base, "base")

    radix = arithmetic.from_int(base)
    magnitude = arithmetic.zero()

    for digit in digits:
        magnitude = arithmetic.add(arithmetic.mul(radix, magnitude), arithmetic.from_int(digit))

    return arithmetic.ensure_finite(magnitude)


def to_base(magnitude: M, base: int, arithmetic: Arithmetic[M]) -> DigitSequence:
    """
    Величина -> индексы цифр в основании base.

    Args:
        magnitude: Неотрицательная величина
        base: Основание целевой системы
        arithmetic: Backend

    Returns:
        Индексы цифр, старший разряд первым; [0] для нуля

    Raises:
        MagnitudeOverflowError: величина не конечна (bounded backend)
    """
    validate_radix(base, "base")
    magnitude = arithmetic.ensure_finite(magnitude)

    radix = arithmetic.from_int(base)
    digits: DigitSequence = []

    while not arithmetic.is_zero(magnitude):
        digits.append(arithmetic.to_int(arithmetic.mod(magnitude, radix)))
        magnitude = arithmetic.div(magnitude, radix)

    if not digits:
        return [0]

    digits.reverse()
    return digits


def convert_integer(
    digits: Sequence[int],
    source_base: int,
    target_base: int,
    arithmetic: Arithmetic[M],
) -> DigitSequence:
    """Целая часть: source_base -> target_base через величину."""
    return to_base(from_base(digits, source_base, arithmetic), target_base, arithmetic)
