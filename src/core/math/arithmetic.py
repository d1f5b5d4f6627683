"""
Arithmetic — Арифметические backends для конвертации

Один алгоритм конвертации (integer_conversion, fraction_conversion)
параметризуется интерфейсом Arithmetic. Две реализации:

- NativeArithmetic (bounded): IEEE-754 double. Быстро, но точность теряется
  молча за пределами 2**53 (принятое ограничение). Переполнение до inf
  обнаруживается и даёт MagnitudeOverflowError.
- DecimalStringArithmetic (arbitrary precision): величины хранятся как
  десятичные строки, каждая операция выполняется через decimal.Decimal
  в локальном контексте, точность которого рассчитана по длине операндов.
  Целочисленные результаты точные, ограничены только max_number_length.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все величины неотрицательны (знак обрабатывается вне арифметики)
2. div/mod — целочисленное деление с остатком (floor для неотрицательных)
3. Для величин в безопасном диапазоне оба backend дают одинаковые цифры
4. Десятичные строки канонические: без экспоненты, знака и хвостовых нулей
"""

import math
from abc import ABC, abstractmethod
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_FLOOR,
    Context,
    Decimal,
)
from typing import Final, Generic, TypeVar

from src.core.domain.errors import MagnitudeOverflowError
from src.core.math.numerical_safeguards import is_valid_float, quantum, round_half_up

M = TypeVar("M")

# Запас точности сверх суммарной длины операндов
PRECISION_HEADROOM: Final[int] = 8

# Минимальная точность локального контекста
MIN_PRECISION: Final[int] = 28


# =============================================================================
# INTERFACE
# =============================================================================


class Arithmetic(ABC, Generic[M]):
    """
    Набор операций над неотрицательными величинами типа M.

    Целочисленные операции (add, sub, mul, div, mod, compare, is_zero)
    используются для целой части; floor, reciprocal и round_places — для
    дробной части.
    """

    name: str = "abstract"

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    @abstractmethod
    def from_int(self, value: int) -> M: ...

    @abstractmethod
    def to_int(self, value: M) -> int: ...

    def zero(self) -> M:
        return self.from_int(0)

    # -------------------------------------------------------------------------
    # Integer operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def add(self, a: M, b: M) -> M: ...

    @abstractmethod
    def sub(self, a: M, b: M) -> M: ...

    @abstractmethod
    def mul(self, a: M, b: M) -> M: ...

    @abstractmethod
    def div(self, a: M, b: M) -> M:
        """Целочисленное деление (floor)."""

    @abstractmethod
    def mod(self, a: M, b: M) -> M: ...

    @abstractmethod
    def compare(self, a: M, b: M) -> int:
        """-1 если a < b, 0 если равны, 1 если a > b."""

    def is_zero(self, a: M) -> bool:
        return self.compare(a, self.zero()) == 0

    # -------------------------------------------------------------------------
    # Fractional operations
    # -------------------------------------------------------------------------

    @abstractmethod
    def floor(self, a: M) -> M: ...

    @abstractmethod
    def reciprocal(self, a: M, scale: int) -> M:
        """1 / a с точностью не хуже scale десятичных знаков (a >= 1)."""

    @abstractmethod
    def round_places(self, a: M, places: int) -> M:
        """Округление half-up до places десятичных знаков."""

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------

    def ensure_finite(self, a: M) -> M:
        """Проверка, что величина представима (по умолчанию всегда)."""
        return a


# =============================================================================
# BOUNDED BACKEND
# =============================================================================


class NativeArithmetic(Arithmetic[float]):
    """Bounded backend: нативный float."""

    name = "native"

    def from_int(self, value: int) -> float:
        return float(value)

    def to_int(self, value: float) -> int:
        return int(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div(self, a: float, b: float) -> float:
        return a // b

    def mod(self, a: float, b: float) -> float:
        return a % b

    def compare(self, a: float, b: float) -> int:
        return (a > b) - (a < b)

    def floor(self, a: float) -> float:
        return float(math.floor(a))

    def reciprocal(self, a: float, scale: int) -> float:
        return 1.0 / a

    def round_places(self, a: float, places: int) -> float:
        return round_half_up(a, places)

    def ensure_finite(self, a: float) -> float:
        if not is_valid_float(a):
            raise MagnitudeOverflowError(
                f"magnitude {a} is outside the float range; enable arbitrary precision"
            )
        return a


# =============================================================================
# ARBITRARY-PRECISION BACKEND
# =============================================================================


def _canonical(value: Decimal) -> str:
    """Decimal -> десятичная строка без экспоненты и хвостовых нулей."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def _context(*operands: str) -> Context:
    """Локальный контекст, точности которого хватает для точного результата."""
    precision = sum(len(operand) for operand in operands) + PRECISION_HEADROOM
    return Context(prec=max(precision, MIN_PRECISION), Emax=MAX_EMAX, Emin=MIN_EMIN)


class DecimalStringArithmetic(Arithmetic[str]):
    """
    Arbitrary-precision backend: десятичные строки.

    Examples:
        >>> arithmetic = DecimalStringArithmetic()
        >>> arithmetic.mul("99999999999999999999", "12")
        '1199999999999999999988'
        >>> arithmetic.div("1728", "10"), arithmetic.mod("1728", "10")
        ('172', '8')
    """

    name = "decimal_string"

    def from_int(self, value: int) -> str:
        return str(value)

    def to_int(self, value: str) -> int:
        return int(Decimal(value))

    def add(self, a: str, b: str) -> str:
        return _canonical(_context(a, b).add(Decimal(a), Decimal(b)))

    def sub(self, a: str, b: str) -> str:
        return _canonical(_context(a, b).subtract(Decimal(a), Decimal(b)))

    def mul(self, a: str, b: str) -> str:
        return _canonical(_context(a, b).multiply(Decimal(a), Decimal(b)))

    def div(self, a: str, b: str) -> str:
        return _canonical(_context(a, b).divide_int(Decimal(a), Decimal(b)))

    def mod(self, a: str, b: str) -> str:
        return _canonical(_context(a, b).remainder(Decimal(a), Decimal(b)))

    def compare(self, a: str, b: str) -> int:
        return int(Decimal(a).compare(Decimal(b)))

    def is_zero(self, a: str) -> bool:
        return Decimal(a).is_zero()

    def floor(self, a: str) -> str:
        return _canonical(Decimal(a).to_integral_value(rounding=ROUND_FLOOR))

    def reciprocal(self, a: str, scale: int) -> str:
        context = _context(a, "1" * scale)
        value = context.divide(Decimal(1), Decimal(a))
        return _canonical(value.quantize(quantum(scale), rounding=ROUND_DOWN, context=context))

    def round_places(self, a: str, places: int) -> str:
        return _canonical(round_half_up(Decimal(a), places))


def select_arithmetic(arbitrary_precision: bool) -> Arithmetic:
    """Backend по флагу режима точности."""
    if arbitrary_precision:
        return DecimalStringArithmetic()
    return NativeArithmetic()
