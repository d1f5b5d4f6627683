"""
Тесты арифметических backends

Проверяет:
1. NativeArithmetic: базовые операции, обнаружение переполнения
2. DecimalStringArithmetic: точность за пределами 2**53, канонические строки
3. Одинаковое поведение backends в безопасном диапазоне
"""

import pytest

from src.core.domain import MagnitudeOverflowError
from src.core.math import (
    DecimalStringArithmetic,
    NativeArithmetic,
    select_arithmetic,
)


@pytest.fixture
def native():
    return NativeArithmetic()


@pytest.fixture
def decimal_string():
    return DecimalStringArithmetic()


class TestNativeArithmetic:
    """Тесты bounded backend"""

    def test_integer_operations(self, native) -> None:
        assert native.add(2.0, 3.0) == 5.0
        assert native.sub(5.0, 3.0) == 2.0
        assert native.mul(12.0, 144.0) == 1728.0
        assert native.div(1728.0, 10.0) == 172.0
        assert native.mod(1728.0, 10.0) == 8.0

    def test_compare(self, native) -> None:
        assert native.compare(1.0, 2.0) == -1
        assert native.compare(2.0, 2.0) == 0
        assert native.compare(3.0, 2.0) == 1
        assert native.is_zero(0.0)

    def test_fractional_operations(self, native) -> None:
        assert native.floor(2.75) == 2.0
        assert native.reciprocal(4.0, 10) == 0.25
        assert native.round_places(0.125, 2) == 0.13

    def test_overflow_detected(self, native) -> None:
        with pytest.raises(MagnitudeOverflowError, match="arbitrary precision"):
            native.ensure_finite(float("inf"))

    def test_finite_passes(self, native) -> None:
        assert native.ensure_finite(1e300) == 1e300


class TestDecimalStringArithmetic:
    """Тесты arbitrary-precision backend"""

    def test_exact_beyond_float(self, decimal_string) -> None:
        """2**64 + 1 не теряет младший разряд"""
        big = str(2**64)
        assert decimal_string.add(big, "1") == str(2**64 + 1)
        assert decimal_string.mul("99999999999999999999", "12") == "1199999999999999999988"

    def test_div_mod(self, decimal_string) -> None:
        value = str(10**40 + 7)
        assert decimal_string.div(value, "10") == str(10**39)
        assert decimal_string.mod(value, "10") == "7"

    def test_canonical_strings(self, decimal_string) -> None:
        """Без экспоненты и хвостовых нулей"""
        assert decimal_string.sub("1.50", "0.5") == "1"
        assert decimal_string.mul("1000000", "1000000") == "1000000000000"
        assert decimal_string.from_int(0) == "0"

    def test_compare(self, decimal_string) -> None:
        assert decimal_string.compare("9", "10") == -1
        assert decimal_string.compare("1.0", "1") == 0
        assert decimal_string.is_zero("0")
        assert not decimal_string.is_zero("0.001")

    def test_floor(self, decimal_string) -> None:
        assert decimal_string.floor("7.999") == "7"
        assert decimal_string.floor("3") == "3"

    def test_reciprocal_truncated_to_scale(self, decimal_string) -> None:
        assert decimal_string.reciprocal("3", 5) == "0.33333"
        assert decimal_string.reciprocal("8", 10) == "0.125"

    def test_round_places(self, decimal_string) -> None:
        assert decimal_string.round_places("0.25", 1) == "0.3"
        assert decimal_string.round_places("0.24999", 1) == "0.2"
        assert decimal_string.round_places("9.5", 0) == "10"

    def test_to_int(self, decimal_string) -> None:
        assert decimal_string.to_int(str(10**30)) == 10**30


class TestSelectArithmetic:
    """Тесты выбора backend по флагу"""

    def test_bounded(self) -> None:
        assert select_arithmetic(False).name == "native"

    def test_arbitrary(self) -> None:
        assert select_arithmetic(True).name == "decimal_string"
