"""
Value objects для разобранных чисел.

DigitSequence — список индексов цифр, старший разряд первым (порядок чтения
совпадает с порядком отображения). Ноль — это [0], пустой список недопустим
для целой части.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DigitSequence = list[int]


class BaseSide(str, Enum):
    """Какая из двух систем конвертера."""

    HOST = "host"
    TARGET = "target"


class Direction(str, Enum):
    """Направление конвертации."""

    HOST_TO_TARGET = "host_to_target"
    TARGET_TO_HOST = "target_to_host"

    @property
    def source(self) -> BaseSide:
        return BaseSide.HOST if self is Direction.HOST_TO_TARGET else BaseSide.TARGET

    @property
    def destination(self) -> BaseSide:
        return BaseSide.TARGET if self is Direction.HOST_TO_TARGET else BaseSide.HOST


@dataclass(frozen=True)
class ParsedNumber:
    """Результат разбора строки (индексы в алфавите исходной системы)."""

    is_negative: bool
    integer_digits: tuple[int, ...]

    # None: дробной части нет
    fractional_digits: Optional[tuple[int, ...]] = None

    @property
    def has_fraction(self) -> bool:
        return self.fractional_digits is not None
