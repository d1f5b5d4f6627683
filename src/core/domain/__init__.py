"""
Domain models and value objects.

Contains alphabets, numeral systems, immutable configuration, parsed numbers
and the error taxonomy.
"""

from src.core.domain.alphabet import DECIMAL_NUMERALS, MIN_RADIX, Alphabet
from src.core.domain.config import (
    DEFAULT_GROUP_SIZE,
    DEFAULT_MAX_NUMBER_LENGTH,
    DEFAULT_NEGATIVE_SIGN,
    BaseConfig,
    ConverterConfig,
    FormatConfig,
    host_format,
    target_format,
)
from src.core.domain.errors import (
    ConfigurationError,
    ConversionError,
    DuplicateNumeralError,
    EmptyAlphabetError,
    EmptyDigitsError,
    EmptyInputError,
    FormatConflictError,
    InvalidNumeralError,
    MagnitudeOverflowError,
    NumberTooLongError,
    NumeralBaseError,
    UnknownNumeralError,
)
from src.core.domain.numbers import BaseSide, DigitSequence, Direction, ParsedNumber
from src.core.domain.numeral_system import NumeralSystem

__all__ = [
    # Alphabet
    "Alphabet",
    "DECIMAL_NUMERALS",
    "MIN_RADIX",
    # Config
    "BaseConfig",
    "ConverterConfig",
    "FormatConfig",
    "host_format",
    "target_format",
    "DEFAULT_GROUP_SIZE",
    "DEFAULT_MAX_NUMBER_LENGTH",
    "DEFAULT_NEGATIVE_SIGN",
    # Numeral system
    "NumeralSystem",
    # Numbers
    "BaseSide",
    "DigitSequence",
    "Direction",
    "ParsedNumber",
    # Errors
    "NumeralBaseError",
    "ConfigurationError",
    "EmptyAlphabetError",
    "DuplicateNumeralError",
    "FormatConflictError",
    "UnknownNumeralError",
    "EmptyInputError",
    "InvalidNumeralError",
    "NumberTooLongError",
    "EmptyDigitsError",
    "MagnitudeOverflowError",
    "ConversionError",
]
