"""
Core math modules

Арифметические backends и алгоритмы конвертации целой и дробной части.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    quantum,
    round_half_up,
    validate_radix,
)

# Arithmetic backends
from src.core.math.arithmetic import (
    Arithmetic,
    DecimalStringArithmetic,
    NativeArithmetic,
    select_arithmetic,
)

# Integer conversion
from src.core.math.integer_conversion import convert_integer, from_base, to_base

# Fraction conversion
from src.core.math.fraction_conversion import (
    FRACTION_GUARD_DIGITS,
    FractionConversion,
    convert_fraction,
    decimal_to_fraction,
    fraction_to_decimal,
    working_scale,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "is_valid_float",
    "quantum",
    "round_half_up",
    "validate_radix",
    # Arithmetic
    "Arithmetic",
    "DecimalStringArithmetic",
    "NativeArithmetic",
    "select_arithmetic",
    # Integer conversion
    "convert_integer",
    "from_base",
    "to_base",
    # Fraction conversion
    "FRACTION_GUARD_DIGITS",
    "FractionConversion",
    "convert_fraction",
    "decimal_to_fraction",
    "fraction_to_decimal",
    "working_scale",
]
