"""
Contract Validation Module

Модуль для валидации входных словарей параметров по JSON Schema.
"""

from .validators import (
    ContractValidator,
    ConverterParamsValidator,
    SchemaLoader,
    converter_params_violations,
    validate_converter_params,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConverterParamsValidator",
    # Functions
    "converter_params_violations",
    "validate_converter_params",
]
