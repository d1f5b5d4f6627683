"""Converter — разбор, форматирование и оркестрация конвертации.

- NumberParser: строка -> ParsedNumber (ошибки как значения)
- group: разделители групп разрядов
- BaseConverter: публичный API (host <-> target, format_number, convert_digits)
"""

from .formatter import group
from .orchestrator import BaseConverter, ConversionResult
from .parser import NumberParser, ParseResult

__all__ = [
    "BaseConverter",
    "ConversionResult",
    "NumberParser",
    "ParseResult",
    "group",
]
