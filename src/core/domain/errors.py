"""
Errors — Таксономия ошибок конвертации систем счисления

Все ошибки наследуются от NumeralBaseError. Ошибки ввода (пустая строка,
неизвестный символ, слишком длинное число) не выбрасываются внутри конвейера:
они передаются как значения (ParseResult.error / ConversionResult.error) и
превращаются в ConversionError только на публичной границе.

Иерархия:
- ConfigurationError: EmptyAlphabetError, DuplicateNumeralError, FormatConflictError
- UnknownNumeralError
- EmptyInputError, InvalidNumeralError, NumberTooLongError
- EmptyDigitsError
- MagnitudeOverflowError
- ConversionError (обёртка с контекстом операции и пары систем)
"""


class NumeralBaseError(Exception):
    """Базовый класс всех ошибок пакета."""

    pass


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(NumeralBaseError):
    """Невалидная конфигурация (алфавит, форматные токены, параметры)."""

    pass


class EmptyAlphabetError(ConfigurationError):
    """Алфавит пуст."""

    pass


class DuplicateNumeralError(ConfigurationError):
    """
    Алфавит содержит символы, совпадающие без учёта регистра.

    ВНИМАНИЕ: сравнение регистронезависимое, поэтому алфавит с "a" и "A"
    как разными цифрами отклоняется.
    """

    def __init__(self, symbol: str, duplicate_of: str):
        self.symbol = symbol
        self.duplicate_of = duplicate_of
        super().__init__(
            f"numeral {symbol!r} duplicates {duplicate_of!r} (case-insensitive comparison)"
        )


class FormatConflictError(ConfigurationError):
    """Форматный токен (разделитель, знак) совпадает с цифрой или другим токеном."""

    pass


# =============================================================================
# LOOKUP
# =============================================================================


class UnknownNumeralError(NumeralBaseError):
    """Символ или индекс отсутствует в алфавите."""

    pass


# =============================================================================
# INPUT VALIDATION
# =============================================================================


class EmptyInputError(NumeralBaseError):
    """Строка пуста после удаления знака и ведущих нулей."""

    pass


class InvalidNumeralError(NumeralBaseError):
    """Символ не является цифрой, разделителем дробной части или группы."""

    def __init__(self, message: str, character: str = "", position: int = -1):
        self.character = character
        self.position = position
        super().__init__(message)


class NumberTooLongError(NumeralBaseError):
    """Длина входной строки превышает max_number_length."""

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"number has {length} characters, maximum is {max_length}")


# =============================================================================
# ARITHMETIC
# =============================================================================


class EmptyDigitsError(NumeralBaseError):
    """Пустая последовательность цифр передана в from_base."""

    pass


class MagnitudeOverflowError(NumeralBaseError):
    """Величина вышла за пределы float (inf/NaN) в bounded-режиме."""

    pass


# =============================================================================
# BOUNDARY
# =============================================================================


class ConversionError(NumeralBaseError):
    """
    Единственная ошибка, которую видит вызывающий код публичных операций.

    Содержит операцию, имена систем счисления и исходную причину
    (доступна также через __cause__).
    """

    def __init__(
        self,
        operation: str,
        host_name: str,
        target_name: str,
        cause: NumeralBaseError,
    ):
        self.operation = operation
        self.host_name = host_name
        self.target_name = target_name
        self.cause = cause
        super().__init__(
            f"Cannot {operation} (host={host_name}, target={target_name}) because "
            f"{type(cause).__name__}: {cause}"
        )
