"""Orchestrator — публичный API конвертации между двумя системами счисления.

Конвейер одного вызова (линейный, без состояния между вызовами):
    parse -> validate(length, symbols) -> split(sign, integer, fraction)
    -> convert integer -> convert fraction (если есть, с carry)
    -> render numerals (опционально) -> group (опционально)
    -> reattach sign & delimiter -> serialize (list или str)

Ошибки ввода проходят через конвейер как значения (ConversionResult.error).
Публичные операции convert_host_to_target / convert_target_to_host /
format_number / convert_digits вызывают unwrap(), который превращает ошибку в
единственный ConversionError с контекстом операции и имён систем.

Потокобезопасность: конфигурация неизменяема (pydantic frozen, Alphabet без
setters), поэтому один BaseConverter можно использовать из нескольких потоков.
Для изменения конфигурации используйте reconfigured(), он создаёт новый
конвертер.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from src.core.domain.config import ConverterConfig
from src.core.domain.errors import (
    ConversionError,
    InvalidNumeralError,
    NumeralBaseError,
)
from src.core.domain.numbers import BaseSide, Direction, ParsedNumber
from src.core.domain.numeral_system import NumeralSystem
from src.core.math.arithmetic import Arithmetic, select_arithmetic
from src.core.math.fraction_conversion import convert_fraction
from src.core.math.integer_conversion import from_base, to_base
from src.converter.formatter import group
from src.converter.parser import NumberParser

logger = logging.getLogger(__name__)

Rendered = list[str | int]


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат одной операции: value при успехе, error при отказе."""

    ok: bool
    value: Optional[Rendered | str]
    error: Optional[NumeralBaseError]

    # Контекст для сообщений об ошибках
    operation: str
    host_name: str
    target_name: str

    # Детали
    details: str

    def unwrap(self) -> Rendered | str:
        """
        Returns:
            value если операция успешна

        Raises:
            ConversionError: операция отклонена (cause доступна в __cause__)
        """
        if self.error is not None:
            raise ConversionError(
                self.operation, self.host_name, self.target_name, self.error
            ) from self.error
        return self.value


# =============================================================================
# CONVERTER
# =============================================================================


class BaseConverter:
    """Конвертер между host и target системами счисления.

    Examples:
        >>> converter = BaseConverter(ConverterConfig.build("XEDTNFHKVLAQ"))
        >>> converter.convert_host_to_target("EXXX;H", return_sequence=False)
        '1728.5'
        >>> converter.convert_target_to_host("1728.5", return_sequence=False)
        'EXXX;H'
    """

    def __init__(self, config: ConverterConfig):
        """
        Args:
            config: immutable конфигурация

        Raises:
            ConfigurationError: невалидный алфавит или конфликт токенов
        """
        self.config = config
        self.host = NumeralSystem.from_config(config.host)
        self.target = NumeralSystem.from_config(config.target)
        self.arithmetic: Arithmetic = select_arithmetic(config.arbitrary_precision)

        self._parsers = {
            BaseSide.HOST: NumberParser(self.host, config.max_number_length),
            BaseSide.TARGET: NumberParser(self.target, config.max_number_length),
        }

        logger.info(
            "base_converter_initialized",
            extra={
                "host": self.host.name,
                "host_radix": self.host.radix,
                "target": self.target.name,
                "target_radix": self.target.radix,
                "arithmetic": self.arithmetic.name,
            },
        )

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> "BaseConverter":
        """Конвертер из плоского словаря параметров (см. converter_params.json)."""
        return cls(ConverterConfig.from_params(params))

    def reconfigured(self, **updates: Any) -> "BaseConverter":
        """
        Новый конвертер с изменёнными полями ConverterConfig.

        Текущий конвертер не изменяется.

        Raises:
            ConfigurationError: невалидные значения полей
        """
        data = self.config.model_dump()
        data.update(updates)
        return BaseConverter(ConverterConfig.validated(data))

    def system(self, side: BaseSide) -> NumeralSystem:
        return self.host if side is BaseSide.HOST else self.target

    def parser(self, side: BaseSide) -> NumberParser:
        return self._parsers[side]

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def convert_host_to_target(
        self,
        number: str,
        convert_to_numerals: bool = True,
        return_sequence: bool = True,
        format_grouped: bool = False,
        strip_zeros: bool = True,
    ) -> Rendered | str:
        """
        Число в host системе -> число в target системе.

        Raises:
            ConversionError: невалидный ввод
        """
        return self.convert(
            number,
            Direction.HOST_TO_TARGET,
            convert_to_numerals=convert_to_numerals,
            return_sequence=return_sequence,
            format_grouped=format_grouped,
            strip_zeros=strip_zeros,
        ).unwrap()

    def convert_target_to_host(
        self,
        number: str,
        convert_to_numerals: bool = True,
        return_sequence: bool = True,
        format_grouped: bool = False,
        strip_zeros: bool = True,
    ) -> Rendered | str:
        """
        Число в target системе -> число в host системе.

        Raises:
            ConversionError: невалидный ввод
        """
        return self.convert(
            number,
            Direction.TARGET_TO_HOST,
            convert_to_numerals=convert_to_numerals,
            return_sequence=return_sequence,
            format_grouped=format_grouped,
            strip_zeros=strip_zeros,
        ).unwrap()

    def format_number(
        self,
        number: str,
        side: BaseSide = BaseSide.HOST,
        return_sequence: bool = False,
        strip_zeros: bool = True,
    ) -> Rendered | str:
        """
        Группировка разрядов числа в его собственной системе (без конвертации).

        Raises:
            ConversionError: невалидный ввод
        """
        return self.format(
            number, side, return_sequence=return_sequence, strip_zeros=strip_zeros
        ).unwrap()

    def convert_digits(
        self,
        digits: Sequence[int],
        direction: Direction = Direction.HOST_TO_TARGET,
        convert_to_numerals: bool = True,
        return_sequence: bool = True,
        format_grouped: bool = False,
    ) -> Rendered | str:
        """
        Неотрицательное целое, заданное индексами цифр источника.

        Raises:
            ConversionError: пустая последовательность или индекс вне алфавита
        """
        return self.convert_digit_sequence(
            digits,
            direction,
            convert_to_numerals=convert_to_numerals,
            return_sequence=return_sequence,
            format_grouped=format_grouped,
        ).unwrap()

    # -------------------------------------------------------------------------
    # Result-returning operations
    # -------------------------------------------------------------------------

    def convert(
        self,
        number: str,
        direction: Direction,
        *,
        convert_to_numerals: bool = True,
        return_sequence: bool = True,
        format_grouped: bool = False,
        strip_zeros: bool = True,
    ) -> ConversionResult:
        """Конвертация строки; ошибки возвращаются в ConversionResult.error."""
        operation = f"convert {direction.source.value} to {direction.destination.value}"
        source = self.system(direction.source)
        destination = self.system(direction.destination)

        parse_result = self.parser(direction.source).parse(number, strip_zeros=strip_zeros)
        if not parse_result.ok:
            return self._failure(operation, parse_result.error)
        parsed = parse_result.parsed

        try:
            integer_digits, fractional_digits = self._convert_parsed(parsed, source, destination)
        except NumeralBaseError as e:
            return self._failure(operation, e)

        value = self._render(
            destination,
            parsed.is_negative,
            integer_digits,
            fractional_digits,
            convert_to_numerals=convert_to_numerals,
            format_grouped=format_grouped,
            return_sequence=return_sequence,
        )
        return self._success(operation, value, f"{source.name} -> {destination.name}")

    def convert_digit_sequence(
        self,
        digits: Sequence[int],
        direction: Direction,
        *,
        convert_to_numerals: bool = True,
        return_sequence: bool = True,
        format_grouped: bool = False,
    ) -> ConversionResult:
        """Конвертация готовой последовательности индексов (только целое)."""
        operation = f"convert {direction.source.value} digits to {direction.destination.value}"
        source = self.system(direction.source)
        destination = self.system(direction.destination)

        for position, digit in enumerate(digits):
            if not 0 <= digit < source.radix:
                return self._failure(
                    operation,
                    InvalidNumeralError(
                        f"digit index {digit} at position {position} is outside "
                        f"[0, {source.radix}) of {source.name}",
                        character=str(digit),
                        position=position,
                    ),
                )

        try:
            magnitude = from_base(digits, source.radix, self.arithmetic)
            integer_digits = to_base(magnitude, destination.radix, self.arithmetic)
        except NumeralBaseError as e:
            return self._failure(operation, e)

        value = self._render(
            destination,
            False,
            integer_digits,
            None,
            convert_to_numerals=convert_to_numerals,
            format_grouped=format_grouped,
            return_sequence=return_sequence,
        )
        return self._success(operation, value, f"{source.name} -> {destination.name}")

    def format(
        self,
        number: str,
        side: BaseSide = BaseSide.HOST,
        *,
        return_sequence: bool = False,
        strip_zeros: bool = True,
    ) -> ConversionResult:
        """Группировка числа в его собственной системе; ошибки в результате."""
        operation = f"format {side.value} number"
        system = self.system(side)

        parse_result = self.parser(side).parse(number, strip_zeros=strip_zeros)
        if not parse_result.ok:
            return self._failure(operation, parse_result.error)
        parsed = parse_result.parsed

        value = self._render(
            system,
            parsed.is_negative,
            parsed.integer_digits,
            parsed.fractional_digits,
            convert_to_numerals=True,
            format_grouped=True,
            return_sequence=return_sequence,
        )
        return self._success(operation, value, f"{system.name} regrouped")

    # -------------------------------------------------------------------------
    # Pipeline steps
    # -------------------------------------------------------------------------

    def _convert_parsed(
        self,
        parsed: ParsedNumber,
        source: NumeralSystem,
        destination: NumeralSystem,
    ) -> tuple[list[int], Optional[tuple[int, ...]]]:
        """Целая и дробная части в индексах цифр destination."""
        arithmetic = self.arithmetic
        magnitude = from_base(parsed.integer_digits, source.radix, arithmetic)

        fractional_digits = None
        if parsed.fractional_digits:
            fraction = convert_fraction(
                parsed.fractional_digits, source.radix, destination.radix, arithmetic
            )
            if fraction.carry:
                magnitude = arithmetic.add(magnitude, arithmetic.from_int(fraction.carry))
            fractional_digits = fraction.digits

        return to_base(magnitude, destination.radix, arithmetic), fractional_digits

    @staticmethod
    def _render(
        system: NumeralSystem,
        is_negative: bool,
        integer_digits: Sequence[int],
        fractional_digits: Optional[Sequence[int]],
        *,
        convert_to_numerals: bool,
        format_grouped: bool,
        return_sequence: bool,
    ) -> Rendered | str:
        """Цифры -> символы (опционально), группы, знак, разделитель дроби."""
        fmt = system.format

        def digits_out(digits: Sequence[int]) -> Rendered:
            if convert_to_numerals:
                return system.alphabet.render(digits)
            return list(digits)

        integer_part = digits_out(integer_digits)
        if format_grouped:
            integer_part = group(integer_part, fmt.group_separator, fmt.group_size)

        result: Rendered = []
        if is_negative:
            result.append(fmt.negative_sign)
        result.extend(integer_part)
        if fractional_digits is not None:
            result.append(fmt.fraction_delimiter)
            result.extend(digits_out(fractional_digits))

        if return_sequence:
            return result
        return "".join(str(item) for item in result)

    def _success(self, operation: str, value: Rendered | str, details: str) -> ConversionResult:
        logger.debug(
            "conversion_completed",
            extra={"operation": operation, "arithmetic": self.arithmetic.name},
        )
        return ConversionResult(
            ok=True,
            value=value,
            error=None,
            operation=operation,
            host_name=self.host.name,
            target_name=self.target.name,
            details=f"PASS: {details}",
        )

    def _failure(self, operation: str, error: NumeralBaseError) -> ConversionResult:
        logger.debug(
            "conversion_rejected",
            extra={"operation": operation, "error_type": type(error).__name__},
        )
        return ConversionResult(
            ok=False,
            value=None,
            error=error,
            operation=operation,
            host_name=self.host.name,
            target_name=self.target.name,
            details=f"{type(error).__name__}: {error}",
        )
