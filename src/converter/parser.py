"""NumberParser — разбор строки числа в одной системе счисления.

Порядок шагов (каждый шаг — отдельный метод):
1. Проверка длины (max_number_length) до любой другой работы
2. is_negative: знак в ЛЮБОЙ позиции строки (намеренно permissive)
3. strip_sign: удаление всех вхождений знака
4. tokenize: каждый токен — цифра, разделитель дроби или группы,
   иначе InvalidNumeralError (символ никогда не отбрасывается молча)
5. strip_leading_zeros (флаг strip_zeros)
6. split: по первому разделителю дроби
7. to_indices: токены -> индексы цифр

Ошибки возвращаются как значение (ParseResult.error), а не выбрасываются.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from src.core.domain.errors import (
    EmptyInputError,
    InvalidNumeralError,
    NumberTooLongError,
    NumeralBaseError,
)
from src.core.domain.numbers import ParsedNumber
from src.core.domain.numeral_system import NumeralSystem


@dataclass(frozen=True)
class ParseResult:
    """Результат разбора: либо parsed, либо error."""

    parsed: Optional[ParsedNumber]
    error: Optional[NumeralBaseError]

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, parsed: ParsedNumber) -> "ParseResult":
        return cls(parsed=parsed, error=None)

    @classmethod
    def failure(cls, error: NumeralBaseError) -> "ParseResult":
        return cls(parsed=None, error=error)


class NumberParser:
    """Разбор строк в одной системе счисления (stateless после создания)."""

    def __init__(self, system: NumeralSystem, max_number_length: int):
        """
        Args:
            system: алфавит и форматные токены
            max_number_length: максимальная длина входной строки
        """
        self.system = system
        self.max_number_length = max_number_length

        fmt = system.format
        self._delimiter = fmt.fraction_delimiter
        self._separator = fmt.group_separator
        self._sign = fmt.negative_sign

        # Длинные токены проверяются первыми (greedy longest match)
        tokens = {*system.alphabet.symbols, self._delimiter, self._separator}
        self._tokens = sorted(tokens, key=len, reverse=True)

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def is_negative(self, raw: str) -> bool:
        return self._sign in raw

    def strip_sign(self, raw: str) -> str:
        return raw.replace(self._sign, "")

    def tokenize(self, raw: str) -> list[str] | InvalidNumeralError:
        """Разбиение на токены; первый неизвестный символ -> InvalidNumeralError."""
        tokens: list[str] = []
        position = 0

        while position < len(raw):
            for token in self._tokens:
                if raw.startswith(token, position):
                    tokens.append(token)
                    position += len(token)
                    break
            else:
                character = raw[position]
                return InvalidNumeralError(
                    f"{character!r} at position {position} is not a numeral of "
                    f"{self.system.name}, nor its fraction delimiter or group separator",
                    character=character,
                    position=position,
                )

        return tokens

    def strip_leading_zeros(self, tokens: Sequence[str]) -> list[str]:
        """Удаление ведущих нулей (и разделителей групп между ними)."""
        zero = self.system.alphabet.zero
        start = 0
        while start < len(tokens) and tokens[start] in (zero, self._separator):
            start += 1
        return list(tokens[start:])

    def split(
        self, tokens: Sequence[str]
    ) -> tuple[list[str], Optional[list[str]]] | InvalidNumeralError:
        """Разделение на целую и дробную части по первому разделителю."""
        if self._delimiter not in tokens:
            return list(tokens), None

        cut = tokens.index(self._delimiter)
        integer_part = list(tokens[:cut])
        fractional_part = list(tokens[cut + 1:])

        if self._delimiter in fractional_part:
            return InvalidNumeralError(
                f"more than one fraction delimiter {self._delimiter!r} in {self.system.name} number",
                character=self._delimiter,
                position=cut + 1 + fractional_part.index(self._delimiter),
            )

        # "12.": дробной части нет
        return integer_part, fractional_part or None

    def to_indices(self, tokens: Sequence[str]) -> tuple[int, ...]:
        """Токены-цифры -> индексы (разделители групп пропускаются)."""
        alphabet = self.system.alphabet
        return tuple(alphabet.index_of(token) for token in tokens if token != self._separator)

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def parse(self, raw: str, strip_zeros: bool = True) -> ParseResult:
        """
        Полный разбор строки.

        Args:
            raw: строка числа в формате этой системы
            strip_zeros: удалять ведущие нули

        Returns:
            ParseResult с ParsedNumber или ошибкой
            (NumberTooLongError, EmptyInputError, InvalidNumeralError)
        """
        if len(raw) > self.max_number_length:
            return ParseResult.failure(NumberTooLongError(len(raw), self.max_number_length))

        negative = self.is_negative(raw)
        unsigned = self.strip_sign(raw)
        if not unsigned:
            return ParseResult.failure(EmptyInputError(f"{self.system.name} number is empty"))

        tokens = self.tokenize(unsigned)
        if isinstance(tokens, InvalidNumeralError):
            return ParseResult.failure(tokens)

        if strip_zeros:
            tokens = self.strip_leading_zeros(tokens)
        if not tokens:
            return ParseResult.failure(
                EmptyInputError(f"{self.system.name} number is empty after stripping sign and zeros")
            )

        parts = self.split(tokens)
        if isinstance(parts, InvalidNumeralError):
            return ParseResult.failure(parts)
        integer_part, fractional_part = parts

        integer_digits = self.to_indices(integer_part)
        fractional_digits = self.to_indices(fractional_part) if fractional_part else None

        if not integer_digits and not fractional_digits:
            return ParseResult.failure(
                EmptyInputError(f"{self.system.name} number has no digits")
            )

        return ParseResult.success(
            ParsedNumber(
                is_negative=negative,
                # ".5": целая часть равна нулю
                integer_digits=integer_digits or (0,),
                fractional_digits=fractional_digits or None,
            )
        )
