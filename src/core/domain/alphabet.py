"""
Alphabet — Биективная таблица символ <-> индекс для одной системы счисления

Алфавит строится один раз из списка символов, передаваемого вызывающим кодом,
и дальше не изменяется. Radix вычисляется при создании.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Символы уникальны без учёта регистра (str.lower)
2. index_of / symbol_of работают за O(1) (dict + tuple)
3. radix == len(symbols) >= 2
"""

from typing import Final, Iterable, Iterator, Sequence

from src.core.domain.errors import (
    ConfigurationError,
    DuplicateNumeralError,
    EmptyAlphabetError,
    UnknownNumeralError,
)

# =============================================================================
# CONSTANTS
# =============================================================================

# Алфавит целевой системы по умолчанию
DECIMAL_NUMERALS: Final[tuple[str, ...]] = tuple("0123456789")

# Минимальный radix, при котором повторное деление завершается
MIN_RADIX: Final[int] = 2


class Alphabet:
    """
    Упорядоченный набор цифр системы счисления.

    Examples:
        >>> duodecimal = Alphabet("XEDTNFHKVLAQ")
        >>> duodecimal.radix
        12
        >>> duodecimal.index_of("E")
        1
        >>> duodecimal.symbol_of(6)
        'H'
    """

    __slots__ = ("_symbols", "_index")

    def __init__(self, numerals: Iterable[str | int]):
        """
        Args:
            numerals: цифры по возрастанию значения (int приводятся к str)

        Raises:
            EmptyAlphabetError: алфавит пуст
            ConfigurationError: меньше двух цифр или пустой символ
            DuplicateNumeralError: дубликат без учёта регистра
        """
        symbols = tuple(str(numeral) for numeral in numerals)

        if not symbols:
            raise EmptyAlphabetError("the numerals list is empty")

        if len(symbols) < MIN_RADIX:
            raise ConfigurationError(
                f"the numerals list must contain at least {MIN_RADIX} symbols, got {len(symbols)}"
            )

        index: dict[str, int] = {}
        seen: dict[str, str] = {}
        for position, symbol in enumerate(symbols):
            if not symbol:
                raise ConfigurationError(f"numeral at index {position} is an empty string")
            folded = symbol.lower()
            if folded in seen:
                raise DuplicateNumeralError(symbol, seen[folded])
            seen[folded] = symbol
            index[symbol] = position

        self._symbols = symbols
        self._index = index

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    @property
    def radix(self) -> int:
        return len(self._symbols)

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def zero(self) -> str:
        """Символ с индексом 0 (используется при удалении ведущих нулей)."""
        return self._symbols[0]

    def index_of(self, symbol: str) -> int:
        try:
            return self._index[symbol]
        except KeyError:
            raise UnknownNumeralError(f"symbol {symbol!r} is not a numeral of this alphabet") from None

    def symbol_of(self, index: int) -> str:
        if not 0 <= index < len(self._symbols):
            raise UnknownNumeralError(
                f"digit index {index} is outside [0, {len(self._symbols)})"
            )
        return self._symbols[index]

    # -------------------------------------------------------------------------
    # Bulk helpers
    # -------------------------------------------------------------------------

    def indices(self, symbols: Sequence[str]) -> list[int]:
        """Символы -> индексы цифр."""
        return [self.index_of(symbol) for symbol in symbols]

    def render(self, digits: Sequence[int]) -> list[str]:
        """Индексы цифр -> символы."""
        return [self.symbol_of(digit) for digit in digits]

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r}, radix={self.radix})"
