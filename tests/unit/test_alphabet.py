"""
Тесты для Alphabet и NumeralSystem

Проверяет:
1. Биективное отображение символ <-> индекс
2. Регистронезависимую проверку уникальности (включая "a"/"A")
3. Ошибки конфигурации (пустой алфавит, radix < 2, конфликт токенов)
4. Ошибки поиска неизвестных символов и индексов
"""

import pytest

from src.core.domain import (
    DECIMAL_NUMERALS,
    Alphabet,
    BaseConfig,
    ConfigurationError,
    DuplicateNumeralError,
    EmptyAlphabetError,
    FormatConfig,
    FormatConflictError,
    NumeralSystem,
    UnknownNumeralError,
    host_format,
)

DOZENAL = "XEDTNFHKVLAQ"


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def dozenal():
    """Base-12 алфавит."""
    return Alphabet(DOZENAL)


# =============================================================================
# ТЕСТЫ ОТОБРАЖЕНИЯ
# =============================================================================


class TestAlphabetLookup:
    """Тесты index_of / symbol_of"""

    def test_radix_is_symbol_count(self, dozenal) -> None:
        """radix == количество символов"""
        assert dozenal.radix == 12
        assert len(dozenal) == 12
        assert Alphabet(DECIMAL_NUMERALS).radix == 10

    def test_index_of(self, dozenal) -> None:
        """Индекс символа — его позиция"""
        assert dozenal.index_of("X") == 0
        assert dozenal.index_of("E") == 1
        assert dozenal.index_of("H") == 6
        assert dozenal.index_of("Q") == 11

    def test_symbol_of(self, dozenal) -> None:
        """Символ по индексу"""
        assert dozenal.symbol_of(0) == "X"
        assert dozenal.symbol_of(11) == "Q"

    def test_bijection(self, dozenal) -> None:
        """index_of и symbol_of взаимно обратны"""
        for index in range(dozenal.radix):
            assert dozenal.index_of(dozenal.symbol_of(index)) == index
        for symbol in DOZENAL:
            assert dozenal.symbol_of(dozenal.index_of(symbol)) == symbol

    def test_zero_symbol(self, dozenal) -> None:
        """zero — символ с индексом 0"""
        assert dozenal.zero == "X"

    def test_bulk_helpers(self, dozenal) -> None:
        """render / indices"""
        assert dozenal.indices(["E", "X", "X", "X"]) == [1, 0, 0, 0]
        assert dozenal.render([1, 0, 0, 0]) == ["E", "X", "X", "X"]

    def test_integer_numerals_coerced(self) -> None:
        """Цифры-числа приводятся к строкам"""
        alphabet = Alphabet([0, 1, 2])
        assert alphabet.symbols == ("0", "1", "2")
        assert alphabet.index_of("2") == 2

    def test_lookup_is_case_sensitive(self, dozenal) -> None:
        """Поиск точный, регистр не игнорируется"""
        assert "x" not in dozenal
        with pytest.raises(UnknownNumeralError):
            dozenal.index_of("x")

    def test_multi_character_numerals(self) -> None:
        """Цифра может состоять из нескольких символов"""
        alphabet = Alphabet(["zero", "one", "two"])
        assert alphabet.index_of("two") == 2


class TestAlphabetErrors:
    """Тесты ошибок Alphabet"""

    def test_unknown_symbol(self, dozenal) -> None:
        with pytest.raises(UnknownNumeralError, match="not a numeral"):
            dozenal.index_of("Z")

    def test_index_out_of_range(self, dozenal) -> None:
        with pytest.raises(UnknownNumeralError, match="outside"):
            dozenal.symbol_of(12)
        with pytest.raises(UnknownNumeralError):
            dozenal.symbol_of(-1)

    def test_empty_alphabet(self) -> None:
        with pytest.raises(EmptyAlphabetError):
            Alphabet([])

    def test_empty_alphabet_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            Alphabet("")

    def test_single_numeral_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="at least 2"):
            Alphabet(["0"])

    def test_empty_symbol_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="empty string"):
            Alphabet(["0", ""])

    def test_exact_duplicate(self) -> None:
        with pytest.raises(DuplicateNumeralError):
            Alphabet(["0", "1", "0"])

    def test_case_insensitive_duplicate_rejected(self) -> None:
        """Алфавит с "a" и "A" отклоняется (известная особенность)"""
        with pytest.raises(DuplicateNumeralError, match="case-insensitive") as exc_info:
            Alphabet(["a", "b", "A"])
        assert exc_info.value.symbol == "A"
        assert exc_info.value.duplicate_of == "a"


# =============================================================================
# ТЕСТЫ NUMERAL SYSTEM
# =============================================================================


class TestNumeralSystem:
    """Тесты NumeralSystem.from_config"""

    def test_valid_system(self) -> None:
        system = NumeralSystem.from_config(
            BaseConfig(name="dozenal", numerals=DOZENAL, format=host_format())
        )
        assert system.radix == 12
        assert system.format.fraction_delimiter == ";"

    def test_token_equal_to_numeral(self) -> None:
        """Разделитель совпадает с цифрой"""
        config = BaseConfig(
            name="hex",
            numerals="0123456789ABCDEF",
            format=FormatConfig(fraction_delimiter="A", group_separator=","),
        )
        with pytest.raises(FormatConflictError, match="also a numeral"):
            NumeralSystem.from_config(config)

    def test_tokens_collide(self) -> None:
        """Разделитель дроби совпадает с разделителем групп"""
        config = BaseConfig(
            name="decimal",
            numerals=DECIMAL_NUMERALS,
            format=FormatConfig(fraction_delimiter=",", group_separator=","),
        )
        with pytest.raises(FormatConflictError, match="fraction_delimiter and group_separator"):
            NumeralSystem.from_config(config)

    def test_sign_collides_with_separator(self) -> None:
        config = BaseConfig(
            name="decimal",
            numerals=DECIMAL_NUMERALS,
            format=FormatConfig(fraction_delimiter=".", group_separator="-"),
        )
        with pytest.raises(FormatConflictError, match="negative_sign"):
            NumeralSystem.from_config(config)
