"""
NumeralSystem — алфавит + форматные токены одной системы счисления

Собирается из BaseConfig один раз при создании конвертера. Проверяет,
что токены разделителей и знака не пересекаются между собой и с цифрами,
иначе разбор строки неоднозначен.
"""

from dataclasses import dataclass

from src.core.domain.alphabet import Alphabet
from src.core.domain.config import BaseConfig, FormatConfig
from src.core.domain.errors import FormatConflictError


@dataclass(frozen=True)
class NumeralSystem:
    """Система счисления, готовая к разбору и рендерингу."""

    name: str
    alphabet: Alphabet
    format: FormatConfig

    @property
    def radix(self) -> int:
        return self.alphabet.radix

    @classmethod
    def from_config(cls, config: BaseConfig) -> "NumeralSystem":
        """
        Raises:
            ConfigurationError: невалидный алфавит
            FormatConflictError: конфликт токенов
        """
        alphabet = Alphabet(config.numerals)
        fmt = config.format

        tokens = {
            "fraction_delimiter": fmt.fraction_delimiter,
            "group_separator": fmt.group_separator,
            "negative_sign": fmt.negative_sign,
        }

        # Токены попарно различны
        names = list(tokens)
        for i, first in enumerate(names):
            for second in names[i + 1:]:
                if tokens[first] == tokens[second]:
                    raise FormatConflictError(
                        f"{config.name}: {first} and {second} are both {tokens[first]!r}"
                    )

        # Ни один токен не является цифрой
        for token_name, token in tokens.items():
            if token in alphabet:
                raise FormatConflictError(
                    f"{config.name}: {token_name} {token!r} is also a numeral"
                )

        return cls(name=config.name, alphabet=alphabet, format=fmt)
