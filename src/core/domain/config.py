"""
Config — Immutable конфигурация конвертера

Pydantic модели (frozen=True), которые задаются один раз и передаются в
BaseConverter. Setters нет: изменение конфигурации означает создание
новой модели и нового конвертера (BaseConverter.reconfigured).

Модели проверяют только структуру и простые ограничения (типы, min_length,
group_size >= 1). Семантические проверки алфавита (дубликаты, конфликты
с форматными токенами) выполняются при построении NumeralSystem и дают
ConfigurationError.
"""

from typing import Any, Final

from jsonschema import ValidationError as ContractViolation
from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.contracts.validators import (
    converter_params_violations,
    validate_converter_params,
)
from src.core.domain.alphabet import DECIMAL_NUMERALS
from src.core.domain.errors import ConfigurationError

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_GROUP_SIZE: Final[int] = 3
DEFAULT_NEGATIVE_SIGN: Final[str] = "-"

DEFAULT_HOST_GROUP_SEPARATOR: Final[str] = " "
DEFAULT_HOST_FRACTION_DELIMITER: Final[str] = ";"

DEFAULT_TARGET_GROUP_SEPARATOR: Final[str] = ","
DEFAULT_TARGET_FRACTION_DELIMITER: Final[str] = "."

# Ограничение длины входа до любой арифметики
DEFAULT_MAX_NUMBER_LENGTH: Final[int] = 4096


# =============================================================================
# MODELS
# =============================================================================


class FormatConfig(BaseModel):
    """Форматные токены одной системы счисления."""

    fraction_delimiter: str = Field(..., min_length=1, description="Разделитель дробной части")
    group_separator: str = Field(..., min_length=1, description="Разделитель групп (разрядов)")
    negative_sign: str = Field(
        DEFAULT_NEGATIVE_SIGN, min_length=1, description="Знак отрицательного числа"
    )
    group_size: int = Field(DEFAULT_GROUP_SIZE, ge=1, description="Количество цифр в группе")

    model_config = {"frozen": True}


def host_format() -> FormatConfig:
    return FormatConfig(
        fraction_delimiter=DEFAULT_HOST_FRACTION_DELIMITER,
        group_separator=DEFAULT_HOST_GROUP_SEPARATOR,
    )


def target_format() -> FormatConfig:
    return FormatConfig(
        fraction_delimiter=DEFAULT_TARGET_FRACTION_DELIMITER,
        group_separator=DEFAULT_TARGET_GROUP_SEPARATOR,
    )


class BaseConfig(BaseModel):
    """
    Одна система счисления: имя (для сообщений об ошибках), цифры, формат.
    """

    name: str = Field(..., min_length=1, description="Имя системы для сообщений об ошибках")
    numerals: tuple[str, ...] = Field(..., description="Цифры по возрастанию значения")
    format: FormatConfig = Field(..., description="Форматные токены")

    model_config = {"frozen": True}

    @field_validator("numerals", mode="before")
    @classmethod
    def coerce_numerals(cls, v: Any) -> Any:
        """Цифры-числа (0, 1, ...) приводятся к строкам; строка разбивается на символы."""
        if isinstance(v, str):
            return tuple(v)
        if isinstance(v, (list, tuple)):
            return tuple(str(n) if isinstance(n, int) and not isinstance(n, bool) else n for n in v)
        return v


class ConverterConfig(BaseModel):
    """
    Полная конфигурация конвертера: host, target, режим точности, лимит длины.

    Examples:
        >>> config = ConverterConfig.build(host_numerals="XEDTNFHKVLAQ", host_name="dozenal")
        >>> config.target.numerals[:3]
        ('0', '1', '2')
    """

    host: BaseConfig = Field(..., description="Исходная система (host)")
    target: BaseConfig = Field(..., description="Целевая система (target)")
    arbitrary_precision: bool = Field(
        False, description="True: decimal-string арифметика вместо float"
    )
    max_number_length: int = Field(
        DEFAULT_MAX_NUMBER_LENGTH, ge=1, description="Максимальная длина входной строки"
    )

    model_config = {"frozen": True}

    @classmethod
    def build(
        cls,
        host_numerals: Any,
        target_numerals: Any = DECIMAL_NUMERALS,
        *,
        host_name: str = "host",
        target_name: str = "target",
        host_format_config: FormatConfig | None = None,
        target_format_config: FormatConfig | None = None,
        arbitrary_precision: bool = False,
        max_number_length: int = DEFAULT_MAX_NUMBER_LENGTH,
    ) -> "ConverterConfig":
        """
        Сборка конфигурации с defaults для всех необязательных параметров.

        Raises:
            ConfigurationError: pydantic валидация не пройдена
        """
        try:
            return cls(
                host=BaseConfig(
                    name=host_name,
                    numerals=host_numerals,
                    format=host_format_config or host_format(),
                ),
                target=BaseConfig(
                    name=target_name,
                    numerals=target_numerals,
                    format=target_format_config or target_format(),
                ),
                arbitrary_precision=arbitrary_precision,
                max_number_length=max_number_length,
            )
        except ValidationError as e:
            raise ConfigurationError(f"invalid converter config: {e}") from e

    @classmethod
    def validated(cls, data: dict[str, Any]) -> "ConverterConfig":
        """
        model_validate с той же таксономией ошибок, что и build.

        Raises:
            ConfigurationError: pydantic валидация не пройдена
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"invalid converter config: {e}") from e

    @classmethod
    def from_params(cls, params: dict[str, Any]) -> "ConverterConfig":
        """
        Сборка конфигурации из плоского словаря параметров.

        Словарь проверяется JSON Schema контрактом converter_params, затем
        отображается на модели.

        Raises:
            ConfigurationError: контракт или pydantic валидация не пройдены
        """
        try:
            validate_converter_params(params)
        except ContractViolation as e:
            details = "; ".join(converter_params_violations(params))
            raise ConfigurationError(f"converter params violate contract: {details}") from e

        def side_format(prefix: str, defaults: FormatConfig) -> FormatConfig:
            return FormatConfig(
                fraction_delimiter=params.get(
                    f"{prefix}_fraction_delimiter", defaults.fraction_delimiter
                ),
                group_separator=params.get(f"{prefix}_group_separator", defaults.group_separator),
                negative_sign=params.get(f"{prefix}_negative_sign", defaults.negative_sign),
                group_size=params.get(f"{prefix}_group_size", defaults.group_size),
            )

        try:
            return cls.build(
                host_numerals=params["host_numerals"],
                target_numerals=params.get("target_numerals") or DECIMAL_NUMERALS,
                host_name=params.get("host_name", "host"),
                target_name=params.get("target_name", "target"),
                host_format_config=side_format("host", host_format()),
                target_format_config=side_format("target", target_format()),
                arbitrary_precision=params.get("arbitrary_precision", False),
                max_number_length=params.get("max_number_length", DEFAULT_MAX_NUMBER_LENGTH),
            )
        except ValidationError as e:
            raise ConfigurationError(f"invalid converter params: {e}") from e
