"""
Tests for converter configuration and JSON Schema contracts

Покрывает:
- Pydantic модели (FormatConfig, BaseConfig, ConverterConfig): defaults,
  ограничения, immutability (frozen=True)
- JSON Schema контракт converter_params: валидные и невалидные словари
- ConverterConfig.from_params: отображение плоского словаря на модели
"""

import pytest
from jsonschema import ValidationError as ContractViolation
from pydantic import ValidationError

from src.core.contracts import (
    ConverterParamsValidator,
    SchemaLoader,
    converter_params_violations,
    validate_converter_params,
)
from src.core.domain import (
    DEFAULT_MAX_NUMBER_LENGTH,
    BaseConfig,
    ConfigurationError,
    ConverterConfig,
    FormatConfig,
    host_format,
    target_format,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_params():
    """Валидный словарь параметров."""
    return {
        "host_numerals": list("XEDTNFHKVLAQ"),
        "host_name": "dozenal",
        "target_name": "decimal",
        "host_group_size": 4,
        "target_group_separator": "_",
        "arbitrary_precision": True,
        "max_number_length": 128,
    }


# =============================================================================
# PYDANTIC MODELS
# =============================================================================


class TestFormatConfig:
    """Тесты FormatConfig"""

    def test_host_defaults(self) -> None:
        fmt = host_format()
        assert fmt.fraction_delimiter == ";"
        assert fmt.group_separator == " "
        assert fmt.negative_sign == "-"
        assert fmt.group_size == 3

    def test_target_defaults(self) -> None:
        fmt = target_format()
        assert fmt.fraction_delimiter == "."
        assert fmt.group_separator == ","
        assert fmt.negative_sign == "-"
        assert fmt.group_size == 3

    def test_group_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FormatConfig(fraction_delimiter=".", group_separator=",", group_size=0)

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatConfig(fraction_delimiter="", group_separator=",")

    def test_frozen(self) -> None:
        fmt = target_format()
        with pytest.raises(ValidationError):
            fmt.group_size = 4


class TestConverterConfig:
    """Тесты ConverterConfig"""

    def test_build_defaults(self) -> None:
        config = ConverterConfig.build("01")
        assert config.host.numerals == ("0", "1")
        assert config.target.numerals == tuple("0123456789")
        assert config.host.name == "host"
        assert config.target.name == "target"
        assert config.arbitrary_precision is False
        assert config.max_number_length == DEFAULT_MAX_NUMBER_LENGTH

    def test_integer_numerals_coerced(self) -> None:
        config = BaseConfig(name="b", numerals=[0, 1, 2], format=host_format())
        assert config.numerals == ("0", "1", "2")

    def test_frozen(self) -> None:
        config = ConverterConfig.build("01")
        with pytest.raises(ValidationError):
            config.arbitrary_precision = True

    def test_max_number_length_positive(self) -> None:
        with pytest.raises(ConfigurationError, match="max_number_length") as exc_info:
            ConverterConfig.build("01", max_number_length=0)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_build_wraps_nested_errors(self) -> None:
        with pytest.raises(ConfigurationError):
            ConverterConfig.build("01", host_name="")

    def test_validated(self) -> None:
        data = ConverterConfig.build("01").model_dump()
        assert ConverterConfig.validated(data) == ConverterConfig.build("01")
        data["max_number_length"] = -1
        with pytest.raises(ConfigurationError):
            ConverterConfig.validated(data)


# =============================================================================
# JSON SCHEMA CONTRACT
# =============================================================================


class TestConverterParamsContract:
    """Тесты контракта converter_params.json"""

    def test_schema_loads(self) -> None:
        schema = SchemaLoader().load_schema("converter_params")
        assert schema["title"] == "converter_params"
        assert "host_numerals" in schema["required"]

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_valid_params(self, valid_params) -> None:
        validate_converter_params(valid_params)
        assert converter_params_violations(valid_params) == []

    def test_minimal_params(self) -> None:
        validate_converter_params({"host_numerals": ["0", "1"]})

    def test_integer_numerals_allowed(self) -> None:
        validate_converter_params({"host_numerals": [0, 1, 2]})

    def test_host_numerals_required(self) -> None:
        with pytest.raises(ContractViolation):
            validate_converter_params({"target_numerals": ["0", "1"]})

    def test_single_numeral_rejected(self) -> None:
        with pytest.raises(ContractViolation):
            validate_converter_params({"host_numerals": ["0"]})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ContractViolation):
            validate_converter_params({"host_numerals": ["0", "1"], "base_a_numerals": ["0"]})

    def test_group_size_type(self, valid_params) -> None:
        valid_params["host_group_size"] = "3"
        errors = list(ConverterParamsValidator().iter_errors(valid_params))
        assert len(errors) == 1

    def test_empty_separator_rejected(self, valid_params) -> None:
        valid_params["host_group_separator"] = ""
        violations = converter_params_violations(valid_params)
        assert len(violations) == 1
        assert violations[0].startswith("host_group_separator: ")

    def test_all_violations_reported(self) -> None:
        violations = ConverterParamsValidator().violations(
            {"host_numerals": ["0"], "host_group_size": 0}
        )
        assert len(violations) == 2
        assert any(v.startswith("host_numerals:") for v in violations)
        assert any(v.startswith("host_group_size:") for v in violations)


class TestFromParams:
    """Тесты ConverterConfig.from_params"""

    def test_mapping(self, valid_params) -> None:
        config = ConverterConfig.from_params(valid_params)
        assert config.host.name == "dozenal"
        assert config.host.numerals == tuple("XEDTNFHKVLAQ")
        assert config.host.format.group_size == 4
        assert config.host.format.group_separator == " "
        assert config.target.format.group_separator == "_"
        assert config.target.format.fraction_delimiter == "."
        assert config.arbitrary_precision is True
        assert config.max_number_length == 128

    def test_target_defaults_to_decimal(self) -> None:
        config = ConverterConfig.from_params({"host_numerals": ["0", "1"]})
        assert config.target.numerals == tuple("0123456789")

    def test_contract_violation_wrapped(self) -> None:
        with pytest.raises(ConfigurationError, match="violate contract") as exc_info:
            ConverterConfig.from_params({"host_numerals": []})
        assert isinstance(exc_info.value.__cause__, ContractViolation)

    def test_every_violation_in_message(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ConverterConfig.from_params({"host_numerals": ["0"], "target_group_size": 0})
        message = str(exc_info.value)
        assert "host_numerals" in message
        assert "target_group_size" in message
