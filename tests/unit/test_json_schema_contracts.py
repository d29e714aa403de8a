"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора конфигурации:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений типов и constraints (min/max/additionalProperties)
- Согласованность с Pydantic моделью ArithmeticConfig
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from src.bignum.contracts import (
    load_arithmetic_config,
    load_schema,
    validate_arithmetic_config,
)
from src.bignum.core import (
    DEFAULT_BASE,
    DEFAULT_KARATSUBA_CUTOFF,
    MAX_BASE,
    ArithmeticConfig,
)
from src.bignum.math import format_bignum, multiply, parse


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_config():
    """Валидная полная конфигурация."""
    return {
        "base": 10_000,
        "karatsuba_cutoff": 16,
        "parallel": True,
        "max_workers": 4,
    }


INVALID_CONFIGS = [
    {"base": 1},
    {"base": MAX_BASE + 1},
    {"karatsuba_cutoff": 1},
    {"max_workers": 0},
    {"parallel": "yes"},
    {"base": "10"},
    {"unknown_field": 1},
]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestLoadSchema:
    """Тесты загрузки схем."""

    def test_loads_and_caches(self):
        schema = load_schema("arithmetic_config")
        assert schema["title"] == "ArithmeticConfig"
        assert load_schema("arithmetic_config") is schema

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_schema_matches_model_fields(self):
        """Свойства схемы совпадают с полями ArithmeticConfig"""
        schema = load_schema("arithmetic_config")
        assert set(schema["properties"]) == set(ArithmeticConfig.model_fields)


# =============================================================================
# VALIDATION
# =============================================================================


class TestArithmeticConfigContract:
    """Валидация arithmetic_config."""

    def test_valid_full(self, valid_config):
        validate_arithmetic_config(valid_config)

    def test_empty_is_valid(self):
        """Все поля необязательны."""
        validate_arithmetic_config({})

    def test_null_max_workers(self):
        validate_arithmetic_config({"max_workers": None})

    @pytest.mark.parametrize("data", INVALID_CONFIGS)
    def test_invalid(self, data):
        with pytest.raises(ValidationError):
            validate_arithmetic_config(data)

    def test_error_names_offending_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_arithmetic_config({"karatsuba_cutoff": 0})
        assert list(exc_info.value.absolute_path) == ["karatsuba_cutoff"]


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestLoadArithmeticConfig:
    """Контракт и модель согласованы."""

    def test_defaults(self):
        config = load_arithmetic_config({})
        assert config == ArithmeticConfig()
        assert config.base == DEFAULT_BASE
        assert config.karatsuba_cutoff == DEFAULT_KARATSUBA_CUTOFF
        assert config.parallel is False
        assert config.max_workers is None

    def test_full(self, valid_config):
        config = load_arithmetic_config(valid_config)
        assert config.base == 10_000
        assert config.karatsuba_cutoff == 16
        assert config.parallel is True
        assert config.max_workers == 4

    def test_contract_rejects_before_model(self):
        with pytest.raises(ValidationError):
            load_arithmetic_config({"karatsuba_cutoff": 1})

    @pytest.mark.parametrize("data", INVALID_CONFIGS)
    def test_model_rejects_same_payloads(self, data):
        """Pydantic модель отклоняет всё, что отклоняет схема."""
        with pytest.raises(PydanticValidationError):
            ArithmeticConfig.model_validate(data, strict=True)

    def test_model_frozen(self):
        config = ArithmeticConfig()
        with pytest.raises(PydanticValidationError):
            config.parallel = True

    def test_loaded_config_drives_multiply(self):
        """JSON конфигурация задаёт основание и стратегию умножения"""
        config = load_arithmetic_config(
            json.loads('{"base": 1000, "karatsuba_cutoff": 2, "parallel": true, "max_workers": 2}')
        )
        a = parse("3124679846169848946416687981", base=config.base)
        b = parse("4864789415649194764186476", base=config.base)
        result = multiply(a, b, config)
        assert result.base == 1000
        assert format_bignum(result) == (
            "15200909442939435242569275059005520266618929791944956"
        )
