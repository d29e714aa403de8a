"""
JSON Schema Contract Validators

Валидация внешних конфигураций арифметики (dict / JSON) по контракту
contracts/schema/arithmetic_config.json (jsonschema, Draft 2020-12) и
построение ArithmeticConfig из проверенных данных.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.bignum.core.config import ArithmeticConfig

SCHEMA_DIR = Path(__file__).parent / "schema"
ARITHMETIC_CONFIG_SCHEMA = "arithmetic_config"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema из contracts/schema/.

    Args:
        schema_name: Имя схемы без расширения (например, 'arithmetic_config')

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


@lru_cache(maxsize=None)
def _arithmetic_config_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(ARITHMETIC_CONFIG_SCHEMA))


# =============================================================================
# ARITHMETIC CONFIG
# =============================================================================


def validate_arithmetic_config(data: Dict[str, Any]) -> None:
    """
    Валидация arithmetic_config данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _arithmetic_config_validator().validate(data)


def load_arithmetic_config(data: Dict[str, Any]) -> ArithmeticConfig:
    """
    Валидация по контракту и построение ArithmeticConfig.

    Отсутствующие поля получают значения по умолчанию модели.

    Args:
        data: Конфигурация (например, результат json.load)

    Returns:
        Frozen ArithmeticConfig

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_arithmetic_config(data)
    return ArithmeticConfig.model_validate(data)
