"""
Contract Validation Module

Валидация внешних JSON конфигураций арифметики.
"""

from .validators import (
    load_arithmetic_config,
    load_schema,
    validate_arithmetic_config,
)

__all__ = [
    "load_schema",
    "validate_arithmetic_config",
    "load_arithmetic_config",
]
