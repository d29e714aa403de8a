"""
Core: представление Bignum, нормализация, конверсия основания, конфигурация.

Модули этого пакета не зависят от операций src.bignum.math.
"""

from src.bignum.core.bignum import Bignum, ensure_same_base, validate_base
from src.bignum.core.config import ArithmeticConfig
from src.bignum.core.errors import (
    BaseMismatchError,
    BignumError,
    InternalInvariantViolation,
    InvalidBase,
    InvalidCutoff,
    ParseError,
)
from src.bignum.core.types import (
    DEFAULT_BASE,
    DEFAULT_KARATSUBA_CUTOFF,
    MAX_BASE,
    MIN_BASE,
    MIN_KARATSUBA_CUTOFF,
    Ordering,
    Sign,
    product_sign,
)

__all__ = [
    # Constants
    "DEFAULT_BASE",
    "DEFAULT_KARATSUBA_CUTOFF",
    "MAX_BASE",
    "MIN_BASE",
    "MIN_KARATSUBA_CUTOFF",
    # Types
    "Bignum",
    "Ordering",
    "Sign",
    "ArithmeticConfig",
    # Errors
    "BignumError",
    "ParseError",
    "InvalidCutoff",
    "InvalidBase",
    "BaseMismatchError",
    "InternalInvariantViolation",
    # Functions
    "product_sign",
    "ensure_same_base",
    "validate_base",
]
