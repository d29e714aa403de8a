"""
Bignum — целые со знаком произвольной точности

Разбор и вывод десятичных строк, сравнение, сложение, вычитание и умножение
(в столбик и Karatsuba, включая fork-join вариант).

Пример:
    from src.bignum import parse, multiply_karatsuba, format_bignum

    product = multiply_karatsuba(parse("1234567891"), parse("9876543219"), 4)
    format_bignum(product)  # '12193263132251181129'
"""

from src.bignum.contracts import load_arithmetic_config
from src.bignum.core import (
    DEFAULT_BASE,
    DEFAULT_KARATSUBA_CUTOFF,
    MAX_BASE,
    ArithmeticConfig,
    BaseMismatchError,
    Bignum,
    BignumError,
    InternalInvariantViolation,
    InvalidBase,
    InvalidCutoff,
    Ordering,
    ParseError,
    Sign,
)
from src.bignum.math import (
    add,
    compare,
    format_bignum,
    multiply,
    multiply_karatsuba,
    multiply_schoolbook,
    negate,
    parse,
    subtract,
)
from src.bignum.parallel import ForkJoinPool, get_worker_pool, shutdown_worker_pools

__all__ = [
    # Constants
    "DEFAULT_BASE",
    "DEFAULT_KARATSUBA_CUTOFF",
    "MAX_BASE",
    # Types
    "Bignum",
    "Sign",
    "Ordering",
    "ArithmeticConfig",
    "ForkJoinPool",
    # Errors
    "BignumError",
    "ParseError",
    "InvalidCutoff",
    "InvalidBase",
    "BaseMismatchError",
    "InternalInvariantViolation",
    # Operations
    "parse",
    "format_bignum",
    "compare",
    "add",
    "subtract",
    "negate",
    "multiply_schoolbook",
    "multiply_karatsuba",
    "multiply",
    "get_worker_pool",
    "shutdown_worker_pools",
    "load_arithmetic_config",
]
