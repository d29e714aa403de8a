"""
Math: операции над Bignum.

Каждая операция чистая: принимает неизменяемые операнды и возвращает
новый канонический Bignum.
"""

# Base Conversion
from src.bignum.math.conversion import format_bignum, parse

# Comparison
from src.bignum.math.comparison import compare, compare_magnitudes

# Addition / Subtraction
from src.bignum.math.addition import add, negate, subtract

# Schoolbook Multiplication
from src.bignum.math.schoolbook import multiply_schoolbook

# Karatsuba Multiplication
from src.bignum.math.karatsuba import multiply, multiply_karatsuba, validate_cutoff

__all__ = [
    # Base Conversion
    "parse",
    "format_bignum",
    # Comparison
    "compare",
    "compare_magnitudes",
    # Addition / Subtraction
    "add",
    "negate",
    "subtract",
    # Schoolbook Multiplication
    "multiply_schoolbook",
    # Karatsuba Multiplication
    "multiply",
    "multiply_karatsuba",
    "validate_cutoff",
]
