"""
Bignum Types — Sign, Ordering и параметры основания

Базовые перечисления и константы, общие для всех компонентов арифметики.
Модуль не зависит ни от одного другого модуля пакета.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра d удовлетворяет 0 <= d < base
2. 2 <= base <= MAX_BASE
3. (base - 1)^2 + 2 * (base - 1) помещается в 64-битный беззнаковый аккумулятор
"""

from enum import Enum
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ОСНОВАНИЯ
# =============================================================================

# Основание по умолчанию (десятичные цифры во внутреннем представлении)
DEFAULT_BASE: Final[int] = 10

# Ширина аккумулятора умножения в битах
ACCUMULATOR_BITS: Final[int] = 64

# Максимальное основание: (B-1)^2 + (B-1) + (B-1) = B^2 - 1 < 2^64
MAX_BASE: Final[int] = 2 ** (ACCUMULATOR_BITS // 2)

# Минимальное основание
MIN_BASE: Final[int] = 2

# Порог Karatsuba по умолчанию (в цифрах)
DEFAULT_KARATSUBA_CUTOFF: Final[int] = 32

# Минимально допустимый порог Karatsuba
MIN_KARATSUBA_CUTOFF: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак Bignum. Ноль всегда NONNEGATIVE."""

    NONNEGATIVE = "NONNEGATIVE"
    NEGATIVE = "NEGATIVE"

    def flipped(self) -> "Sign":
        if self is Sign.NONNEGATIVE:
            return Sign.NEGATIVE
        return Sign.NONNEGATIVE


class Ordering(int, Enum):
    """
    Результат сравнения двух значений.

    Совместим со знаком разности: LESS = -1, EQUAL = 0, GREATER = 1.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reversed(self) -> "Ordering":
        return Ordering(-self.value)


def product_sign(a: Sign, b: Sign) -> Sign:
    """Знак произведения: NONNEGATIVE iff знаки операндов совпадают."""
    if a is b:
        return Sign.NONNEGATIVE
    return Sign.NEGATIVE
