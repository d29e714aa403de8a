"""
Comparison — полный порядок над Bignum

Порядок:
1. Два нуля равны независимо от учёта знака
2. Иначе сначала знак: NONNEGATIVE > NEGATIVE
3. При равных знаках сравниваются модули; для NEGATIVE результат инвертируется

Рефлексивность, антисимметричность и транзитивность следуют из
канонической формы: у каждого значения ровно одно представление.
"""

from src.bignum.core.bignum import Bignum, ensure_same_base
from src.bignum.core.magnitude import compare_magnitudes
from src.bignum.core.types import Ordering, Sign

__all__ = [
    "compare",
    "compare_magnitudes",
]


def compare(a: Bignum, b: Bignum) -> Ordering:
    """
    Сравнение двух Bignum.

    Args:
        a: Левый операнд
        b: Правый операнд

    Returns:
        Ordering.LESS если a < b, EQUAL если a == b, GREATER если a > b

    Raises:
        BaseMismatchError: Если операнды в разных основаниях

    Examples:
        >>> compare(parse("-234"), parse("0"))
        <Ordering.LESS: -1>
    """
    ensure_same_base(a, b)

    if a.is_zero and b.is_zero:
        return Ordering.EQUAL

    if a.sign is not b.sign:
        return Ordering.GREATER if a.sign is Sign.NONNEGATIVE else Ordering.LESS

    order = compare_magnitudes(a.digits, b.digits)
    if a.sign is Sign.NEGATIVE:
        return order.reversed()
    return order
