"""
Schoolbook Multiplication — умножение в столбик

O(n·m) цифровая сетка; базовый случай Karatsuba. Знак результата
NONNEGATIVE iff знаки операндов совпадают (и для нулевого произведения).
"""

from src.bignum.core.bignum import Bignum, ensure_same_base
from src.bignum.core.magnitude import long_mult_magnitudes
from src.bignum.core.types import product_sign


def multiply_schoolbook(a: Bignum, b: Bignum) -> Bignum:
    """
    Произведение a * b умножением в столбик.

    Raises:
        BaseMismatchError: Если операнды в разных основаниях

    Examples:
        >>> str(multiply_schoolbook(parse("123456789"), parse("987654321")))
        '121932631112635269'
    """
    base = ensure_same_base(a, b)
    magnitude = long_mult_magnitudes(a.digits, b.digits, base)
    return Bignum.from_magnitude(magnitude, product_sign(a.sign, b.sign), base)
