"""
Addition / Subtraction — сложение и вычитание со знаком

- Одинаковые знаки: модули складываются с переносом, знак сохраняется
- Разные знаки: из большего модуля вычитается меньший с заёмом, знак
  результата — знак операнда с большим модулем; при равенстве модулей
  результат — канонический ноль (NONNEGATIVE)
- subtract(a, b) = add(a, negate(b))
"""

from src.bignum.core.bignum import Bignum, ensure_same_base
from src.bignum.core.magnitude import add_magnitudes, compare_magnitudes, sub_magnitudes
from src.bignum.core.types import Ordering


def negate(value: Bignum) -> Bignum:
    """Смена знака; знак нуля остаётся NONNEGATIVE."""
    return -value


def add(a: Bignum, b: Bignum) -> Bignum:
    """
    Сумма a + b.

    Raises:
        BaseMismatchError: Если операнды в разных основаниях

    Examples:
        >>> str(add(parse("123"), parse("10000")))
        '10123'
    """
    base = ensure_same_base(a, b)

    if a.sign is b.sign:
        return Bignum.from_magnitude(add_magnitudes(a.digits, b.digits, base), a.sign, base)

    order = compare_magnitudes(a.digits, b.digits)
    if order is Ordering.EQUAL:
        return Bignum.zero(base)
    if order is Ordering.GREATER:
        return Bignum.from_magnitude(sub_magnitudes(a.digits, b.digits, base), a.sign, base)
    return Bignum.from_magnitude(sub_magnitudes(b.digits, a.digits, base), b.sign, base)


def subtract(a: Bignum, b: Bignum) -> Bignum:
    """
    Разность a - b.

    Examples:
        >>> str(subtract(parse("123"), parse("10000")))
        '-9877'
    """
    return add(a, negate(b))
