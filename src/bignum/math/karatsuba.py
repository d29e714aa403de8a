"""
Karatsuba Multiplication — рекурсивное умножение divide-and-conquer

Алгоритм (m = ceil(max(len(a), len(b)) / 2)):
    a = a_high * B^m + a_low,  b = b_high * B^m + b_low
    c = a_high * b_high
    d = a_low * b_low
    e = (a_high + a_low) * (b_high + b_low) - c - d
    a * b = c * B^2m + e * B^m + d

Базовый случай: если у любого операнда не больше cutoff цифр, используется умножение
в столбик. Рекурсия работает только с модулями (NONNEGATIVE); знак
результата определяется один раз, на верхнем уровне.

Параллельный вариант: c считается в одной ветви fork-join, пара
(d, cross) во второй, которая сама делится вложенным join.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. cutoff >= 2 проверяется до начала рекурсии (InvalidCutoff)
2. Параллельный и последовательный варианты дают идентичный результат
3. Каждый рекурсивный вызов владеет свежими списками цифр; shift_left
   применяется только к ним
"""

from typing import Optional

from src.bignum.core.bignum import Bignum, ensure_same_base
from src.bignum.core.config import ArithmeticConfig
from src.bignum.core.errors import BaseMismatchError, InvalidCutoff
from src.bignum.core.magnitude import (
    add_magnitudes,
    long_mult_magnitudes,
    shift_left,
    split_magnitude,
    sub_magnitudes,
)
from src.bignum.core.types import MIN_KARATSUBA_CUTOFF, product_sign
from src.bignum.infrastructure.logging import get_logger
from src.bignum.parallel.fork_join import ForkJoinPool, get_worker_pool

logger = get_logger(__name__)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_cutoff(cutoff: int) -> int:
    """
    Проверка порога Karatsuba.

    Raises:
        InvalidCutoff: Если cutoff не целое или cutoff < 2
    """
    if isinstance(cutoff, bool) or not isinstance(cutoff, int):
        raise InvalidCutoff(cutoff)
    if cutoff < MIN_KARATSUBA_CUTOFF:
        raise InvalidCutoff(cutoff)
    return cutoff


# =============================================================================
# PUBLIC API
# =============================================================================


def multiply_karatsuba(
    a: Bignum,
    b: Bignum,
    cutoff: int,
    parallel: bool = False,
    pool: Optional[ForkJoinPool] = None,
) -> Bignum:
    """
    Произведение a * b алгоритмом Karatsuba.

    Args:
        a: Левый операнд
        b: Правый операнд
        cutoff: Порог (в цифрах) перехода на умножение в столбик, >= 2
        parallel: Fork-join вариант
        pool: Пул для parallel=True (None: общий пул get_worker_pool())

    Returns:
        Канонический Bignum, бит-в-бит равный multiply_schoolbook(a, b)

    Raises:
        InvalidCutoff: Если cutoff < 2
        BaseMismatchError: Если операнды в разных основаниях

    Examples:
        >>> str(multiply_karatsuba(parse("1234567891"), parse("9876543219"), 4))
        '12193263132251181129'
    """
    validate_cutoff(cutoff)
    base = ensure_same_base(a, b)

    logger.debug(
        "Karatsuba multiply: %d x %d digits, base=%d, cutoff=%d, parallel=%s",
        len(a.digits),
        len(b.digits),
        base,
        cutoff,
        parallel,
    )

    if parallel:
        if pool is None:
            pool = get_worker_pool()
        magnitude = _karatsuba_parallel(a.magnitude(), b.magnitude(), base, cutoff, pool)
    else:
        magnitude = _karatsuba(a.magnitude(), b.magnitude(), base, cutoff)

    return Bignum.from_magnitude(magnitude, product_sign(a.sign, b.sign), base)


def multiply(a: Bignum, b: Bignum, config: Optional[ArithmeticConfig] = None) -> Bignum:
    """
    Произведение по параметрам конфигурации (base, cutoff, parallel, max_workers).

    Args:
        a: Левый операнд
        b: Правый операнд
        config: Конфигурация (None: значения по умолчанию в основании операндов)

    Raises:
        BaseMismatchError: Если основание операндов не совпадает с config.base
    """
    base = ensure_same_base(a, b)
    if config is None:
        config = ArithmeticConfig(base=base)
    elif config.base != base:
        raise BaseMismatchError(config.base, base)

    pool = get_worker_pool(config.max_workers) if config.parallel else None
    return multiply_karatsuba(
        a,
        b,
        cutoff=config.karatsuba_cutoff,
        parallel=config.parallel,
        pool=pool,
    )


# =============================================================================
# РЕКУРСИЯ
# =============================================================================


def _split_point(a: list[int], b: list[int]) -> int:
    return (max(len(a), len(b)) + 1) // 2


def _combine(c: list[int], d: list[int], e: list[int], m: int, base: int) -> list[int]:
    """c * B^2m + e * B^m + d"""
    shift_left(c, 2 * m)
    shift_left(e, m)
    return add_magnitudes(c, add_magnitudes(e, d, base), base)


def _karatsuba(a: list[int], b: list[int], base: int, cutoff: int) -> list[int]:
    if len(a) <= cutoff or len(b) <= cutoff:
        return long_mult_magnitudes(a, b, base)

    m = _split_point(a, b)
    a_low, a_high = split_magnitude(a, m)
    b_low, b_high = split_magnitude(b, m)

    c = _karatsuba(a_high, b_high, base, cutoff)
    d = _karatsuba(a_low, b_low, base, cutoff)
    cross = _karatsuba(
        add_magnitudes(a_high, a_low, base),
        add_magnitudes(b_high, b_low, base),
        base,
        cutoff,
    )
    e = sub_magnitudes(sub_magnitudes(cross, c, base), d, base)

    return _combine(c, d, e, m, base)


def _karatsuba_parallel(
    a: list[int],
    b: list[int],
    base: int,
    cutoff: int,
    pool: ForkJoinPool,
) -> list[int]:
    if len(a) <= cutoff or len(b) <= cutoff:
        return long_mult_magnitudes(a, b, base)

    m = _split_point(a, b)
    a_low, a_high = split_magnitude(a, m)
    b_low, b_high = split_magnitude(b, m)
    a_sum = add_magnitudes(a_high, a_low, base)
    b_sum = add_magnitudes(b_high, b_low, base)

    c, (d, cross) = pool.join(
        lambda: _karatsuba_parallel(a_high, b_high, base, cutoff, pool),
        lambda: pool.join(
            lambda: _karatsuba_parallel(a_low, b_low, base, cutoff, pool),
            lambda: _karatsuba_parallel(a_sum, b_sum, base, cutoff, pool),
        ),
    )
    e = sub_magnitudes(sub_magnitudes(cross, c, base), d, base)

    return _combine(c, d, e, m, base)
