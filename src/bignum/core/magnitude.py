"""
Magnitude Primitives — беззнаковые алгоритмы над последовательностями цифр

Модуль содержит все цифровые алгоритмы, работающие с модулями (magnitudes):
списками цифр list[int], младшая цифра первая. Знак здесь не участвует,
его разрешают операции уровня Bignum.

- Нормализация (удаление старших нулей до канонического [0])
- Сравнение модулей
- Сложение с переносом (carry) и вычитание с заёмом (borrow)
- Умножение в столбик (schoolbook), базовый случай Karatsuba
- Split/shift для выравнивания частичных произведений Karatsuba

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая функция возвращает новый нормализованный список (кроме shift_left)
2. shift_left мутирует аргумент in-place и применяется только к свежим
   промежуточным значениям, которые не видны вызывающему коду
3. Аккумулятор умножения не превышает base^2 - 1
"""

from src.bignum.core.errors import InternalInvariantViolation
from src.bignum.core.types import Ordering
from src.bignum.infrastructure.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_magnitude(digits: list[int]) -> list[int]:
    """
    Удаление старших нулевых цифр in-place.

    Тотальная функция: пустой список и список из одних нулей сводятся
    к каноническому нулю [0].

    Args:
        digits: Цифры, младшая первая

    Returns:
        Тот же список, нормализованный

    Examples:
        >>> normalize_magnitude([3, 2, 0, 0])
        [3, 2]
        >>> normalize_magnitude([0, 0, 0])
        [0]
        >>> normalize_magnitude([])
        [0]
    """
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    if not digits:
        digits.append(0)
    return digits


def is_zero_magnitude(digits: list[int] | tuple[int, ...]) -> bool:
    """True если все цифры нулевые (в том числе для ненормализованного ввода)."""
    return all(digit == 0 for digit in digits)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
) -> Ordering:
    """
    Сравнение двух нормализованных модулей.

    Больше цифр означает больший модуль; при равной длине решает первое
    несовпадение, начиная со старшей цифры.

    Args:
        a: Нормализованный модуль
        b: Нормализованный модуль

    Returns:
        Ordering.LESS / EQUAL / GREATER для |a| относительно |b|
    """
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    for a_digit, b_digit in zip(reversed(a), reversed(b)):
        if a_digit > b_digit:
            return Ordering.GREATER
        if a_digit < b_digit:
            return Ordering.LESS

    return Ordering.EQUAL


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
    base: int,
) -> list[int]:
    """
    Сложение модулей с распространением переноса.

    digit_i = (a_i + b_i + carry) mod base
    carry   = (a_i + b_i + carry) div base

    Финальный ненулевой перенос добавляет ещё одну цифру.

    Args:
        a: Модуль
        b: Модуль
        base: Основание

    Returns:
        Новый нормализованный модуль |a| + |b|
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = 0
    b_len = len(b)

    for i, a_digit in enumerate(a):
        total = a_digit + carry
        if i < b_len:
            total += b[i]
        result.append(total % base)
        carry = total // base

    if carry:
        result.append(carry)

    return normalize_magnitude(result)


def sub_magnitudes(
    big: list[int] | tuple[int, ...],
    small: list[int] | tuple[int, ...],
    base: int,
) -> list[int]:
    """
    Вычитание модулей с распространением заёма: |big| - |small|.

    Предусловие: |big| >= |small|. Для каждой позиции:

        if big_i - borrow < small_i:
            digit = big_i - borrow + base - small_i, borrow = 1
        else:
            digit = big_i - borrow - small_i, borrow = 0

    Args:
        big: Уменьшаемое (больший модуль)
        small: Вычитаемое (меньший модуль)
        base: Основание

    Returns:
        Новый нормализованный модуль

    Raises:
        InternalInvariantViolation: Если после последней цифры остался заём
            (предусловие |big| >= |small| нарушено вызывающим кодом)
    """
    result: list[int] = []
    borrow = 0
    small_len = len(small)

    if small_len > len(big):
        _raise_negative_difference(big, small)

    for i, big_digit in enumerate(big):
        small_digit = small[i] if i < small_len else 0
        minuend = big_digit - borrow
        if minuend < small_digit:
            result.append(minuend + base - small_digit)
            borrow = 1
        else:
            result.append(minuend - small_digit)
            borrow = 0

    if borrow != 0:
        _raise_negative_difference(big, small)

    return normalize_magnitude(result)


def _raise_negative_difference(
    big: list[int] | tuple[int, ...],
    small: list[int] | tuple[int, ...],
) -> None:
    logger.critical(
        "Magnitude subtraction underflow: minuend has %d digits, subtrahend has %d",
        len(big),
        len(small),
    )
    raise InternalInvariantViolation(
        "Magnitude subtraction left a non-zero borrow: "
        "the smaller magnitude was passed as the minuend"
    )


# =============================================================================
# УМНОЖЕНИЕ В СТОЛБИК
# =============================================================================


def long_mult_magnitudes(
    a: list[int] | tuple[int, ...],
    b: list[int] | tuple[int, ...],
    base: int,
) -> list[int]:
    """
    Классическое умножение в столбик, O(len(a) * len(b)).

    Для каждой цифры b_i проходим все цифры a_j и накапливаем
    a_j * b_i + carry + partial в позицию i + j. Финальный перенос строки
    записывается в позицию i + len(a), которую предыдущие строки ещё не
    затрагивали. Максимум аккумулятора: (B-1)^2 + (B-1) + (B-1) = B^2 - 1.

    Args:
        a: Модуль
        b: Модуль
        base: Основание

    Returns:
        Новый нормализованный модуль, не более len(a) + len(b) цифр
    """
    p = len(a)
    product = [0] * (p + len(b))

    for i, b_digit in enumerate(b):
        if b_digit == 0:
            continue
        carry = 0
        for j, a_digit in enumerate(a):
            total = product[i + j] + a_digit * b_digit + carry
            product[i + j] = total % base
            carry = total // base
        product[i + p] += carry

    return normalize_magnitude(product)


# =============================================================================
# SPLIT / SHIFT (Karatsuba)
# =============================================================================


def split_magnitude(
    digits: list[int] | tuple[int, ...],
    position: int,
) -> tuple[list[int], list[int]]:
    """
    Разбиение модуля на (low, high): value = high * base^position + low.

    Обе половины — свежие нормализованные списки; если цифр не больше
    position, старшая половина равна [0].
    """
    low = normalize_magnitude(list(digits[:position]))
    high = normalize_magnitude(list(digits[position:]))
    return low, high


def shift_left(digits: list[int], places: int) -> None:
    """
    Умножение на base^places in-place: дописывает places нулевых младших цифр.

    Единственная санкционированная мутация. Канонический ноль не сдвигается.
    """
    if places <= 0 or is_zero_magnitude(digits):
        return
    digits[:0] = [0] * places
