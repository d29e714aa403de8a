"""
Base Conversion — parse / format для Bignum

Текстовый формат: необязательный ведущий '-', затем одна или более ASCII-цифр
0-9. Без пробелов, разделителей групп, экспоненты и знака '+'.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. format_bignum(parse(s)) == канонической форме s
2. "-0", "0", "-000" дают один и тот же канонический ноль (NONNEGATIVE)
3. Любой символ вне [0-9] после знака -> ParseError
"""

import re

from src.bignum.core.bignum import Bignum, validate_base
from src.bignum.core.errors import ParseError
from src.bignum.core.radix import decimal_to_magnitude, magnitude_to_decimal
from src.bignum.core.types import DEFAULT_BASE, Sign

_DECIMAL_BODY = re.compile(r"[0-9]+")


def parse(text: str, base: int = DEFAULT_BASE) -> Bignum:
    """
    Разбор десятичной строки в Bignum.

    Args:
        text: Десятичная строка, например "-12345"
        base: Основание внутреннего представления результата

    Returns:
        Канонический Bignum

    Raises:
        ParseError: Пустая строка (после удаления '-'), посторонние символы
            или не-строковый ввод
        InvalidBase: Если основание вне диапазона

    Examples:
        >>> str(parse("-000123"))
        '-123'
        >>> parse("-0") == parse("0")
        True
    """
    if not isinstance(text, str):
        raise ParseError(text, "input must be a string")

    validate_base(base)

    sign = Sign.NONNEGATIVE
    body = text
    if body.startswith("-"):
        sign = Sign.NEGATIVE
        body = body[1:]

    if not body:
        raise ParseError(text, "no digits")

    if _DECIMAL_BODY.fullmatch(body) is None:
        raise ParseError(text, "only ASCII digits 0-9 are allowed after the sign")

    return Bignum.from_magnitude(decimal_to_magnitude(body, base), sign, base)


def format_bignum(value: Bignum) -> str:
    """
    Десятичная строка Bignum в канонической форме.

    Examples:
        >>> format_bignum(parse("-9877", base=100))
        '-9877'
    """
    text = magnitude_to_decimal(value.digits, value.base)
    if value.is_negative and not value.is_zero:
        return "-" + text
    return text
