"""
Radix Conversion — десятичная строка <-> цифры в основании B

Алгоритмы уровня цифр без знака:
- decimal_to_magnitude: повторное деление десятичного числа в столбик на B,
  каждый остаток становится очередной цифрой (младшая первая)
- magnitude_to_decimal: схема Горнера, начиная со старшей цифры:
  accumulator = accumulator * B + digit, аккумулятор хранится
  десятичными цифрами

Оба направления строят новый буфер и возвращают его, не мутируя ввод.
"""

from src.bignum.core.magnitude import normalize_magnitude

DECIMAL_RADIX = 10


def decimal_to_magnitude(decimal_digits: str, base: int) -> list[int]:
    """
    Перевод строки из ASCII-цифр в модуль в основании base.

    Ведущие нули допустимы и не влияют на результат.

    Args:
        decimal_digits: Непустая строка из символов 0-9 (без знака)
        base: Основание результата

    Returns:
        Нормализованный модуль, младшая цифра первая

    Examples:
        >>> decimal_to_magnitude("1234", 10)
        [4, 3, 2, 1]
        >>> decimal_to_magnitude("1234", 100)
        [34, 12]
        >>> decimal_to_magnitude("000", 10)
        [0]
    """
    dividend = [ord(char) - ord("0") for char in decimal_digits.lstrip("0")]
    magnitude: list[int] = []

    while dividend:
        quotient: list[int] = []
        remainder = 0
        for digit in dividend:
            remainder = remainder * DECIMAL_RADIX + digit
            quotient_digit = remainder // base
            # ведущие нули частного не сохраняем
            if quotient or quotient_digit:
                quotient.append(quotient_digit)
            remainder -= quotient_digit * base
        magnitude.append(remainder)
        dividend = quotient

    return normalize_magnitude(magnitude)


def magnitude_to_decimal(digits: list[int] | tuple[int, ...], base: int) -> str:
    """
    Перевод модуля в основании base в десятичную строку без ведущих нулей.

    Args:
        digits: Модуль, младшая цифра первая
        base: Основание модуля

    Returns:
        Строка ASCII-цифр; ноль — "0"

    Examples:
        >>> magnitude_to_decimal([34, 12], 100)
        '1234'
        >>> magnitude_to_decimal([0], 7)
        '0'
    """
    # младшая десятичная цифра первая
    accumulator = [0]

    for digit in reversed(digits):
        carry = digit
        for i, decimal_digit in enumerate(accumulator):
            total = decimal_digit * base + carry
            accumulator[i] = total % DECIMAL_RADIX
            carry = total // DECIMAL_RADIX
        while carry:
            accumulator.append(carry % DECIMAL_RADIX)
            carry //= DECIMAL_RADIX

    normalize_magnitude(accumulator)
    return "".join(chr(ord("0") + d) for d in reversed(accumulator))
