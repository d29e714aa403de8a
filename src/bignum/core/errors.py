"""
Bignum Errors — иерархия исключений арифметики

Типы ошибок:
- ParseError: невалидная десятичная строка (recoverable)
- InvalidCutoff: порог Karatsuba < 2 (нарушение предусловия)
- InvalidBase: основание вне [MIN_BASE, MAX_BASE]
- BaseMismatchError: операнды в разных основаниях
- InternalInvariantViolation: невозможное состояние (ошибка программы, fatal)

Арифметика над корректными Bignum никогда не падает: переполнение невозможно,
последовательность цифр растёт под результат.
"""


class BignumError(Exception):
    """Базовое исключение для всех ошибок арифметики Bignum."""

    pass


class ParseError(BignumError, ValueError):
    """
    Невалидный ввод для parse.

    Возникает при пустой строке (после удаления знака '-') или при любом
    символе вне [0-9]. Ошибка восстанавливаемая: вызывающий код решает,
    что делать с вводом.
    """

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} as a decimal integer: {reason}")


class InvalidCutoff(BignumError, ValueError):
    """Порог Karatsuba меньше 2; отклоняется до начала рекурсии."""

    def __init__(self, cutoff: object):
        self.cutoff = cutoff
        super().__init__(f"Karatsuba cutoff must be an integer >= 2, got {cutoff!r}")


class InvalidBase(BignumError, ValueError):
    """Основание не помещается в аккумулятор или меньше 2."""

    pass


class BaseMismatchError(BignumError, ValueError):
    """Операнды одной операции представлены в разных основаниях."""

    def __init__(self, left_base: int, right_base: int):
        self.left_base = left_base
        self.right_base = right_base
        super().__init__(
            f"Operands use different bases: {left_base} vs {right_base}"
        )


class InternalInvariantViolation(BignumError, AssertionError):
    """
    Невозможное внутреннее состояние.

    Например, ненулевой заём после вычитания модулей означает, что меньший
    модуль был передан как уменьшаемое. Это сигнал ошибки в программе,
    а не пользовательская ошибка: внутри библиотеки не перехватывается.
    """

    pass
