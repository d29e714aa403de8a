"""
Bignum — каноническое представление целого произвольной точности

Immutable Pydantic модель: последовательность цифр (младшая первая) в
основании base и знак.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 0 <= digit < base для каждой цифры
2. Нет старших нулевых цифр, кроме канонического нуля (ровно одна цифра 0)
3. Ноль всегда имеет знак NONNEGATIVE
4. Значение не мутируется после создания (frozen=True); операции
   возвращают новые Bignum

Прямой конструктор Bignum(...) проверяет все инварианты и отклоняет
неканонический ввод. Bignum.from_digits принимает произвольные цифры
в диапазоне основания и нормализует их.
"""

from typing import Iterable

from pydantic import BaseModel, Field, model_validator

from src.bignum.core.errors import BaseMismatchError, InvalidBase
from src.bignum.core.magnitude import is_zero_magnitude, normalize_magnitude
from src.bignum.core.radix import magnitude_to_decimal
from src.bignum.core.types import DEFAULT_BASE, MAX_BASE, MIN_BASE, Sign


def validate_base(base: int) -> int:
    """
    Проверка основания: MIN_BASE <= base <= MAX_BASE.

    Raises:
        InvalidBase: Если основание не целое или вне диапазона
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {base!r}")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(
            f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}"
        )
    return base


class Bignum(BaseModel):
    """
    Целое со знаком произвольной точности.

    Attributes:
        digits: Цифры модуля в основании base, младшая первая
        sign: Знак (NONNEGATIVE для нуля)
        base: Основание внутреннего представления
    """

    digits: tuple[int, ...] = Field(..., min_length=1, description="Цифры, младшая первая")
    sign: Sign = Field(default=Sign.NONNEGATIVE, description="Знак")
    base: int = Field(default=DEFAULT_BASE, ge=MIN_BASE, le=MAX_BASE, description="Основание")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_canonical(self) -> "Bignum":
        """Проверка канонической формы."""
        for digit in self.digits:
            if digit < 0 or digit >= self.base:
                raise ValueError(
                    f"digit {digit} out of range for base {self.base}"
                )
        if len(self.digits) > 1 and self.digits[-1] == 0:
            raise ValueError("digits must not have most-significant zero digits")
        if self.sign is Sign.NEGATIVE and self.digits == (0,):
            raise ValueError("zero must have NONNEGATIVE sign")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(
        cls,
        digits: Iterable[int],
        sign: Sign = Sign.NONNEGATIVE,
        base: int = DEFAULT_BASE,
    ) -> "Bignum":
        """
        Создание из произвольной последовательности цифр с нормализацией.

        Старшие нули отбрасываются, пустая последовательность и "отрицательный
        ноль" сводятся к каноническому нулю.

        Args:
            digits: Цифры, младшая первая; каждая в [0, base)
            sign: Знак
            base: Основание

        Returns:
            Канонический Bignum

        Raises:
            InvalidBase: Если основание вне диапазона
            ValueError: Если какая-либо цифра вне [0, base)

        Examples:
            >>> str(Bignum.from_digits([0, 0, 0, 0, 1]))
            '10000'
            >>> Bignum.from_digits([0, 0], Sign.NEGATIVE) == Bignum.zero()
            True
        """
        validate_base(base)
        magnitude = list(digits)
        for digit in magnitude:
            if digit < 0 or digit >= base:
                raise ValueError(f"digit {digit} out of range for base {base}")
        return cls.from_magnitude(magnitude, sign, base)

    @classmethod
    def from_magnitude(cls, magnitude: list[int], sign: Sign, base: int) -> "Bignum":
        """
        Обёртка свежего модуля, построенного арифметикой, в Bignum.

        Модуль нормализуется in-place и копируется в tuple, так что ссылка
        на список после возврата не удерживается. Цифры уже в диапазоне,
        поэтому повторная валидация пропускается.
        """
        normalize_magnitude(magnitude)
        if is_zero_magnitude(magnitude):
            sign = Sign.NONNEGATIVE
        return cls.model_construct(digits=tuple(magnitude), sign=sign, base=base)

    @classmethod
    def zero(cls, base: int = DEFAULT_BASE) -> "Bignum":
        """Канонический ноль в основании base."""
        return cls.from_magnitude([0], Sign.NONNEGATIVE, validate_base(base))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.digits == (0,)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def magnitude(self) -> list[int]:
        """Собственная копия цифр модуля (можно мутировать)."""
        return list(self.digits)

    def __neg__(self) -> "Bignum":
        if self.is_zero:
            return self
        return Bignum.from_magnitude(self.magnitude(), self.sign.flipped(), self.base)

    def __str__(self) -> str:
        text = magnitude_to_decimal(self.digits, self.base)
        if self.sign is Sign.NEGATIVE and not self.is_zero:
            return "-" + text
        return text

    def __repr__(self) -> str:
        return f"Bignum({str(self)!r}, base={self.base})"


def ensure_same_base(a: Bignum, b: Bignum) -> int:
    """
    Проверка, что оба операнда в одном основании.

    Returns:
        Общее основание

    Raises:
        BaseMismatchError: Если основания различаются
    """
    if a.base != b.base:
        raise BaseMismatchError(a.base, b.base)
    return a.base
