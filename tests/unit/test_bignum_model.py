"""
Tests for Bignum model

Покрывает:
- Проверку канонической формы при прямом создании
- Нормализацию в from_digits ("отрицательный ноль", старшие нули)
- Immutability (frozen=True)
- Равенство и hash канонических значений
- Отрицание, str/repr
- Валидацию основания
"""

import pytest
from pydantic import ValidationError

from src.bignum.core import (
    DEFAULT_BASE,
    MAX_BASE,
    BaseMismatchError,
    Bignum,
    InvalidBase,
    Sign,
    ensure_same_base,
    validate_base,
)
from src.bignum.math import parse


# =============================================================================
# ПРЯМОЕ СОЗДАНИЕ
# =============================================================================


class TestBignumConstruction:
    """Прямой конструктор принимает только каноническую форму."""

    def test_valid_value(self):
        value = Bignum(digits=(1, 2, 3))
        assert value.sign is Sign.NONNEGATIVE
        assert value.base == DEFAULT_BASE
        assert str(value) == "321"

    def test_list_coerced_to_tuple(self):
        value = Bignum(digits=[5, 4], sign=Sign.NEGATIVE)
        assert value.digits == (5, 4)
        assert str(value) == "-45"

    def test_trailing_zero_rejected(self):
        """Старший ноль — неканоническая форма."""
        with pytest.raises(ValidationError, match="most-significant zero"):
            Bignum(digits=(1, 0))

    def test_negative_zero_rejected(self):
        with pytest.raises(ValidationError, match="zero must have NONNEGATIVE sign"):
            Bignum(digits=(0,), sign=Sign.NEGATIVE)

    def test_digit_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="out of range"):
            Bignum(digits=(10,), base=10)

        with pytest.raises(ValidationError, match="out of range"):
            Bignum(digits=(-1,))

    def test_empty_digits_rejected(self):
        with pytest.raises(ValidationError):
            Bignum(digits=())

    def test_base_bounds(self):
        with pytest.raises(ValidationError):
            Bignum(digits=(1,), base=1)

        with pytest.raises(ValidationError):
            Bignum(digits=(1,), base=MAX_BASE + 1)

        assert Bignum(digits=(MAX_BASE - 1,), base=MAX_BASE).base == MAX_BASE

    def test_frozen(self):
        """Bignum неизменяем после создания."""
        value = Bignum(digits=(7,))
        with pytest.raises(ValidationError):
            value.sign = Sign.NEGATIVE


# =============================================================================
# FROM_DIGITS
# =============================================================================


class TestFromDigits:
    """from_digits нормализует произвольные цифры в диапазоне основания."""

    def test_trailing_zeros_trimmed(self):
        value = Bignum.from_digits([4, 0, 0])
        assert value.digits == (4,)

    def test_low_zeros_kept(self):
        assert str(Bignum.from_digits([0, 0, 0, 0, 1])) == "10000"

    def test_negative_zero_canonicalized(self):
        value = Bignum.from_digits([0, 0], Sign.NEGATIVE)
        assert value == Bignum.zero()
        assert value.sign is Sign.NONNEGATIVE

    def test_empty_is_zero(self):
        assert Bignum.from_digits([], Sign.NEGATIVE) == Bignum.zero()

    def test_out_of_range_digit(self):
        with pytest.raises(ValueError, match="out of range"):
            Bignum.from_digits([10])

    def test_invalid_base(self):
        with pytest.raises(InvalidBase):
            Bignum.from_digits([1], base=1)

    def test_input_not_retained(self):
        """Значение не держит ссылку на переданный список."""
        digits = [1, 2, 3]
        value = Bignum.from_digits(digits)
        digits[0] = 9
        assert str(value) == "321"

    def test_same_value_as_parse(self):
        assert Bignum.from_digits([5, 4, 3, 2, 1], Sign.NEGATIVE) == parse("-12345")


# =============================================================================
# СВОЙСТВА И ОПЕРАТОРЫ
# =============================================================================


class TestBignumBehaviour:
    """Равенство, hash, отрицание, представление."""

    def test_equality_of_canonical_values(self):
        assert parse("123") == parse("123")
        assert parse("123") != parse("-123")
        assert parse("123") != parse("124")
        assert parse("00123") == parse("123")

    def test_validated_equals_constructed(self):
        """Значение из арифметики равно значению из прямого конструктора."""
        assert parse("12") == Bignum(digits=(2, 1))

    def test_hash_consistent_with_equality(self):
        assert hash(parse("-0")) == hash(parse("0"))
        assert len({parse("7"), parse("007"), parse("-7")}) == 2

    def test_negation(self):
        assert str(-parse("5")) == "-5"
        assert str(-parse("-5")) == "5"

    def test_negation_of_zero(self):
        zero = Bignum.zero()
        assert -zero == zero
        assert (-zero).sign is Sign.NONNEGATIVE

    def test_properties(self):
        assert parse("0").is_zero
        assert parse("-0").is_zero
        assert parse("-3").is_negative
        assert not parse("3").is_negative

    def test_magnitude_is_owned_copy(self):
        value = parse("42")
        magnitude = value.magnitude()
        magnitude.append(1)
        assert value.digits == (2, 4)

    def test_repr(self):
        assert repr(parse("-12")) == "Bignum('-12', base=10)"

    def test_zero_in_base(self):
        zero = Bignum.zero(base=1000)
        assert zero.digits == (0,)
        assert zero.base == 1000


# =============================================================================
# ОСНОВАНИЕ
# =============================================================================


class TestBaseValidation:
    """validate_base и ensure_same_base"""

    @pytest.mark.parametrize("base", [2, 10, 1000, MAX_BASE])
    def test_valid_bases(self, base):
        assert validate_base(base) == base

    @pytest.mark.parametrize("base", [0, 1, -10, MAX_BASE + 1, 10.0, True, "10"])
    def test_invalid_bases(self, base):
        with pytest.raises(InvalidBase):
            validate_base(base)

    def test_same_base(self):
        assert ensure_same_base(parse("1", base=100), parse("2", base=100)) == 100

    def test_mismatch(self):
        with pytest.raises(BaseMismatchError, match="10 vs 100"):
            ensure_same_base(parse("1"), parse("1", base=100))
