"""
Тесты для Integer Ops — целочисленные примитивы

Проверяет:
1. pow10 и его кэш
2. Сокращение дробей и нормализацию знака
3. Снятие множителей 2 и 5
4. Усечённое деление (к нулю)
5. Согласованность hash с числовой башней Python
"""

from fractions import Fraction

import pytest

from src.core.math.exceptions import DivisionByZero
from src.core.math.integer_ops import (
    fraction_hash,
    normalize_sign,
    pow10,
    reduce_fraction,
    strip_factor,
    truncated_divmod,
)


class TestPow10:
    """Тесты pow10"""

    def test_small_exponents(self) -> None:
        """Базовые степени"""
        assert pow10(0) == 1
        assert pow10(1) == 10
        assert pow10(5) == 100_000

    def test_large_exponent_exact(self) -> None:
        """Большие степени точные (без float)"""
        assert pow10(40) == int("1" + "0" * 40)
        assert pow10(400) == 10**400

    def test_negative_exponent_rejected(self) -> None:
        """Отрицательный показатель отклоняется"""
        with pytest.raises(ValueError, match="non-negative"):
            pow10(-1)


class TestReduceFraction:
    """Тесты reduce_fraction"""

    def test_reduces_by_gcd(self) -> None:
        assert reduce_fraction(10, 20) == (1, 2)
        assert reduce_fraction(2, 6) == (1, 3)

    def test_sign_moves_to_numerator(self) -> None:
        """Знаменатель всегда положительный"""
        assert reduce_fraction(1, -3) == (-1, 3)
        assert reduce_fraction(-1, -3) == (1, 3)
        assert reduce_fraction(4, -8) == (-1, 2)

    def test_zero_numerator(self) -> None:
        """0/d сокращается до 0/1"""
        assert reduce_fraction(0, 5) == (0, 1)
        assert reduce_fraction(0, -7) == (0, 1)

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            reduce_fraction(1, 0)

    def test_already_reduced(self) -> None:
        assert reduce_fraction(7, 9) == (7, 9)


class TestNormalizeSign:
    """Тесты normalize_sign"""

    def test_keeps_unreduced_form(self) -> None:
        assert normalize_sign(2, 6) == (2, 6)
        assert normalize_sign(2, -6) == (-2, 6)

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            normalize_sign(3, 0)


class TestStripFactor:
    """Тесты strip_factor"""

    def test_counts_factors(self) -> None:
        assert strip_factor(40, 2) == (5, 3)
        assert strip_factor(125, 5) == (1, 3)

    def test_no_factor(self) -> None:
        assert strip_factor(7, 2) == (7, 0)


class TestTruncatedDivmod:
    """Тесты truncated_divmod: деление с усечением к нулю"""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (23, 10, (2, 3)),
            (-23, 10, (-2, -3)),
            (23, -10, (-2, 3)),
            (-23, -10, (2, -3)),
            (20, 10, (2, 0)),
            (0, 10, (0, 0)),
        ],
    )
    def test_truncates_toward_zero(self, numerator, denominator, expected) -> None:
        assert truncated_divmod(numerator, denominator) == expected

    def test_identity(self) -> None:
        """Инвариант: n == q * d + r"""
        for n in (-101, -7, 0, 7, 101):
            q, r = truncated_divmod(n, 7)
            assert n == q * 7 + r


class TestFractionHash:
    """Тесты fraction_hash: совместимость с hash(int) и hash(Fraction)"""

    def test_integer_values_match_int_hash(self) -> None:
        assert fraction_hash(2, 1) == hash(2)
        assert fraction_hash(20, 10) == hash(2)
        assert fraction_hash(-1, 1) == hash(-1)
        assert fraction_hash(0, 1) == hash(0)

    def test_matches_fraction_hash(self) -> None:
        assert fraction_hash(1, 3) == hash(Fraction(1, 3))
        assert fraction_hash(-5, 6) == hash(Fraction(-5, 6))

    def test_unreduced_equal_to_reduced(self) -> None:
        """Равные по значению дроби дают равный hash"""
        assert fraction_hash(2, 6) == fraction_hash(1, 3)
        assert fraction_hash(25, 100) == fraction_hash(1, 4)
