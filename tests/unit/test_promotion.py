"""
Тесты для Promotion — классификация дробей

Проверяемые инварианты:
1. Знаменатель 2^a * 5^b -> конечная десятичная форма
2. scale = a + b (общее число снятых множителей)
3. Иначе -> сокращённая рациональная форма
4. Нулевой знаменатель -> DivisionByZero
"""

import pytest

from src.core.math.exceptions import DivisionByZero
from src.core.math.promotion import PromotedFraction, promote_fraction


class TestTerminatingFractions:
    """Дроби с конечным десятичным разложением."""

    @pytest.mark.parametrize(
        "numerator,denominator,unscaled,scale",
        [
            (10, 20, 5, 1),
            (10, 4, 25, 1),
            (1, 8, 125, 3),
            (1, 10, 10, 2),
            (1, 20, 50, 3),
            (3, 250, 120, 4),
            (-450, 6, -75, 0),
            (7, 1, 7, 0),
            (0, 3, 0, 0),
            (1, -4, -25, 2),
        ],
    )
    def test_decimal_form(self, numerator, denominator, unscaled, scale) -> None:
        result = promote_fraction(numerator, denominator)
        assert result.is_terminating
        assert result.unscaled == unscaled
        assert result.scale == scale

    def test_scale_is_total_factor_count(self) -> None:
        """1/10: один множитель 2 и один 5 -> scale 2, не 1"""
        result = promote_fraction(1, 10)
        assert result.scale == 2
        assert result.unscaled == 10

    def test_reduced_pair_kept(self) -> None:
        """numerator/denominator всегда в несократимой форме"""
        result = promote_fraction(10, 20)
        assert (result.numerator, result.denominator) == (1, 2)


class TestNonTerminatingFractions:
    """Дроби без конечного десятичного разложения."""

    def test_one_third(self) -> None:
        assert promote_fraction(1, 3) == PromotedFraction(1, 3)

    def test_reduced_before_classification(self) -> None:
        result = promote_fraction(2, 6)
        assert not result.is_terminating
        assert (result.numerator, result.denominator) == (1, 3)

    def test_mixed_factors(self) -> None:
        """Множители 2 и 5 вместе с другими простыми -> Ratio"""
        result = promote_fraction(-125, 30)
        assert not result.is_terminating
        assert (result.numerator, result.denominator) == (-25, 6)
        assert result.unscaled is None
        assert result.scale is None


def test_zero_denominator() -> None:
    with pytest.raises(DivisionByZero):
        promote_fraction(1, 0)
