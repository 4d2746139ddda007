"""
Promotion — Классификация дроби: конечная десятичная или рациональная

Решает, имеет ли дробь N/D конечное десятичное разложение:
после сокращения знаменатель должен иметь вид 2^a * 5^b.

Алгоритм:
1. Сокращение по GCD, знаменатель > 0
2. Снятие множителей 2 (a штук) и 5 (b штук)
3. Остаток == 1 -> конечная десятичная, scale = a + b,
   unscaled = N * 10^scale / D (деление обязано быть точным)
4. Иначе -> рациональная форма (N, D)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale = общее число снятых множителей: 1/8 -> 0.125, 1/10 -> 0.10
2. Неточное деление на шаге 3 -> InternalInvariantViolation
"""

from typing import NamedTuple

from src.core.math.exceptions import InternalInvariantViolation
from src.core.math.integer_ops import pow10, reduce_fraction, strip_factor


class PromotedFraction(NamedTuple):
    """
    Результат классификации дроби.

    numerator/denominator всегда в несократимой форме.
    unscaled/scale заданы только для конечной десятичной формы.
    """

    numerator: int
    denominator: int
    unscaled: int | None = None
    scale: int | None = None

    @property
    def is_terminating(self) -> bool:
        """True если дробь имеет конечное десятичное разложение."""
        return self.scale is not None


def promote_fraction(numerator: int, denominator: int) -> PromotedFraction:
    """
    Классификация дроби numerator/denominator.

    Args:
        numerator: Числитель
        denominator: Ненулевой знаменатель

    Returns:
        PromotedFraction с заполненными unscaled/scale для конечной формы

    Raises:
        DivisionByZero: Если denominator == 0
        InternalInvariantViolation: Если вычисленный scale не делит нацело

    Examples:
        >>> promote_fraction(10, 20)
        PromotedFraction(numerator=1, denominator=2, unscaled=5, scale=1)
        >>> promote_fraction(1, 3)
        PromotedFraction(numerator=1, denominator=3, unscaled=None, scale=None)
    """
    numerator, denominator = reduce_fraction(numerator, denominator)

    rest, twos = strip_factor(denominator, 2)
    rest, fives = strip_factor(rest, 5)

    if rest != 1:
        return PromotedFraction(numerator, denominator)

    scale = twos + fives
    unscaled, remainder = divmod(numerator * pow10(scale), denominator)
    if remainder != 0:
        raise InternalInvariantViolation(
            f"Scale {scale} does not divide {numerator}/{denominator} exactly"
        )

    return PromotedFraction(numerator, denominator, unscaled, scale)
