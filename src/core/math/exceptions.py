"""
Exceptions — Типизированные ошибки exact-арифметики

Все ошибки синхронные и пробрасываются вызывающему коду без восстановления.
Каждый класс наследует общий ExactArithmeticError и ближайший встроенный тип,
чтобы вызывающий код мог ловить как доменную, так и стандартную ошибку.
"""


class ExactArithmeticError(Exception):
    """Базовый класс всех ошибок exact-арифметики."""

    pass


class FormatError(ExactArithmeticError, ValueError):
    """
    Некорректный входной текст.

    Возникает только при парсинге:
    - пустая строка
    - больше одной десятичной точки или больше одного '/'
    - сегмент, не являющийся целым числом
    - NaN/Inf при конверсии из float
    """

    pass


class DivisionByZero(ExactArithmeticError, ZeroDivisionError):
    """
    Делитель (или знаменатель дроби) точно равен нулю.

    Проверяется до начала деления, независимо от представления (Finite/Ratio).
    """

    pass


class RoundingRequired(ExactArithmeticError, ArithmeticError):
    """
    Режим UNNECESSARY, но значение не представимо точно в целевом scale.
    """

    pass


class InternalInvariantViolation(ExactArithmeticError, RuntimeError):
    """
    Нарушение внутреннего инварианта promotion rule.

    Сигнал дефекта в коде (scale не делит числитель нацело),
    а не восстанавливаемое состояние.
    """

    pass
