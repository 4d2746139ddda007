"""
ExactNumber — Точные десятичные и рациональные значения

Закрытое объединение двух вариантов:
- Finite(unscaled, scale): значение unscaled / 10^scale, scale >= 0
- Ratio(numerator, denominator): несократимая дробь, denominator > 0

Все операции — функции модуля, диспетчеризуемые по паре вариантов.
Операторы Python на моделях (+ - * / == < ...) делегируют этим функциям.
Результат всегда в наиболее конкретной точной форме: Finite, если
десятичное разложение конечно, иначе Ratio.

Примеры:
    parse("12.34") + from_int(5)       -> 17.34
    parse("12.34") / parse("3")        -> 617/150
    fraction(10, 20)                   -> 0.5
    (parse("1") / parse("3")).half_up(2) -> 0.33

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модели immutable (frozen=True), каждая операция возвращает новый экземпляр
2. Сложение/умножение Finite никогда не округляют (scale только растёт)
3. Деление всегда идёт через точную дробь + promotion rule
4. Сравнение с участием Ratio — точное перекрёстное умножение, без float
5. == сравнивает значения; strict_equals — структуру
   (0.2 == 0.20, но не strict; 0.2 == 1/5, но не strict)
"""

import logging
from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer

from src.core.math.exceptions import DivisionByZero
from src.core.math.float_bridge import FloatConversionConfig, float_to_decimal_parts
from src.core.math.integer_ops import (
    fraction_hash,
    normalize_sign,
    pow10,
    reduce_fraction,
    truncated_divmod,
)
from src.core.math.promotion import promote_fraction
from src.core.math.rounding import (
    DEFAULT_ROUNDING_MODE,
    RoundingMode,
    rescale_fraction,
    rescale_unscaled,
)
from src.core.math.text_codec import (
    format_decimal,
    format_fraction,
    is_fraction_text,
    parse_decimal_text,
    parse_fraction_text,
)

logger = logging.getLogger(__name__)


# =============================================================================
# OPERATORS (общие для обоих вариантов)
# =============================================================================


class _ExactOperators(BaseModel):
    """
    Операторы Python поверх функций модуля.

    int-операнды (кроме bool) трактуются как Finite со scale 0,
    любые другие типы -> NotImplemented.
    """

    model_config = {"frozen": True}

    # Арифметика
    def __add__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else add(self, other)

    def __radd__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else add(other, self)

    def __sub__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else subtract(self, other)

    def __rsub__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else subtract(other, self)

    def __mul__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else multiply(self, other)

    def __rmul__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else multiply(other, self)

    def __truediv__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else divide(self, other)

    def __rtruediv__(self, other: Any) -> "ExactNumber":
        other = _coerce_operand(other)
        return NotImplemented if other is None else divide(other, self)

    def __neg__(self) -> "ExactNumber":
        return negate(self)

    def __pos__(self) -> "ExactNumber":
        return self

    def __abs__(self) -> "ExactNumber":
        return absolute(self)

    # Сравнение (по значению)
    def __eq__(self, other: object) -> bool:
        other = _coerce_operand(other)
        return NotImplemented if other is None else compare(self, other) == 0

    def __lt__(self, other: Any) -> bool:
        other = _coerce_operand(other)
        return NotImplemented if other is None else compare(self, other) < 0

    def __le__(self, other: Any) -> bool:
        other = _coerce_operand(other)
        return NotImplemented if other is None else compare(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        other = _coerce_operand(other)
        return NotImplemented if other is None else compare(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        other = _coerce_operand(other)
        return NotImplemented if other is None else compare(self, other) >= 0

    def __hash__(self) -> int:
        return fraction_hash(*as_fraction(self))

    # Конверсии
    def __bool__(self) -> bool:
        return not is_zero(self)

    def __int__(self) -> int:
        return to_int(self)

    def __float__(self) -> float:
        return to_float(self)

    def __str__(self) -> str:
        return to_string(self)

    # Методы
    def compare_to(self, other: "ExactNumber | int") -> int:
        """-1, 0 или 1 (по значению, scale и сокращение игнорируются)."""
        coerced = _coerce_operand(other)
        if coerced is None:
            raise TypeError(f"Cannot compare with {type(other).__name__}")
        return compare(self, coerced)

    def strict_equals(self, other: "ExactNumber") -> bool:
        """Структурное равенство (scale / numerator-denominator)."""
        return strict_equals(self, other)

    def with_scale(self, scale: int, mode: RoundingMode) -> "Finite":
        """Десятичное значение с заданным scale и режимом округления."""
        return with_scale(self, scale, mode)

    def half_up(self, scale: int) -> "Finite":
        """Сокращение для with_scale(scale, RoundingMode.HALF_UP)."""
        return with_scale(self, scale, RoundingMode.HALF_UP)

    def divide(
        self,
        other: "ExactNumber | int",
        scale: int | None = None,
        mode: RoundingMode | None = None,
    ) -> "ExactNumber":
        """Деление с опциональным округлением результата до scale."""
        coerced = _coerce_operand(other)
        if coerced is None:
            raise TypeError(f"Cannot divide by {type(other).__name__}")
        return divide(self, coerced, scale=scale, mode=mode)

    def to_ratio(self) -> "Ratio":
        """Точный Ratio-вид значения (сокращённый)."""
        return Ratio.of(*as_fraction(self))

    def as_fraction(self) -> tuple[int, int]:
        """(numerator, denominator) без сокращения."""
        return as_fraction(self)

    def is_zero(self) -> bool:
        return is_zero(self)

    def to_int(self) -> int:
        """Целая часть с усечением к нулю."""
        return to_int(self)

    def to_float(self) -> float:
        """Ближайший float (lossy)."""
        return to_float(self)


# =============================================================================
# VARIANTS
# =============================================================================


class Finite(_ExactOperators):
    """
    Десятичное число фиксированного scale.

    Хвостовые нули сохраняются структурно: 0.20 и 0.2 — разные экземпляры
    (scale 2 и 1), численно равные.
    """

    kind: Literal["finite"] = "finite"
    unscaled: int = Field(..., strict=True, description="Unscaled значение (со знаком)")
    scale: int = Field(0, ge=0, strict=True, description="Цифр после десятичной точки")

    @classmethod
    def of(cls, unscaled: int, scale: int = 0) -> "Finite":
        return cls(unscaled=unscaled, scale=scale)

    @classmethod
    def from_int(cls, value: int) -> "Finite":
        return cls(unscaled=value, scale=0)

    @classmethod
    def parse(cls, text: str) -> "ExactNumber":
        """
        Парсинг строки; 'num/den' даёт Ratio.

        Examples:
            "-0.2000" -> -0.2000
            ".0"      -> 0.0
            "1/3"     -> 1/3
        """
        return parse(text)

    @classmethod
    def fraction(cls, numerator: int, denominator: int) -> "ExactNumber":
        """Promotion rule: Finite для 2^a*5^b знаменателей, иначе Ratio."""
        return fraction(numerator, denominator)

    @classmethod
    def from_float(
        cls,
        value: float,
        scale: int | None = None,
        mode: RoundingMode | None = None,
        config: FloatConversionConfig | None = None,
    ) -> "Finite":
        return from_float(value, scale=scale, mode=mode, config=config)


class Ratio(_ExactOperators):
    """
    Рациональное число numerator / denominator.

    Знак хранится в числителе. Через Ratio.of(..., reduce=False) можно
    получить несокращённую дробь: она равна сокращённой по ==,
    но не по strict_equals.
    """

    kind: Literal["ratio"] = "ratio"
    numerator: int = Field(..., strict=True, description="Числитель (со знаком)")
    denominator: int = Field(..., gt=0, strict=True, description="Знаменатель (> 0)")

    @classmethod
    def of(cls, numerator: int, denominator: int, reduce: bool = True) -> "Ratio":
        """
        Дробь numerator / denominator без promotion.

        Args:
            numerator: Числитель
            denominator: Ненулевой знаменатель
            reduce: Сокращать по GCD (default: True)

        Raises:
            DivisionByZero: Если denominator == 0

        Examples:
            Ratio.of(10, 20)               -> 1/2
            Ratio.of(1, -3)                -> -1/3
            Ratio.of(2, 6, reduce=False)   -> 2/6
        """
        if reduce:
            numerator, denominator = reduce_fraction(numerator, denominator)
        else:
            numerator, denominator = normalize_sign(numerator, denominator)
        return cls(numerator=numerator, denominator=denominator)

    @classmethod
    def parse(cls, text: str, reduce: bool = True) -> "Ratio":
        """Парсинг 'num/den' (пробелы вокруг '/' допустимы)."""
        numerator, denominator = parse_fraction_text(text)
        return cls.of(numerator, denominator, reduce=reduce)


ExactNumber = Annotated[Union[Finite, Ratio], Field(discriminator="kind")]

# Глобальные константы (immutable, создаются один раз при импорте)
ZERO: Final[Finite] = Finite(unscaled=0, scale=0)
ONE: Final[Finite] = Finite(unscaled=1, scale=0)


def _coerce_operand(value: Any) -> Finite | Ratio | None:
    if isinstance(value, (Finite, Ratio)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Finite(unscaled=value, scale=0)
    return None


# =============================================================================
# CONSTRUCTION
# =============================================================================


def from_int(value: int) -> Finite:
    return Finite(unscaled=value, scale=0)


def fraction(numerator: int, denominator: int) -> Finite | Ratio:
    """
    Точное значение дроби в наиболее конкретной форме.

    Args:
        numerator: Числитель
        denominator: Ненулевой знаменатель

    Returns:
        Finite с минимально достаточным scale, если знаменатель после
        сокращения вида 2^a * 5^b; иначе сокращённый Ratio

    Raises:
        DivisionByZero: Если denominator == 0

    Examples:
        >>> str(fraction(1, 3))
        '1/3'
        >>> str(fraction(10, 20))
        '0.5'
    """
    promoted = promote_fraction(numerator, denominator)
    if promoted.is_terminating:
        return Finite(unscaled=promoted.unscaled, scale=promoted.scale)
    return Ratio(numerator=promoted.numerator, denominator=promoted.denominator)


def parse(text: str) -> Finite | Ratio:
    """
    Парсинг канонической строки.

    Десятичная запись -> Finite с scale по числу дробных цифр,
    запись 'num/den' -> сокращённый Ratio (без promotion).

    Raises:
        FormatError: Некорректная строка
        DivisionByZero: Нулевой знаменатель в 'num/den'
    """
    if is_fraction_text(text):
        return Ratio.parse(text)
    unscaled, scale = parse_decimal_text(text)
    return Finite(unscaled=unscaled, scale=scale)


def from_float(
    value: float,
    scale: int | None = None,
    mode: RoundingMode | None = None,
    config: FloatConversionConfig | None = None,
) -> Finite:
    """
    Lossy конверсия float -> Finite через shortest round-trip текст.

    Args:
        value: Конечный float
        scale: Целевой scale (опционально)
        mode: Режим округления для scale (default: DEFAULT_ROUNDING_MODE)
        config: Политика обрезки хвостовых нулей

    Raises:
        FormatError: Если value NaN/Inf
        RoundingRequired: Если mode == UNNECESSARY и scale недостаточен
        ValueError: Если mode задан без scale

    Examples:
        0.234  -> "0.234"
        0.0    -> "0.0"
        0.234, scale=10, mode=UNNECESSARY -> "0.2340000000"
    """
    if mode is not None and scale is None:
        raise ValueError("Rounding mode requires a target scale")

    unscaled, parsed_scale = float_to_decimal_parts(value, config)
    result = Finite(unscaled=unscaled, scale=parsed_scale)
    if scale is None:
        return result
    return with_scale(result, scale, mode or DEFAULT_ROUNDING_MODE)


# =============================================================================
# VIEWS & CONVERSIONS
# =============================================================================


def as_fraction(value: Finite | Ratio) -> tuple[int, int]:
    """Дробный вид: (unscaled, 10^scale) для Finite, (n, d) для Ratio."""
    if isinstance(value, Ratio):
        return value.numerator, value.denominator
    return value.unscaled, pow10(value.scale)


def is_zero(value: Finite | Ratio) -> bool:
    if isinstance(value, Ratio):
        return value.numerator == 0
    return value.unscaled == 0


def to_int(value: Finite | Ratio) -> int:
    """Усечение к нулю: 2.7 -> 2, -2.7 -> -2."""
    return truncated_divmod(*as_fraction(value))[0]


def to_float(value: Finite | Ratio) -> float:
    """
    Ближайший float (корректно округлённое int / int деление).

    Raises:
        OverflowError: Если значение вне диапазона float
    """
    numerator, denominator = as_fraction(value)
    result = numerator / denominator
    logger.debug("Lossy conversion of %s to float %r", value, result)
    return result


def to_string(value: Finite | Ratio) -> str:
    """Каноническая строка: '-0.2000' для Finite, '-1/3' для Ratio."""
    if isinstance(value, Ratio):
        return format_fraction(value.numerator, value.denominator)
    return format_decimal(value.unscaled, value.scale)


# =============================================================================
# ARITHMETIC
# =============================================================================


def _aligned(a: Finite, b: Finite) -> tuple[int, int, int]:
    """Unscaled значения a и b, приведённые к max(scale)."""
    scale = max(a.scale, b.scale)
    return (
        a.unscaled * pow10(scale - a.scale),
        b.unscaled * pow10(scale - b.scale),
        scale,
    )


def add(a: Finite | Ratio, b: Finite | Ratio) -> Finite | Ratio:
    """
    Сумма a + b.

    Finite + Finite: выравнивание scale, без округления.
    С участием Ratio: (n1*d2 + n2*d1) / (d1*d2) -> promotion rule.
    """
    if isinstance(a, Finite) and isinstance(b, Finite):
        x, y, scale = _aligned(a, b)
        return Finite(unscaled=x + y, scale=scale)

    n1, d1 = as_fraction(a)
    n2, d2 = as_fraction(b)
    return fraction(n1 * d2 + n2 * d1, d1 * d2)


def subtract(a: Finite | Ratio, b: Finite | Ratio) -> Finite | Ratio:
    """Разность a - b (для Ratio — сумма с отрицанием)."""
    if isinstance(a, Finite) and isinstance(b, Finite):
        x, y, scale = _aligned(a, b)
        return Finite(unscaled=x - y, scale=scale)
    return add(a, negate(b))


def multiply(a: Finite | Ratio, b: Finite | Ratio) -> Finite | Ratio:
    """
    Произведение a * b.

    Finite * Finite: произведение unscaled, сумма scale (0.20 * 0.5 = 0.100).
    С участием Ratio: n1*n2 / (d1*d2) -> promotion rule.
    """
    if isinstance(a, Finite) and isinstance(b, Finite):
        return Finite(unscaled=a.unscaled * b.unscaled, scale=a.scale + b.scale)

    n1, d1 = as_fraction(a)
    n2, d2 = as_fraction(b)
    return fraction(n1 * n2, d1 * d2)


def divide(
    a: Finite | Ratio,
    b: Finite | Ratio,
    scale: int | None = None,
    mode: RoundingMode | None = None,
) -> Finite | Ratio:
    """
    Частное a / b, всегда через точную дробь.

    Args:
        a: Делимое
        b: Делитель
        scale: Если задан, результат округляется до scale
        mode: Режим округления (default: DEFAULT_ROUNDING_MODE)

    Returns:
        Finite если частное имеет конечное десятичное разложение, иначе Ratio
        (или Finite со scale, если scale задан)

    Raises:
        DivisionByZero: Если b == 0 (в любом представлении)
        ValueError: Если mode задан без scale

    Examples:
        10 / 4 -> 2.5
        1 / 3  -> 1/3
        1 / 8  -> 0.125
    """
    if mode is not None and scale is None:
        raise ValueError("Rounding mode requires a target scale")
    if is_zero(b):
        raise DivisionByZero(f"Division of {to_string(a)} by zero")

    n1, d1 = as_fraction(a)
    n2, d2 = as_fraction(b)
    result = fraction(n1 * d2, d1 * n2)

    if scale is None:
        return result
    return with_scale(result, scale, mode or DEFAULT_ROUNDING_MODE)


def negate(value: Finite | Ratio) -> Finite | Ratio:
    """Отрицание; scale и состояние сокращения сохраняются."""
    if isinstance(value, Ratio):
        return Ratio(numerator=-value.numerator, denominator=value.denominator)
    return Finite(unscaled=-value.unscaled, scale=value.scale)


def absolute(value: Finite | Ratio) -> Finite | Ratio:
    """Модуль; неотрицательное значение возвращается как есть."""
    if isinstance(value, Ratio):
        if value.numerator >= 0:
            return value
        return Ratio(numerator=-value.numerator, denominator=value.denominator)
    if value.unscaled >= 0:
        return value
    return Finite(unscaled=-value.unscaled, scale=value.scale)


# =============================================================================
# COMPARISON
# =============================================================================


def compare(a: Finite | Ratio, b: Finite | Ratio) -> int:
    """
    Упорядочивание по значению: -1, 0, 1.

    Finite vs Finite: выравнивание scale.
    С участием Ratio: перекрёстное умножение n1*d2 vs n2*d1 (точно).
    """
    if isinstance(a, Finite) and isinstance(b, Finite):
        x, y, _ = _aligned(a, b)
    else:
        n1, d1 = as_fraction(a)
        n2, d2 = as_fraction(b)
        x, y = n1 * d2, n2 * d1
    return (x > y) - (x < y)


def strict_equals(a: Finite | Ratio, b: Finite | Ratio) -> bool:
    """
    Структурное равенство.

    Finite: одинаковые unscaled и scale. Ratio: одинаковые numerator и
    denominator. Finite и Ratio никогда не равны структурно.
    """
    if isinstance(a, Finite) and isinstance(b, Finite):
        return a.unscaled == b.unscaled and a.scale == b.scale
    if isinstance(a, Ratio) and isinstance(b, Ratio):
        return a.numerator == b.numerator and a.denominator == b.denominator
    return False


# =============================================================================
# ROUNDING
# =============================================================================


def with_scale(value: Finite | Ratio, scale: int, mode: RoundingMode) -> Finite:
    """
    Десятичное значение с заданным scale.

    Finite: увеличение scale точное, уменьшение — по режиму mode.
    Ratio: точное long-division округление numerator * 10^scale / denominator.

    Args:
        value: Исходное значение
        scale: Целевой scale (>= 0)
        mode: Режим округления

    Raises:
        ValueError: Если scale отрицательный или mode неизвестен
        RoundingRequired: Если mode == UNNECESSARY и нужно округление

    Examples:
        0.12345, 4, HALF_EVEN -> 0.1234
        1/3, 2, HALF_UP       -> 0.33
    """
    mode = RoundingMode(mode)

    if isinstance(value, Ratio):
        unscaled = rescale_fraction(value.numerator, value.denominator, scale, mode)
        return Finite(unscaled=unscaled, scale=scale)

    if scale == value.scale:
        return value
    unscaled = rescale_unscaled(value.unscaled, value.scale, scale, mode)
    return Finite(unscaled=unscaled, scale=scale)


# =============================================================================
# PYDANTIC FIELD TYPE
# =============================================================================


def _coerce_field_input(value: Any) -> Any:
    """Строки и int -> ExactNumber; остальное валидирует pydantic."""
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return from_int(value)
    return value


# Поле для pydantic моделей: принимает ExactNumber, каноническую строку или int
# (float отклоняется), в JSON сериализуется канонической строкой
ExactNumberField = Annotated[
    Union[Finite, Ratio],
    BeforeValidator(_coerce_field_input),
    PlainSerializer(to_string, return_type=str, when_used="json"),
]
