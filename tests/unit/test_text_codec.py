"""
Тесты для Text Codec — парсинг и форматирование

Проверяет:
1. Восстановление точного scale из числа дробных цифр
2. Синтез ведущего '0', пустые сегменты, знаки
3. Рациональную форму 'num/den' с пробелами
4. FormatError для некорректного ввода
5. Round-trip format(parse(s))
"""

import pytest

from src.core.math.exceptions import DivisionByZero, FormatError
from src.core.math.text_codec import (
    format_decimal,
    format_fraction,
    is_fraction_text,
    parse_decimal_text,
    parse_fraction_text,
)


class TestParseDecimal:
    """Тесты parse_decimal_text"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2", (2, 0)),
            ("0.2", (2, 1)),
            (".2", (2, 1)),
            ("-.2", (-2, 1)),
            ("-0.2000", (-2000, 4)),
            ("+.2000", (2000, 4)),
            (".0", (0, 1)),
            ("1.", (1, 0)),
            ("-0.", (0, 0)),
            (".", (0, 0)),
            ("+.230", (230, 3)),
            ("  12.50  ", (1250, 2)),
            ("007.10", (710, 2)),
        ],
    )
    def test_valid_inputs(self, text, expected) -> None:
        assert parse_decimal_text(text) == expected

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_rejected(self, text) -> None:
        with pytest.raises(FormatError, match="Empty"):
            parse_decimal_text(text)

    @pytest.mark.parametrize("text", ["1.2.3", "..", "1..2"])
    def test_multiple_points_rejected(self, text) -> None:
        with pytest.raises(FormatError, match="Invalid decimal format"):
            parse_decimal_text(text)

    @pytest.mark.parametrize("text", ["abc", "1a", "+-1", "1.2e5", "1 000", "١٢"])
    def test_non_digits_rejected(self, text) -> None:
        with pytest.raises(FormatError):
            parse_decimal_text(text)

    def test_format_error_is_value_error(self) -> None:
        """FormatError совместим с ValueError"""
        with pytest.raises(ValueError):
            parse_decimal_text("x")


class TestParseFraction:
    """Тесты parse_fraction_text"""

    def test_basic(self) -> None:
        assert parse_fraction_text("1/3") == (1, 3)
        assert parse_fraction_text("-1/3") == (-1, 3)

    def test_whitespace_around_operands(self) -> None:
        assert parse_fraction_text("  4  /  -8  ") == (-4, 8)

    def test_not_reduced(self) -> None:
        assert parse_fraction_text("2/6") == (2, 6)

    def test_zero_denominator(self) -> None:
        with pytest.raises(DivisionByZero):
            parse_fraction_text("1/0")

    @pytest.mark.parametrize("text", ["1/2/3", "/3", "1/", "1.5/2", "a/b", "1/ +"])
    def test_invalid_rejected(self, text) -> None:
        with pytest.raises(FormatError, match="Invalid fraction format"):
            parse_fraction_text(text)

    def test_detection(self) -> None:
        assert is_fraction_text("1/3")
        assert not is_fraction_text("0.33")


class TestFormat:
    """Тесты format_decimal / format_fraction"""

    @pytest.mark.parametrize(
        "unscaled,scale,expected",
        [
            (2, 0, "2"),
            (-2000, 4, "-0.2000"),
            (0, 1, "0.0"),
            (-25, 2, "-0.25"),
            (230, 3, "0.230"),
            (12345, 2, "123.45"),
            (5, 4, "0.0005"),
            (-75, 0, "-75"),
            (0, 0, "0"),
        ],
    )
    def test_format_decimal(self, unscaled, scale, expected) -> None:
        assert format_decimal(unscaled, scale) == expected

    def test_format_fraction(self) -> None:
        assert format_fraction(-25, 6) == "-25/6"


class TestRoundTrip:
    """Инвариант: format(parse(s)) сохраняет знак, цифры и scale."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("-0.2000", "-0.2000"),
            (".0", "0.0"),
            ("1.", "1"),
            ("-0.", "0"),
            ("+.230", "0.230"),
            ("-.25", "-0.25"),
            ("123456789012345678901234567890.000000000000000000001", "123456789012345678901234567890.000000000000000000001"),
        ],
    )
    def test_round_trip(self, text, expected) -> None:
        assert format_decimal(*parse_decimal_text(text)) == expected

    @pytest.mark.parametrize("text", ["0", "-1.5", "100.00", "0.001", "-42"])
    def test_canonical_is_fixed_point(self, text) -> None:
        """Каноническая строка парсится и форматируется в себя"""
        assert format_decimal(*parse_decimal_text(text)) == text
