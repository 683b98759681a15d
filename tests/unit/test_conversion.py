"""
Тесты для модуля Conversion

Проверяет:
1. Lenient числовые конверсии (0 при неудаче)
2. Строгую булеву конверсию
3. Enum конверсию с default
4. Typed split (атомарность ошибки конверсии)
5. Null/empty хелперы
"""

from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from src.core.text.conversion import (
    DECIMAL_MAX,
    INT16_MAX,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    get_default_if_empty,
    get_empty_string_if_null,
    get_null_if_empty_string,
    parse_invariant_number,
    split_to,
    to_boolean,
    to_decimal,
    to_enum,
    to_int16,
    to_int32,
    to_int64,
)
from src.core.text.errors import ConversionError, InvalidArgumentError


class Color(str, Enum):
    RED = "red"
    DARK_BLUE = "dark-blue"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


# =============================================================================
# ЧИСЛОВЫЕ КОНВЕРСИИ
# =============================================================================


class TestToInt:
    """Тесты для to_int16 / to_int32 / to_int64"""

    def test_valid_integers(self) -> None:
        """Корректные целые конвертируются"""
        assert to_int32("42") == 42
        assert to_int32("-17") == -17
        assert to_int32("+5") == 5
        assert to_int32("  12  ") == 12

    def test_invalid_returns_zero(self) -> None:
        """Невалидный ввод → 0 без исключения"""
        assert to_int32(None) == 0
        assert to_int32("") == 0
        assert to_int32("abc") == 0
        assert to_int32("1.5") == 0
        assert to_int32("1_000") == 0
        assert to_int32("1 2") == 0

    def test_range_bounds(self) -> None:
        """Граница диапазона включительная, выход за неё → 0"""
        assert to_int16(str(INT16_MAX)) == INT16_MAX
        assert to_int16(str(INT16_MAX + 1)) == 0
        assert to_int32(str(INT32_MIN)) == INT32_MIN
        assert to_int32(str(INT32_MAX + 1)) == 0
        assert to_int64(str(INT64_MAX)) == INT64_MAX
        assert to_int64(str(INT64_MAX + 1)) == 0

    def test_wider_types_accept_larger_values(self) -> None:
        """int64 принимает значения вне int32"""
        big = str(INT32_MAX + 1)
        assert to_int32(big) == 0
        assert to_int64(big) == INT32_MAX + 1


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_plain_and_grouped(self) -> None:
        assert to_decimal("12.50") == Decimal("12.50")
        assert to_decimal("-1,234.5") == Decimal("-1234.5")
        assert to_decimal(".5") == Decimal("0.5")

    def test_invalid_returns_zero(self) -> None:
        assert to_decimal(None) == Decimal(0)
        assert to_decimal("12,34") == Decimal(0)
        assert to_decimal("1e3") == Decimal(0)
        assert to_decimal("NaN") == Decimal(0)

    def test_trailing_sign(self) -> None:
        assert to_decimal("3-") == Decimal(-3)
        assert to_decimal("1,234.5-") == Decimal("-1234.5")
        assert to_decimal(" 7+ ") == Decimal(7)
        assert to_decimal("-3-") == Decimal(0)

    def test_parentheses_not_accepted(self) -> None:
        assert to_decimal("(3)") == Decimal(0)
        assert to_decimal("(1,234.5)") == Decimal(0)

    def test_out_of_range_returns_zero(self) -> None:
        assert to_decimal(str(DECIMAL_MAX)) == DECIMAL_MAX
        assert to_decimal("-" + str(DECIMAL_MAX)) == DECIMAL_MAX.copy_negate()
        assert to_decimal("79228162514264337593543950336") == Decimal(0)


class TestParseInvariantNumber:
    """Тесты для parse_invariant_number"""

    def test_exponent(self) -> None:
        assert parse_invariant_number("1.5e3") == Decimal(1500)
        assert parse_invariant_number("1.5e3", allow_exponent=False) is None

    def test_parentheses_negative(self) -> None:
        assert parse_invariant_number("(3)") == Decimal(-3)
        assert parse_invariant_number("(3") is None
        assert parse_invariant_number("(-3)") is None

    def test_parentheses_can_be_disabled(self) -> None:
        assert parse_invariant_number("(3)", allow_parentheses=False) is None
        assert parse_invariant_number("3", allow_parentheses=False) == Decimal(3)

    def test_trailing_sign_opt_in(self) -> None:
        assert parse_invariant_number("3-") is None
        assert parse_invariant_number("3-", allow_trailing_sign=True) == Decimal(-3)
        assert parse_invariant_number("(3-)", allow_trailing_sign=True) is None
        assert parse_invariant_number("+3-", allow_trailing_sign=True) is None

    def test_requires_digit(self) -> None:
        for text in ("", ".", "+", "-", "e5", ","):
            assert parse_invariant_number(text) is None


# =============================================================================
# BOOLEAN
# =============================================================================


class TestToBoolean:
    """Тесты для to_boolean"""

    @pytest.mark.parametrize("token", ["true", "TRUE", " t ", "Yes", "y", "\tY\n"])
    def test_true_tokens(self, token: str) -> None:
        assert to_boolean(token) is True

    @pytest.mark.parametrize("token", ["false", "False", " f", "NO", "n "])
    def test_false_tokens(self, token: str) -> None:
        assert to_boolean(token) is False

    @pytest.mark.parametrize("token", ["1", "0", "maybe", "yess", "on"])
    def test_unknown_token_raises(self, token: str) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid boolean"):
            to_boolean(token)

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_empty_raises(self, token) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_boolean(token)
        assert exc_info.value.param_name == "value"

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgumentError совместим с ValueError"""
        with pytest.raises(ValueError):
            to_boolean("nope")


# =============================================================================
# ENUM
# =============================================================================


class TestToEnum:
    """Тесты для to_enum"""

    def test_name_case_insensitive(self) -> None:
        assert to_enum("red", Color) is Color.RED
        assert to_enum(" Dark_Blue ", Color) is Color.DARK_BLUE

    def test_string_value_match(self) -> None:
        assert to_enum("DARK-BLUE", Color) is Color.DARK_BLUE

    def test_integer_value_match(self) -> None:
        assert to_enum("2", Priority) is Priority.HIGH

    def test_no_match_returns_default(self) -> None:
        assert to_enum("green", Color) is None
        assert to_enum("green", Color, default=Color.RED) is Color.RED
        assert to_enum("7", Priority, default=Priority.LOW) is Priority.LOW
        assert to_enum(None, Color, default=Color.RED) is Color.RED

    def test_non_enum_type_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_enum("x", str)
        assert exc_info.value.param_name == "enum_type"


# =============================================================================
# TYPED SPLIT
# =============================================================================


class TestSplitTo:
    """Тесты для split_to"""

    def test_split_ints(self) -> None:
        assert split_to("1,2,3", int, ",") == [1, 2, 3]

    def test_multiple_separators(self) -> None:
        assert split_to("1;2|3", int, ";", "|") == [1, 2, 3]

    def test_whitespace_default_separator(self) -> None:
        assert split_to("a b\tc", str) == ["a", "b", "c"]

    def test_remove_empty(self) -> None:
        assert split_to("a;;b", str, ";") == ["a", "", "b"]
        assert split_to("a;;b", str, ";", remove_empty=True) == ["a", "b"]

    def test_decimal_float_bool(self) -> None:
        assert split_to("1.5|2", Decimal, "|") == [Decimal("1.5"), Decimal(2)]
        assert split_to("1.5-|2", Decimal, "|") == [Decimal("-1.5"), Decimal(2)]
        assert split_to("1.5|2e1", float, "|") == [1.5, 20.0]
        assert split_to("yes,no", bool, ",") == [True, False]

    def test_bad_segment_fails_whole_call(self) -> None:
        with pytest.raises(ConversionError, match="'x'"):
            split_to("1,x,3", int, ",")

    def test_empty_segment_fails_conversion(self) -> None:
        with pytest.raises(ConversionError):
            split_to("1,,3", int, ",")

    def test_unsupported_target(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            split_to("1,2", complex, ",")
        assert exc_info.value.param_name == "target"

    def test_multi_char_separator_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="single character"):
            split_to("1::2", int, "::")

    def test_none_value_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            split_to(None, int, ",")


# =============================================================================
# NULL/EMPTY ХЕЛПЕРЫ
# =============================================================================


class TestNullEmptyHelpers:
    """Тесты для get_*_if_* хелперов"""

    def test_get_empty_string_if_null(self) -> None:
        assert get_empty_string_if_null(None) == ""
        assert get_empty_string_if_null("  x ") == "x"

    def test_get_null_if_empty_string(self) -> None:
        assert get_null_if_empty_string(None) is None
        assert get_null_if_empty_string("") is None
        assert get_null_if_empty_string("   ") is None
        assert get_null_if_empty_string(" x ") == "x"

    def test_get_default_if_empty(self) -> None:
        assert get_default_if_empty(None, "d") == "d"
        assert get_default_if_empty("  ", "d") == "d"
        assert get_default_if_empty(" v ", "d") == "v"
