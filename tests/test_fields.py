"""Tests for IntegerField and CurrencyField state and value accessors."""

from __future__ import annotations

from decimal import Decimal

import pytest

from numeric_fields.errors import CurrencyParseError, FieldOverflowError, InvalidArgumentError
from numeric_fields.fields import CurrencyField, IntegerField
from numeric_fields.models import CurrencyFieldConfig, IntegerFieldConfig
from numeric_fields.symbols import CurrencySymbol


class TestIntegerFieldConstruction:
    """Tests for IntegerField construction."""

    def test_empty_by_default(self):
        """A new field starts empty."""
        assert IntegerField().text == ""

    def test_from_text(self):
        """Valid initial text is kept."""
        assert IntegerField("-42").text == "-42"

    def test_from_int(self):
        """An int initial value is written as text."""
        assert IntegerField(42).text == "42"

    def test_non_integer_text_rejected(self):
        """Non-integer initial text raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            IntegerField("12a")

    def test_negative_text_rejected_when_unsigned(self, unsigned_config):
        """Negative text is rejected by an unsigned field."""
        with pytest.raises(InvalidArgumentError):
            IntegerField("-5", unsigned_config)

    def test_negative_int_rejected_when_unsigned(self, unsigned_config):
        """A negative int is rejected by an unsigned field."""
        with pytest.raises(InvalidArgumentError):
            IntegerField(-5, unsigned_config)


class TestIntegerFieldEdits:
    """Tests for edits applied to an IntegerField."""

    def test_apply_edit_filters(self):
        """Edits are filtered and stored."""
        field = IntegerField("12")
        accepted = field.apply_edit("12a3")
        assert accepted.text == "123"
        assert field.text == "123"

    def test_disallowing_negatives_strips_sign(self):
        """Turning off negatives removes the leading minus."""
        field = IntegerField("-12")
        field.allows_negative = False
        assert field.text == "12"
        assert not field.allows_negative

    def test_allowing_negatives_keeps_text(self):
        """Turning on negatives leaves the text alone."""
        field = IntegerField("12")
        field.allows_negative = True
        assert field.text == "12"

    def test_max_digits_truncates_current_text(self):
        """Lowering max_digits truncates the current text."""
        field = IntegerField("-12345")
        field.max_digits = 3
        assert field.text == "-123"
        assert field.max_digits == 3

    def test_is_negative(self):
        """is_negative reports a leading minus."""
        assert IntegerField("-1").is_negative()
        assert not IntegerField("1").is_negative()


class TestIntegerFieldValues:
    """Tests for IntegerField value getters and setters."""

    def test_empty_reads_zero(self):
        """Empty text reads as zero at every width."""
        field = IntegerField()
        assert field.get_int() == 0
        assert field.get_long() == 0
        assert field.get_big_int() == 0

    def test_lone_minus_reads_zero(self):
        """A lone minus reads as zero."""
        assert IntegerField("-").get_int() == 0

    def test_int_bounds(self):
        """The 32-bit extremes read back exactly."""
        assert IntegerField(str(2**31 - 1)).get_int() == 2**31 - 1
        assert IntegerField(str(-(2**31))).get_int() == -(2**31)

    def test_int_overflow(self):
        """Values just outside 32 bits overflow."""
        with pytest.raises(FieldOverflowError):
            IntegerField(str(2**31)).get_int()
        with pytest.raises(FieldOverflowError):
            IntegerField(str(-(2**31) - 1)).get_int()

    def test_long_overflow(self):
        """Values past 64 bits overflow get_long but not get_big_int."""
        field = IntegerField(str(2**63))
        with pytest.raises(FieldOverflowError):
            field.get_long()
        assert field.get_big_int() == 2**63

    def test_overflow_leaves_text(self):
        """An overflowing read leaves the text alone."""
        field = IntegerField(str(2**40))
        with pytest.raises(OverflowError):
            field.get_int()
        assert field.get_long() == 2**40
        assert field.text == str(2**40)

    def test_set_int(self):
        """set_int writes the value as text."""
        field = IntegerField()
        field.set_int(-42)
        assert field.text == "-42"
        assert field.get_int() == -42

    def test_set_int_out_of_range(self):
        """set_int rejects values outside 32 bits; set_long takes them."""
        field = IntegerField("7")
        with pytest.raises(InvalidArgumentError):
            field.set_int(2**31)
        assert field.text == "7"
        field.set_long(2**31)
        assert field.get_long() == 2**31

    def test_set_negative_when_unsigned(self, unsigned_config):
        """Negative values are rejected by an unsigned field."""
        field = IntegerField("7", unsigned_config)
        with pytest.raises(InvalidArgumentError):
            field.set_int(-3)
        with pytest.raises(ValueError):
            field.set_big_int(-(10**30))
        assert field.text == "7"

    def test_set_rejects_too_many_digits(self):
        """Value setters reject values longer than max_digits."""
        field = IntegerField("7", IntegerFieldConfig(max_digits=3))
        with pytest.raises(InvalidArgumentError):
            field.set_int(12345)
        with pytest.raises(InvalidArgumentError):
            field.set_big_int(-1000)
        assert field.text == "7"
        field.set_int(-999)
        assert field.text == "-999"

    def test_read_beyond_int_conversion_limit(self):
        """A 5000-digit value reads as a big int and overflows the fixed widths."""
        field = IntegerField()
        field.apply_edit("9" * 5000)
        assert field.get_big_int() == 10**5000 - 1
        with pytest.raises(FieldOverflowError):
            field.get_int()
        with pytest.raises(FieldOverflowError):
            field.get_long()

    def test_negative_read_beyond_int_conversion_limit(self):
        """A long negative value reads back exactly."""
        field = IntegerField()
        field.apply_edit("-" + "1" * 4500)
        assert field.get_big_int() == -((10**4500 - 1) // 9)
        with pytest.raises(FieldOverflowError):
            field.get_long()

    def test_leading_zeros_still_fit(self):
        """Leading zeros do not count toward the width check."""
        assert IntegerField("0000000000042").get_int() == 42

    def test_set_big_int_beyond_int_conversion_limit(self):
        """set_big_int writes values past the int/str digit limit."""
        field = IntegerField()
        field.set_big_int(10**5000)
        assert len(field.text) == 5001
        assert field.text.startswith("10")
        assert field.get_big_int() == 10**5000


class TestIntegerFieldBounds:
    """Tests for the min/max value restrictions."""

    def test_min_value(self):
        """Values below the minimum are rejected."""
        field = IntegerField()
        field.set_min_value(0)
        with pytest.raises(InvalidArgumentError):
            field.set_int(-1)
        field.set_int(0)
        assert field.text == "0"

    def test_max_value(self):
        """Values above the maximum are rejected until it is cleared."""
        field = IntegerField()
        field.set_max_value(10)
        with pytest.raises(InvalidArgumentError):
            field.set_int(11)
        field.clear_max_value()
        field.set_int(11)
        assert field.text == "11"

    def test_min_above_max_rejected(self):
        """A minimum above the maximum is rejected."""
        field = IntegerField()
        field.set_max_value(10)
        with pytest.raises(InvalidArgumentError):
            field.set_min_value(20)

    def test_clear_min_value(self):
        """Clearing the minimum accepts smaller values again."""
        field = IntegerField()
        field.set_min_value(5)
        field.clear_min_value()
        field.set_int(1)
        assert field.get_int() == 1

    def test_digit_limit_cannot_bypass_min_value(self):
        """A value that would truncate below the minimum is rejected."""
        field = IntegerField("5", IntegerFieldConfig(max_digits=2))
        field.set_min_value(100)
        with pytest.raises(InvalidArgumentError):
            field.set_int(150)
        assert field.text == "5"

    def test_digit_limit_cannot_bypass_max_value(self):
        """A value that would truncate under the maximum is still rejected."""
        field = IntegerField("5", IntegerFieldConfig(max_digits=2))
        field.set_max_value(20)
        with pytest.raises(InvalidArgumentError):
            field.set_int(999)
        assert field.text == "5"


class TestCurrencyFieldConstruction:
    """Tests for CurrencyField construction."""

    def test_default_symbol(self):
        """The default symbol is ANY_OR_NONE."""
        assert CurrencyField().symbol == CurrencySymbol.ANY_OR_NONE

    def test_initial_text_is_completed(self, dollars_config):
        """Initial text is completed like a paste."""
        assert CurrencyField("42", dollars_config).text == "$42.00"

    def test_invalid_text_rejected(self, dollars_config):
        """Initial text outside the grammar is rejected."""
        with pytest.raises(InvalidArgumentError):
            CurrencyField("abc", dollars_config)

    def test_wrong_delimiter_rejected(self, euro_config):
        """Initial text with the wrong delimiter is rejected."""
        with pytest.raises(InvalidArgumentError):
            CurrencyField("€1.50", euro_config)

    def test_invalid_digit_limit_rejected(self):
        """A digit limit below -1 is rejected."""
        with pytest.raises(InvalidArgumentError):
            CurrencyField(config=CurrencyFieldConfig(max_dollar_digits=-5))


class TestCurrencyFieldEdits:
    """Tests for edits and completion in a CurrencyField."""

    def test_typing_then_focus_lost(self, dollars_config):
        """Typed text is completed when focus is lost."""
        field = CurrencyField(config=dollars_config)
        field.apply_edit(".")
        field.apply_edit(".4")
        assert field.text == ".4"
        assert field.focus_lost() == "$0.40"
        assert field.text == "$0.40"

    def test_focus_lost_on_empty(self, dollars_config):
        """Losing focus leaves empty text empty."""
        field = CurrencyField(config=dollars_config)
        assert field.focus_lost() == ""

    def test_symbol_swap(self, dollars_config):
        """Swapping symbols replaces the leading glyph."""
        field = CurrencyField("$42.00", dollars_config)
        field.symbol = CurrencySymbol.EURO
        assert field.text == "€42.00"
        assert field.symbol == CurrencySymbol.EURO

    def test_symbol_swap_then_focus_lost(self, dollars_config):
        """The delimiter is translated on the next completion."""
        field = CurrencyField("$42.00", dollars_config)
        field.symbol = CurrencySymbol.EURO
        assert field.focus_lost() == "€42,00"

    def test_symbol_swap_to_none(self, dollars_config):
        """Swapping to NONE drops the glyph."""
        field = CurrencyField("$5.00", dollars_config)
        field.symbol = CurrencySymbol.NONE
        assert field.text == "5.00"

    def test_symbol_swap_without_glyph(self, dollars_or_none_config):
        """Text without a glyph is kept through a swap."""
        field = CurrencyField("5.00", dollars_or_none_config)
        field.symbol = CurrencySymbol.EURO
        assert field.text == "5.00"
        assert field.focus_lost() == "€5,00"

    def test_starts_with_symbol(self, dollars_config):
        """starts_with_symbol reports a leading glyph."""
        assert CurrencyField("$1.00", dollars_config).starts_with_symbol()
        assert not CurrencyField().starts_with_symbol()

    def test_max_dollar_digits_setter(self, dollars_config):
        """Lowering max_dollar_digits drops extra whole digits."""
        field = CurrencyField("$12345.00", dollars_config)
        field.max_dollar_digits = 3
        assert field.text == "$123.00"
        assert field.max_dollar_digits == 3

    def test_max_dollar_digits_below_minus_one(self):
        """A limit below -1 is rejected and the old one kept."""
        field = CurrencyField()
        with pytest.raises(InvalidArgumentError):
            field.max_dollar_digits = -2
        assert field.max_dollar_digits == -1


class TestCurrencyFieldValues:
    """Tests for CurrencyField value getters and setters."""

    def test_get_float(self, dollars_config):
        """get_float ignores the leading symbol."""
        assert CurrencyField("$12.50", dollars_config).get_float() == 12.5

    def test_get_float_without_symbol(self):
        """get_float reads text without a symbol."""
        assert CurrencyField("£5").get_float() == 5.0

    def test_get_decimal_euro(self, euro_config):
        """The euro comma is read as a decimal point."""
        assert CurrencyField("€3,25", euro_config).get_decimal() == Decimal("3.25")

    def test_empty_text_parse_error(self, dollars_config):
        """Empty text raises CurrencyParseError."""
        with pytest.raises(CurrencyParseError):
            CurrencyField(config=dollars_config).get_float()

    def test_set_float(self, dollars_config):
        """set_float writes a completed amount."""
        field = CurrencyField(config=dollars_config)
        field.set_float(3.5)
        assert field.text == "$3.50"

    def test_set_float_replaces_value(self, dollars_config):
        """set_float replaces an existing amount."""
        field = CurrencyField("$3.50", dollars_config)
        field.set_float(4.5)
        assert field.text == "$4.50"

    def test_set_float_euro(self, euro_config):
        """set_float uses the euro comma."""
        field = CurrencyField(config=euro_config)
        field.set_float(2.5)
        assert field.text == "€2,50"

    def test_set_float_rejects_negative(self, dollars_config):
        """Negative and non-finite values are rejected."""
        field = CurrencyField("$1.00", dollars_config)
        with pytest.raises(InvalidArgumentError):
            field.set_float(-1.0)
        with pytest.raises(InvalidArgumentError):
            field.set_float(float("nan"))
        assert field.text == "$1.00"

    def test_set_float_rejects_too_many_whole_digits(self):
        """set_float rejects amounts longer than max_dollar_digits."""
        field = CurrencyField(config=CurrencyFieldConfig(max_dollar_digits=2))
        with pytest.raises(InvalidArgumentError):
            field.set_float(123.0)
