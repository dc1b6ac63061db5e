"""Integer and currency field state, independent of any widget toolkit.

A field owns its current text and config.  Every change goes through the
matching filter, and the value accessors read and write the text, never a
parsed number, so half-typed values like ``'-'`` or ``'$12.'`` can live in
the field while the user is still editing.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation

from numeric_fields.errors import (
    CurrencyParseError,
    FieldOverflowError,
    InvalidArgumentError,
)
from numeric_fields.filters import currency_normalize, currency_transform, integer_transform
from numeric_fields.grammar import integer_grammar
from numeric_fields.models import (
    AcceptedEdit,
    CurrencyFieldConfig,
    IntegerFieldConfig,
    ProposedEdit,
)
from numeric_fields.symbols import CurrencySymbol, replace_leading_symbol, starts_with_symbol

logger = logging.getLogger(__name__)

INT_MIN, INT_MAX = -(2**31), 2**31 - 1
LONG_MIN, LONG_MAX = -(2**63), 2**63 - 1


class IntegerField:
    """Text that always holds an integer, optionally signed and digit-limited.

    Args:
        text: Initial text, or an int to start from.
        config: Field settings; a default (signed, unlimited) config is used
            when omitted.

    Raises:
        InvalidArgumentError: If the initial text is not an integer string
            or the initial value breaks the sign policy.
    """

    def __init__(
        self, text: str | int = "", config: IntegerFieldConfig | None = None
    ) -> None:
        self.config = config if config is not None else IntegerFieldConfig()
        self._text = ""
        if isinstance(text, int):
            self.set_big_int(text)
        elif integer_grammar(self.config.allows_negative).matches(text):
            self.set_text(text)
        else:
            raise InvalidArgumentError(f"Text must be integer only: {text!r}")

    @property
    def text(self) -> str:
        """Return the current text."""
        return self._text

    def accept(self, edit: ProposedEdit) -> AcceptedEdit:
        """Filter a proposed edit and store the accepted text."""
        accepted = integer_transform(edit, self.config)
        self._text = accepted.text
        return accepted

    def apply_edit(self, proposed_text: str, is_content_change: bool = True) -> AcceptedEdit:
        """Propose *proposed_text* as the field's new full text."""
        return self.accept(ProposedEdit(self._text, proposed_text, is_content_change))

    def set_text(self, text: str) -> None:
        """Replace the text programmatically, filtering it like any other edit."""
        self.apply_edit(text)

    def is_negative(self) -> bool:
        """Return True if the text starts with a minus sign."""
        return self.config.allows_negative and self._text.startswith("-")

    # -- value accessors --------------------------------------------------

    def _read(self, low: int | None = None, high: int | None = None, width: str = "") -> int:
        if self._text in ("", "-"):
            return 0
        if low is not None and high is not None:
            # Longer digit strings cannot fit; check before converting.
            limit = -low if self._text.startswith("-") else high
            digit_count = len(self._text.lstrip("-").lstrip("0"))
            if digit_count > len(str(limit)):
                raise FieldOverflowError(
                    f"Value of field does not fit a {width} integer: {digit_count} digits"
                )
        # Decimal is not bound by the int/str conversion digit limit.
        value = int(Decimal(self._text))
        if low is not None and high is not None and not low <= value <= high:
            raise FieldOverflowError(
                f"Value of field does not fit a {width} integer: {self._text}"
            )
        return value

    def get_int(self) -> int:
        """Return the value as a signed 32-bit integer.

        Raises:
            FieldOverflowError: If the value is outside the 32-bit range.
        """
        return self._read(INT_MIN, INT_MAX, "32-bit")

    def get_long(self) -> int:
        """Return the value as a signed 64-bit integer.

        Raises:
            FieldOverflowError: If the value is outside the 64-bit range.
        """
        return self._read(LONG_MIN, LONG_MAX, "64-bit")

    def get_big_int(self) -> int:
        """Return the value with no width limit."""
        return self._read()

    def _write(self, value: int, low: int | None = None, high: int | None = None) -> None:
        if low is not None and high is not None and not low <= value <= high:
            raise InvalidArgumentError(f"{value} is outside the range {low}..{high}")
        if value < 0 and not self.config.allows_negative:
            raise InvalidArgumentError("This field does not allow negative values")
        text = str(Decimal(value))
        digit_count = len(text.lstrip("-"))
        if 0 <= self.config.max_digits < digit_count:
            raise InvalidArgumentError(
                f"Value has {digit_count} digits; this field allows {self.config.max_digits}"
            )
        if self.config.min_value is not None and value < self.config.min_value:
            raise InvalidArgumentError(
                f"{value} is below the minimum value {self.config.min_value}"
            )
        if self.config.max_value is not None and value > self.config.max_value:
            raise InvalidArgumentError(
                f"{value} is above the maximum value {self.config.max_value}"
            )
        self.set_text(text)

    def set_int(self, value: int) -> None:
        """Set the text from a signed 32-bit integer.

        Raises:
            InvalidArgumentError: If the value is out of range, negative while
                negatives are disallowed, longer than ``max_digits``, or
                outside the value bounds.
        """
        self._write(value, INT_MIN, INT_MAX)

    def set_long(self, value: int) -> None:
        """Set the text from a signed 64-bit integer.

        Raises:
            InvalidArgumentError: Same conditions as :meth:`set_int`.
        """
        self._write(value, LONG_MIN, LONG_MAX)

    def set_big_int(self, value: int) -> None:
        """Set the text from an integer of any size.

        Raises:
            InvalidArgumentError: If the value is negative while negatives are
                disallowed, longer than ``max_digits``, or outside the value
                bounds.
        """
        self._write(value)

    # -- settings ---------------------------------------------------------

    @property
    def allows_negative(self) -> bool:
        """Return True if the field accepts a leading minus sign."""
        return self.config.allows_negative

    @allows_negative.setter
    def allows_negative(self, allow: bool) -> None:
        self.config.allows_negative = allow
        if not allow and self._text.startswith("-"):
            logger.debug("Negatives disallowed, dropping sign from %r", self._text)
            self.set_text(self._text.lstrip("-"))

    @property
    def max_digits(self) -> int:
        """Return the digit limit; a negative value means unlimited."""
        return self.config.max_digits

    @max_digits.setter
    def max_digits(self, max_digits: int) -> None:
        self.config.max_digits = max_digits
        self.set_text(self._text)

    def set_min_value(self, value: int) -> None:
        """Reject values below *value* in the value setters."""
        if self.config.max_value is not None and value > self.config.max_value:
            raise InvalidArgumentError("Minimum value cannot exceed the maximum value")
        self.config.min_value = value

    def clear_min_value(self) -> None:
        """Remove the minimum value restriction."""
        self.config.min_value = None

    def set_max_value(self, value: int) -> None:
        """Reject values above *value* in the value setters."""
        if self.config.min_value is not None and value < self.config.min_value:
            raise InvalidArgumentError("Maximum value cannot be below the minimum value")
        self.config.max_value = value

    def clear_max_value(self) -> None:
        """Remove the maximum value restriction."""
        self.config.max_value = None


class CurrencyField:
    """Text that holds a currency amount for a given symbol.

    While editing, the text is only stripped of characters that cannot be
    part of an amount.  :meth:`focus_lost` completes it, e.g. ``'.4'``
    becomes ``'$0.40'`` for DOLLARS.

    Args:
        text: Initial text; must match the currency grammar unless empty.
        config: Field settings; defaults to ANY_OR_NONE with no digit limit.

    Raises:
        InvalidArgumentError: If the initial text is not valid currency text
            or the config's digit limit is below -1.
    """

    def __init__(self, text: str = "", config: CurrencyFieldConfig | None = None) -> None:
        self.config = config if config is not None else CurrencyFieldConfig()
        self._check_max_dollar_digits(self.config.max_dollar_digits)
        if text and not self.config.grammar.matches(text):
            raise InvalidArgumentError(f"Text must be in valid currency format: {text!r}")
        self._text = ""
        self.set_text(text)

    @property
    def text(self) -> str:
        """Return the current text."""
        return self._text

    def accept(self, edit: ProposedEdit) -> AcceptedEdit:
        """Filter a proposed edit and store the accepted text."""
        accepted = currency_transform(edit, self.config)
        self._text = accepted.text
        return accepted

    def apply_edit(self, proposed_text: str, is_content_change: bool = True) -> AcceptedEdit:
        """Propose *proposed_text* as the field's new full text."""
        return self.accept(ProposedEdit(self._text, proposed_text, is_content_change))

    def set_text(self, text: str) -> None:
        """Replace the text programmatically; the result is always completed."""
        accepted = self.apply_edit(text)
        self._text = currency_normalize(accepted.text, self.config)

    def focus_lost(self) -> str:
        """Complete the current text and return it."""
        self._text = currency_normalize(self._text, self.config)
        return self._text

    def starts_with_symbol(self) -> bool:
        """Return True if the text starts with a glyph this field recognizes."""
        return starts_with_symbol(self._text, self.config.symbol)

    def _revalidate(self) -> None:
        grammar = self.config.grammar
        translated = grammar.translate_delimiter(self._text)
        if not grammar.matches(translated):
            self._text = grammar.repair(translated)

    # -- settings ---------------------------------------------------------

    @property
    def symbol(self) -> CurrencySymbol:
        """Return the currency symbol of this field."""
        return self.config.symbol

    @symbol.setter
    def symbol(self, symbol: CurrencySymbol) -> None:
        old = self.config.symbol
        self.config.symbol = symbol
        self._text = replace_leading_symbol(self._text, old, symbol)
        self._revalidate()
        logger.debug("Currency symbol %s -> %s, text now %r", old.name, symbol.name, self._text)

    @staticmethod
    def _check_max_dollar_digits(digits: int) -> None:
        if digits < -1:
            raise InvalidArgumentError("Values below -1 are invalid.")

    @property
    def max_dollar_digits(self) -> int:
        """Return the limit on digits before the delimiter; -1 or 0 means unlimited."""
        return self.config.max_dollar_digits

    @max_dollar_digits.setter
    def max_dollar_digits(self, digits: int) -> None:
        self._check_max_dollar_digits(digits)
        self.config.max_dollar_digits = digits
        self._revalidate()

    # -- value accessors --------------------------------------------------

    def get_decimal(self) -> Decimal:
        """Return the amount as a Decimal, ignoring any leading symbol.

        Raises:
            CurrencyParseError: If the text is empty or not a number.
        """
        number = self._text[1:] if self.starts_with_symbol() else self._text
        number = number.replace(self.config.symbol.delimiter, ".")
        try:
            value = Decimal(number)
        except InvalidOperation:
            raise CurrencyParseError(
                f"Currency text is not a number: {self._text!r}"
            ) from None
        if not value.is_finite():
            raise CurrencyParseError(f"Currency text is not a number: {self._text!r}")
        return value

    def get_float(self) -> float:
        """Return the amount as a float, ignoring any leading symbol.

        Raises:
            CurrencyParseError: If the text is empty or not a number.
        """
        return float(self.get_decimal())

    def set_float(self, value: float) -> None:
        """Set the text from an amount, rounded to two decimal places.

        Raises:
            InvalidArgumentError: If the value is negative, not finite, or has
                more whole digits than ``max_dollar_digits`` allows.
        """
        if not math.isfinite(value) or value < 0:
            raise InvalidArgumentError(f"Currency value must be a non-negative number: {value}")
        whole, fraction = f"{value:.2f}".split(".")
        limit = self.config.max_dollar_digits
        if limit > 0 and len(whole) > limit:
            raise InvalidArgumentError(f"{value} has more than {limit} digits before the delimiter")
        self.set_text(f"{whole}{self.config.symbol.delimiter}{fraction}")
