"""Currency input widget with live filtering and completion on blur."""

from __future__ import annotations

from decimal import Decimal

from textual.events import Blur
from textual.widgets import Input

from numeric_fields.fields import CurrencyField
from numeric_fields.models import AcceptedEdit, CurrencyFieldConfig, ProposedEdit
from numeric_fields.symbols import CurrencySymbol
from numeric_fields.widgets import apply_accepted_edit


class CurrencyInput(Input):
    """An Input that only holds currency text for its symbol.

    While typing, characters that cannot be part of an amount are dropped
    and the wrong delimiter is swapped for the right one.  Pastes and other
    multi-character changes are completed immediately; typed values are
    completed when the field loses focus (``'.4'`` becomes ``'$0.40'`` for
    DOLLARS).
    """

    def __init__(
        self,
        value: str = "",
        *,
        symbol: CurrencySymbol = CurrencySymbol.ANY_OR_NONE,
        max_dollar_digits: int = -1,
        **kwargs,
    ) -> None:
        """Initialize the field state before the Input sets its first value."""
        self._applying_edit = False
        self.field = CurrencyField(
            value,
            CurrencyFieldConfig(symbol=symbol, max_dollar_digits=max_dollar_digits),
        )
        kwargs.setdefault("placeholder", f"{symbol.glyph}0{symbol.delimiter}00")
        super().__init__(value=self.field.text, **kwargs)

    def watch_value(self, old_value: str, value: str) -> None:
        """Filter each proposed value and write back the accepted one."""
        if self._applying_edit:
            return
        accepted = self.field.accept(ProposedEdit(old_value, value))
        if accepted.text != value:
            apply_accepted_edit(self, accepted)

    def _on_blur(self, event: Blur) -> None:
        """Complete the amount when the field loses focus."""
        self.field.focus_lost()
        self._sync()

    def _sync(self) -> None:
        """Show the field's text after a setter changed it."""
        if self.field.text != self.value:
            apply_accepted_edit(self, AcceptedEdit.covering(self.field.text))

    @property
    def symbol(self) -> CurrencySymbol:
        """Return the currency symbol of this field."""
        return self.field.symbol

    @symbol.setter
    def symbol(self, symbol: CurrencySymbol) -> None:
        self.field.symbol = symbol
        self._sync()

    @property
    def max_dollar_digits(self) -> int:
        """Return the limit on digits before the delimiter; -1 means unlimited."""
        return self.field.max_dollar_digits

    @max_dollar_digits.setter
    def max_dollar_digits(self, digits: int) -> None:
        self.field.max_dollar_digits = digits
        self._sync()

    def starts_with_symbol(self) -> bool:
        """Return True if the value starts with a recognized glyph."""
        return self.field.starts_with_symbol()

    def get_float(self) -> float:
        """Return the amount as a float."""
        return self.field.get_float()

    def get_decimal(self) -> Decimal:
        """Return the amount as a Decimal."""
        return self.field.get_decimal()

    def set_float(self, value: float) -> None:
        """Set the amount, completed with two decimal places."""
        self.field.set_float(value)
        self._sync()
