"""Integer input widget that strips anything but digits and a leading minus."""

from __future__ import annotations

from textual.widgets import Input

from numeric_fields.fields import IntegerField
from numeric_fields.models import AcceptedEdit, IntegerFieldConfig, ProposedEdit
from numeric_fields.widgets import apply_accepted_edit


class IntegerInput(Input):
    """An Input whose value is always an integer string.

    Every change to the value, typed, pasted or set from code, is run
    through the integer filter: non-digits are dropped, a minus sign is kept
    only at the front (and only when negatives are allowed), and the digits
    are cut to ``max_digits``.
    """

    def __init__(
        self,
        value: str | int = "",
        *,
        allows_negative: bool = True,
        max_digits: int = -1,
        **kwargs,
    ) -> None:
        """Initialize the field state before the Input sets its first value."""
        self._applying_edit = False
        self.field = IntegerField(
            value,
            IntegerFieldConfig(allows_negative=allows_negative, max_digits=max_digits),
        )
        kwargs.setdefault("placeholder", "0")
        super().__init__(value=self.field.text, **kwargs)

    def watch_value(self, old_value: str, value: str) -> None:
        """Filter each proposed value and write back the accepted one."""
        if self._applying_edit:
            return
        accepted = self.field.accept(ProposedEdit(old_value, value))
        if accepted.text != value:
            apply_accepted_edit(self, accepted)

    def _sync(self) -> None:
        """Show the field's text after a setter changed it."""
        if self.field.text != self.value:
            apply_accepted_edit(self, AcceptedEdit.covering(self.field.text))

    @property
    def allows_negative(self) -> bool:
        """Return True if a leading minus sign is accepted."""
        return self.field.allows_negative

    @allows_negative.setter
    def allows_negative(self, allow: bool) -> None:
        self.field.allows_negative = allow
        self._sync()

    @property
    def max_digits(self) -> int:
        """Return the digit limit; a negative value means unlimited."""
        return self.field.max_digits

    @max_digits.setter
    def max_digits(self, max_digits: int) -> None:
        self.field.max_digits = max_digits
        self._sync()

    def is_negative(self) -> bool:
        """Return True if the value starts with a minus sign."""
        return self.field.is_negative()

    def get_int(self) -> int:
        """Return the value as a signed 32-bit integer."""
        return self.field.get_int()

    def get_long(self) -> int:
        """Return the value as a signed 64-bit integer."""
        return self.field.get_long()

    def get_big_int(self) -> int:
        """Return the value with no width limit."""
        return self.field.get_big_int()

    def set_int(self, value: int) -> None:
        """Set the value from a signed 32-bit integer."""
        self.field.set_int(value)
        self._sync()

    def set_long(self, value: int) -> None:
        """Set the value from a signed 64-bit integer."""
        self.field.set_long(value)
        self._sync()

    def set_big_int(self, value: int) -> None:
        """Set the value from an integer of any size."""
        self.field.set_big_int(value)
        self._sync()
