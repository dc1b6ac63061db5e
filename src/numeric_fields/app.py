"""Demo Textual application with one integer and one currency field."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Label, Static

from numeric_fields.config import FieldDefaults
from numeric_fields.errors import CurrencyParseError, FieldOverflowError
from numeric_fields.widgets.currency_input import CurrencyInput
from numeric_fields.widgets.integer_input import IntegerInput


class NumericFieldsApp(App):
    """Shows the masked fields and the values read back from them."""

    TITLE = "numeric-fields"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, defaults: FieldDefaults | None = None) -> None:
        """Initialize the app.

        Args:
            defaults: Initial field settings; built-in defaults when omitted.
        """
        super().__init__()
        self.defaults = defaults if defaults is not None else FieldDefaults()

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        defaults = self.defaults
        with Vertical(id="fields"):
            yield Label("Integer", classes="field-label")
            yield IntegerInput(
                allows_negative=defaults.allows_negative,
                max_digits=defaults.max_digits,
                id="integer",
            )
            yield Label(f"Currency ({defaults.symbol.name})", classes="field-label")
            yield CurrencyInput(
                symbol=defaults.symbol,
                max_dollar_digits=defaults.max_dollar_digits,
                id="currency",
            )
        yield Static("", id="values-bar")

    def on_mount(self) -> None:
        """Show the initial values."""
        self._refresh_values()

    def _values_text(self) -> str:
        """Describe the values currently held by both fields."""
        try:
            integer = str(self.query_one("#integer", IntegerInput).get_long())
        except FieldOverflowError:
            integer = "overflow"
        try:
            amount = str(self.query_one("#currency", CurrencyInput).get_decimal())
        except CurrencyParseError:
            amount = "-"
        return f"integer: {integer}  amount: {amount}"

    def _refresh_values(self) -> None:
        self.query_one("#values-bar", Static).update(self._values_text())

    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh the values bar whenever a field changes."""
        self._refresh_values()
