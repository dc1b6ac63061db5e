"""Data models for proposed and accepted edits and field configuration."""

from __future__ import annotations

from dataclasses import dataclass

from numeric_fields.grammar import CurrencyGrammar, currency_grammar
from numeric_fields.symbols import CurrencySymbol


@dataclass(frozen=True)
class ProposedEdit:
    """A change to a field's text, as proposed by the host before it is applied.

    ``selection`` is the caret/selection range the host would apply; it is
    only carried through for edits that do not change the content.
    """

    prior_text: str
    proposed_text: str
    is_content_change: bool = True
    selection: tuple[int, int] | None = None

    @property
    def length_delta(self) -> int:
        """Return how many characters the edit adds (negative when it removes)."""
        return len(self.proposed_text) - len(self.prior_text)


@dataclass(frozen=True)
class AcceptedEdit:
    """The text a filter hands back to the host, with the selection to apply."""

    text: str
    selection: tuple[int, int]

    @classmethod
    def covering(cls, text: str) -> AcceptedEdit:
        """Build an edit whose selection spans the whole text, leaving the caret at the end."""
        return cls(text=text, selection=(0, len(text)))

    @property
    def cursor_position(self) -> int:
        """Return where the caret lands after the edit is applied."""
        return self.selection[1]


@dataclass
class IntegerFieldConfig:
    """Settings read by the integer filter on every edit.

    ``max_digits`` counts digits only, not the sign.  A negative value means
    there is no limit; zero allows no digits at all.  ``min_value`` and
    ``max_value`` bound the values accepted by the field's value setters.
    """

    allows_negative: bool = True
    max_digits: int = -1
    min_value: int | None = None
    max_value: int | None = None


@dataclass
class CurrencyFieldConfig:
    """Settings read by the currency filter on every edit.

    ``max_dollar_digits`` bounds the digits before the delimiter when it is
    positive.  Both -1 and 0 mean there is no limit, unlike the integer
    field's ``max_digits`` where 0 allows no digits.
    """

    symbol: CurrencySymbol = CurrencySymbol.ANY_OR_NONE
    max_dollar_digits: int = -1

    @property
    def grammar(self) -> CurrencyGrammar:
        """Return the grammar for the current symbol and whole-digit limit."""
        return currency_grammar(self.symbol, self.max_dollar_digits)
