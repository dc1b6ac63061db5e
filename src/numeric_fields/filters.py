"""Live edit filters for integer and currency fields.

Filters are pure functions: they take the proposed edit and the field's
current config and return the edit the host should apply.  They never raise;
malformed text is repaired rather than rejected.
"""

from __future__ import annotations

import logging

from numeric_fields.grammar import integer_grammar
from numeric_fields.models import (
    AcceptedEdit,
    CurrencyFieldConfig,
    IntegerFieldConfig,
    ProposedEdit,
)
from numeric_fields.symbols import starts_with_symbol

logger = logging.getLogger(__name__)


def _pass_through(edit: ProposedEdit) -> AcceptedEdit:
    """Accept a caret-only edit as proposed."""
    if edit.selection is None:
        return AcceptedEdit.covering(edit.proposed_text)
    return AcceptedEdit(text=edit.proposed_text, selection=edit.selection)


def is_typed_edit(edit: ProposedEdit) -> bool:
    """Return True when the edit adds, removes or replaces at most one character.

    Anything longer (a paste, a cut, a programmatic set, but also IME
    composition or several characters landing in one event) counts as a bulk
    edit.
    """
    return -1 <= edit.length_delta <= 1


def integer_transform(edit: ProposedEdit, config: IntegerFieldConfig) -> AcceptedEdit:
    """Filter a proposed edit of an integer field.

    Args:
        edit: The edit proposed by the host.
        config: The field's current sign policy and digit limit.

    Returns:
        The text to apply, stripped of non-digits and misplaced minus signs
        and truncated to ``max_digits`` digits.
    """
    if not edit.is_content_change:
        return _pass_through(edit)

    text = edit.proposed_text
    grammar = integer_grammar(config.allows_negative)
    if not grammar.matches(text):
        text = grammar.repair(text)

    sign_length = 1 if text.startswith("-") else 0
    if config.max_digits >= 0 and len(text) - sign_length > config.max_digits:
        text = text[: config.max_digits + sign_length]

    if text != edit.proposed_text:
        logger.debug("Integer edit %r rewritten to %r", edit.proposed_text, text)
    return AcceptedEdit.covering(text)


def currency_normalize(text: str, config: CurrencyFieldConfig) -> str:
    """Complete currency text into its final form.

    Adds a ``0`` before a leading delimiter, the symbol's glyph when the
    symbol is required, and pads the fraction to exactly two digits.
    e.g. ``'.4'`` becomes ``'$0.40'`` for DOLLARS and ``'0.40'`` for
    DOLLARS_OR_NONE.  Empty text stays empty.

    Args:
        text: The current field text.
        config: The field's currency configuration.

    Returns:
        Text matching the currency grammar with two fractional digits, or
        an empty string if nothing usable was left.
    """
    if not text:
        return text

    grammar = config.grammar
    symbol = config.symbol
    delimiter = symbol.delimiter

    text = grammar.translate_delimiter(text)
    if not grammar.matches(text):
        text = grammar.repair(text)
        if not text:
            return text

    if starts_with_symbol(text, symbol):
        glyph, body = text[0], text[1:]
    else:
        glyph, body = "", text

    if not body or body.startswith(delimiter):
        body = "0" + body
    if not glyph and symbol.emits_symbol:
        glyph = symbol.glyph

    if delimiter not in body:
        body += delimiter + "00"
    else:
        fraction = body.split(delimiter, 1)[1]
        body += "0" * (2 - len(fraction))

    return glyph + body


def currency_transform(edit: ProposedEdit, config: CurrencyFieldConfig) -> AcceptedEdit:
    """Filter a proposed edit of a currency field.

    Typed edits are only stripped of characters that break the grammar, so
    the user can keep typing (``'$12.'`` stays as is).  Bulk edits are also
    completed by :func:`currency_normalize`.

    Args:
        edit: The edit proposed by the host.
        config: The field's current currency configuration.

    Returns:
        The text to apply, with the caret at the end.
    """
    if not edit.is_content_change:
        return _pass_through(edit)

    grammar = config.grammar
    text = grammar.translate_delimiter(edit.proposed_text)
    if not grammar.matches(text):
        text = grammar.repair(text)

    if not is_typed_edit(edit):
        text = currency_normalize(text, config)

    if text != edit.proposed_text:
        logger.debug("Currency edit %r rewritten to %r", edit.proposed_text, text)
    return AcceptedEdit.covering(text)
