"""Grammars for integer and currency field text.

Each grammar answers two questions about a piece of text: does it match the
full grammar, and what is left of it once every character that breaks the
grammar has been removed.  Grammars are immutable and cached per
configuration, so a field switching symbols picks up a freshly built one.
"""

from __future__ import annotations

import re
from functools import lru_cache

from numeric_fields.symbols import CurrencySymbol

_DIGITS = frozenset("0123456789")


class IntegerGrammar:
    """``-?[0-9]*``, with the minus sign only when negatives are allowed."""

    def __init__(self, allows_negative: bool) -> None:
        self.allows_negative = allows_negative
        sign = "-?" if allows_negative else ""
        self.pattern = re.compile(f"{sign}[0-9]*")

    def matches(self, text: str) -> bool:
        """Return True if *text* is a complete, valid integer string."""
        return self.pattern.fullmatch(text) is not None

    def repair(self, text: str) -> str:
        """Strip non-digits and any minus sign that is not the first kept character.

        Args:
            text: Arbitrary text, e.g. a paste of ``'--12a3'``.

        Returns:
            The text with every offending character removed (``'-123'``).
        """
        kept: list[str] = []
        for char in text:
            if char in _DIGITS:
                kept.append(char)
            elif char == "-" and self.allows_negative and not kept:
                kept.append(char)
        return "".join(kept)


class CurrencyGrammar:
    """``symbol? [0-9]+ (delimiter [0-9]{0,2})?`` for a given currency symbol.

    The symbol part is the symbol's glyph, a character class of every
    recognized glyph for the wildcards, and absent for ``NONE``.  A positive
    *max_dollar_digits* bounds the number of digits before the delimiter.
    """

    def __init__(self, symbol: CurrencySymbol, max_dollar_digits: int = -1) -> None:
        self.symbol = symbol
        self.delimiter = symbol.delimiter
        self.glyphs = symbol.recognized_glyphs
        self.max_dollar_digits = max_dollar_digits

        if self.glyphs:
            glyph_class = "".join(re.escape(glyph) for glyph in sorted(self.glyphs))
            symbol_part = f"[{glyph_class}]?"
        else:
            symbol_part = ""
        whole_part = (
            f"[0-9]{{1,{max_dollar_digits}}}" if max_dollar_digits > 0 else "[0-9]+"
        )
        fraction_part = f"(?:{re.escape(self.delimiter)}[0-9]{{0,2}})?"
        self.pattern = re.compile(symbol_part + whole_part + fraction_part)

    def matches(self, text: str) -> bool:
        """Return True if *text* matches the full currency grammar."""
        return self.pattern.fullmatch(text) is not None

    def translate_delimiter(self, text: str) -> str:
        """Replace the delimiter this currency does not use with the one it does."""
        return text.replace(self.symbol.foreign_delimiter, self.delimiter)

    def repair(self, text: str) -> str:
        """Remove every character that cannot appear where it stands.

        Removed are: characters that are not a digit, the delimiter or a
        recognized glyph; glyphs after the first kept character; delimiters
        after the first; digits past the second fractional digit; and whole
        digits beyond *max_dollar_digits* when that limit is set.

        The result may still be an incomplete amount such as ``'$'`` or
        ``'12.'``; completing it is the normalizer's job.
        """
        kept: list[str] = []
        seen_delimiter = False
        whole_digits = 0
        fraction_digits = 0
        for char in text:
            if char in _DIGITS:
                if seen_delimiter:
                    if fraction_digits < 2:
                        kept.append(char)
                        fraction_digits += 1
                elif self.max_dollar_digits <= 0 or whole_digits < self.max_dollar_digits:
                    kept.append(char)
                    whole_digits += 1
            elif char == self.delimiter:
                if not seen_delimiter:
                    kept.append(char)
                    seen_delimiter = True
            elif char in self.glyphs and not kept:
                kept.append(char)
        return "".join(kept)


@lru_cache(maxsize=None)
def integer_grammar(allows_negative: bool) -> IntegerGrammar:
    """Return the shared integer grammar for a sign policy."""
    return IntegerGrammar(allows_negative)


@lru_cache(maxsize=None)
def currency_grammar(symbol: CurrencySymbol, max_dollar_digits: int = -1) -> CurrencyGrammar:
    """Return the shared currency grammar for a symbol and whole-digit limit."""
    return CurrencyGrammar(symbol, max(max_dollar_digits, -1))
