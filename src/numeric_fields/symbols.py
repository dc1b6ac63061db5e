"""Registry of currency symbols recognized by currency fields."""

from __future__ import annotations

from enum import Enum

from numeric_fields.errors import InvalidArgumentError

# The generic currency sign, used by the ANY and ANY_OR_NONE wildcards.
GENERIC_GLYPH = "¤"


class CurrencySymbol(Enum):
    """A currency symbol with its decimal delimiter.

    Members with the ``_OR_NONE`` suffix accept text either with their glyph
    at the front or with no glyph at all; the others always carry it once
    the text is completed.  ``NONE`` never carries a glyph.  ``ANY`` and
    ``ANY_OR_NONE`` accept any of the concrete glyphs.
    """

    NONE = ("", ".", True)
    DOLLARS = ("$", ".", False)
    DOLLARS_OR_NONE = ("$", ".", True)
    EURO = ("€", ",", False)
    EURO_OR_NONE = ("€", ",", True)
    POUNDS = ("£", ".", False)
    POUNDS_OR_NONE = ("£", ".", True)
    YEN = ("¥", ".", False)
    YEN_OR_NONE = ("¥", ".", True)
    ANY = (GENERIC_GLYPH, ".", False)
    ANY_OR_NONE = (GENERIC_GLYPH, ".", True)

    def __init__(self, glyph: str, delimiter: str, symbol_optional: bool) -> None:
        self.glyph = glyph
        self.delimiter = delimiter
        self.symbol_optional = symbol_optional

    @property
    def is_wildcard(self) -> bool:
        """Return True for ANY and ANY_OR_NONE."""
        return self.glyph == GENERIC_GLYPH

    @property
    def emits_symbol(self) -> bool:
        """Return True if completed text must start with this symbol's glyph."""
        return not self.symbol_optional

    @property
    def foreign_delimiter(self) -> str:
        """Return the delimiter this symbol does not use."""
        return "." if self.delimiter == "," else ","

    @property
    def recognized_glyphs(self) -> frozenset[str]:
        """Return the glyphs accepted at the front of text for this symbol.

        Wildcards also accept the generic sign, since that is the glyph they
        emit when a symbol is required.
        """
        match self:
            case CurrencySymbol.NONE:
                return frozenset()
            case CurrencySymbol.ANY | CurrencySymbol.ANY_OR_NONE:
                return _CONCRETE_GLYPHS | {GENERIC_GLYPH}
            case _:
                return frozenset({self.glyph})

    @classmethod
    def from_name(cls, name: str) -> CurrencySymbol:
        """Look up a symbol by member name, ignoring case.

        Args:
            name: A member name such as ``'dollars_or_none'``.

        Returns:
            The matching CurrencySymbol.

        Raises:
            InvalidArgumentError: If no member has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(member.name for member in cls)
            raise InvalidArgumentError(
                f"Unknown currency symbol {name!r}; expected one of {valid}"
            ) from None


_CONCRETE_GLYPHS: frozenset[str] = frozenset(
    member.glyph for member in CurrencySymbol if member.glyph and not member.is_wildcard
)


def all_glyphs() -> frozenset[str]:
    """Return every concrete currency glyph ($, €, £, ¥)."""
    return _CONCRETE_GLYPHS


def starts_with_symbol(text: str, symbol: CurrencySymbol) -> bool:
    """Return True if *text* starts with a glyph recognized by *symbol*.

    Always False for empty text and for ``CurrencySymbol.NONE``.
    """
    return bool(text) and text[0] in symbol.recognized_glyphs


def replace_leading_symbol(
    text: str, old: CurrencySymbol, new: CurrencySymbol
) -> str:
    """Swap the leading glyph of *text* from *old*'s to *new*'s.

    Text that does not start with a glyph recognized by *old* is returned
    unchanged.  Swapping to ``NONE`` drops the glyph.

    Args:
        text: The current field text, e.g. ``'$42.00'``.
        old: The symbol the text was entered with.
        new: The symbol to switch to.

    Returns:
        The text with its leading glyph replaced.
    """
    if not starts_with_symbol(text, old):
        return text
    return new.glyph + text[1:]
