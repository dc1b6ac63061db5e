"""Configuration resolution for the numeric-fields demo.

Priority order (highest to lowest):
1. CLI arguments (--symbol, --max-digits, --max-dollar-digits, --no-negative)
2. ~/.config/numeric-fields/config.toml -> [integer] and [currency] sections
3. Built-in defaults
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from numeric_fields.errors import InvalidArgumentError
from numeric_fields.symbols import CurrencySymbol

_CONFIG_PATH = Path.home() / ".config" / "numeric-fields" / "config.toml"


@dataclass
class FieldDefaults:
    """Initial settings for the demo's integer and currency fields."""

    allows_negative: bool = True
    max_digits: int = -1
    symbol: CurrencySymbol = CurrencySymbol.ANY_OR_NONE
    max_dollar_digits: int = -1


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def load_field_defaults() -> FieldDefaults:
    """Read field defaults from the ``[integer]`` and ``[currency]`` sections.

    Example config.toml::

        [integer]
        allow_negative = false
        max_digits = 6

        [currency]
        symbol = "euro_or_none"
        max_dollar_digits = 7

    Returns:
        The configured defaults; missing keys keep their built-in values.

    Raises:
        InvalidArgumentError: If a value has the wrong type or names an
            unknown currency symbol.
    """
    config = _load_config_dict()
    integer = config.get("integer", {})
    currency = config.get("currency", {})
    defaults = FieldDefaults()

    if "allow_negative" in integer:
        if not isinstance(integer["allow_negative"], bool):
            raise InvalidArgumentError("[integer] allow_negative must be true or false")
        defaults.allows_negative = integer["allow_negative"]
    if "max_digits" in integer:
        defaults.max_digits = _int_setting(integer["max_digits"], "[integer] max_digits")
    if "symbol" in currency:
        defaults.symbol = CurrencySymbol.from_name(str(currency["symbol"]))
    if "max_dollar_digits" in currency:
        defaults.max_dollar_digits = _int_setting(
            currency["max_dollar_digits"], "[currency] max_dollar_digits"
        )
    return defaults


def _int_setting(value: object, name: str) -> int:
    """Return *value* as an int of at least -1."""
    if isinstance(value, bool) or not isinstance(value, int) or value < -1:
        raise InvalidArgumentError(f"{name} must be an integer of at least -1")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'symbol', 'max_digits', 'max_dollar_digits'
        and 'no_negative' attributes.
    """
    parser = argparse.ArgumentParser(
        prog="numeric-fields",
        description="Try out integer and currency input fields in the terminal.",
    )
    parser.add_argument(
        "-s",
        "--symbol",
        help="Currency symbol for the currency field (e.g. dollars, euro_or_none).",
        default=None,
    )
    parser.add_argument(
        "--max-digits",
        type=int,
        help="Maximum digits in the integer field (-1 for unlimited).",
        default=None,
    )
    parser.add_argument(
        "--max-dollar-digits",
        type=int,
        help="Maximum digits before the delimiter in the currency field.",
        default=None,
    )
    parser.add_argument(
        "--no-negative",
        action="store_true",
        help="Disallow negative values in the integer field.",
    )
    return parser.parse_args(argv)


def resolve_field_defaults(args: argparse.Namespace) -> FieldDefaults:
    """Merge CLI arguments over config.toml over built-in defaults.

    Args:
        args: Namespace returned by :func:`parse_args`.

    Returns:
        The resolved field defaults.

    Raises:
        SystemExit: If a setting is invalid.
    """
    try:
        defaults = load_field_defaults()
        if args.symbol:
            defaults.symbol = CurrencySymbol.from_name(args.symbol)
        if args.max_digits is not None:
            defaults.max_digits = _int_setting(args.max_digits, "--max-digits")
        if args.max_dollar_digits is not None:
            defaults.max_dollar_digits = _int_setting(
                args.max_dollar_digits, "--max-dollar-digits"
            )
        if args.no_negative:
            defaults.allows_negative = False
    except InvalidArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    return defaults
