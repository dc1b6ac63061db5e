"""Custom exceptions for numeric and currency fields."""


class InvalidArgumentError(ValueError):
    """Raised when a constructor or setter is given a value the field cannot hold."""


class FieldOverflowError(OverflowError):
    """Raised when a fixed-width read does not fit the stored value."""


class CurrencyParseError(ValueError):
    """Raised when currency text cannot be read as a number."""
