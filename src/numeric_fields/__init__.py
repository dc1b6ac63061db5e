"""Integer and currency input fields that mask text as it is typed."""

from numeric_fields.errors import CurrencyParseError, FieldOverflowError, InvalidArgumentError
from numeric_fields.fields import CurrencyField, IntegerField
from numeric_fields.filters import currency_normalize, currency_transform, integer_transform
from numeric_fields.models import (
    AcceptedEdit,
    CurrencyFieldConfig,
    IntegerFieldConfig,
    ProposedEdit,
)
from numeric_fields.symbols import (
    CurrencySymbol,
    all_glyphs,
    replace_leading_symbol,
    starts_with_symbol,
)

__all__ = [
    "AcceptedEdit",
    "CurrencyField",
    "CurrencyFieldConfig",
    "CurrencyParseError",
    "CurrencySymbol",
    "FieldOverflowError",
    "IntegerField",
    "IntegerFieldConfig",
    "InvalidArgumentError",
    "ProposedEdit",
    "all_glyphs",
    "currency_normalize",
    "currency_transform",
    "integer_transform",
    "replace_leading_symbol",
    "starts_with_symbol",
]
