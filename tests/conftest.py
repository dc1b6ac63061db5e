"""Shared test fixtures."""

from __future__ import annotations

import pytest

from numeric_fields.models import CurrencyFieldConfig, IntegerFieldConfig
from numeric_fields.symbols import CurrencySymbol


@pytest.fixture
def signed_config() -> IntegerFieldConfig:
    """Integer config allowing negatives with no digit limit."""
    return IntegerFieldConfig(allows_negative=True, max_digits=-1)


@pytest.fixture
def unsigned_config() -> IntegerFieldConfig:
    """Integer config rejecting negatives."""
    return IntegerFieldConfig(allows_negative=False)


@pytest.fixture
def dollars_config() -> CurrencyFieldConfig:
    """Currency config that requires the dollar sign."""
    return CurrencyFieldConfig(symbol=CurrencySymbol.DOLLARS)


@pytest.fixture
def dollars_or_none_config() -> CurrencyFieldConfig:
    """Currency config where the dollar sign is optional."""
    return CurrencyFieldConfig(symbol=CurrencySymbol.DOLLARS_OR_NONE)


@pytest.fixture
def euro_config() -> CurrencyFieldConfig:
    """Currency config that requires the euro sign and uses a comma delimiter."""
    return CurrencyFieldConfig(symbol=CurrencySymbol.EURO)
