"""Tests for zero-amount normalization."""

import pytest
from ynab2ledger.utils.amount_parser import blank_if_zero


@pytest.mark.parametrize("amount", ["$0.00", "€0.00", "0.000", "$0", "0", "£0.0", "¥0"])
def test_zero_amounts_are_blank(amount):
    """Zero in any currency spelling becomes blank."""
    assert blank_if_zero(amount) == ""


@pytest.mark.parametrize(
    "amount", ["$1.45", "$100.45", "0.01", "$0.10", "00", "-$0.00", "$ 0.00", "0.", "", "USD0"]
)
def test_other_amounts_unchanged(amount):
    """Anything that is not a plain zero is returned as-is."""
    assert blank_if_zero(amount) == amount
