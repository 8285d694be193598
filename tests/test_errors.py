"""
Test suite for errors module

Tests the error taxonomy and its serialized form.
"""

import pytest
from decimal import Decimal

from wallet_balance.errors import (
    ErrorKind, WalletBalanceError, BalanceError,
    InvalidAddressFormat, InvalidTransactionAmount, InsufficientFunds
)


class TestErrorTaxonomy:
    """Test error classes and kinds"""

    def test_kinds_are_distinct(self):
        """Test each error class maps to its own kind"""
        kinds = {
            InvalidAddressFormat.kind,
            InvalidTransactionAmount.kind,
            InsufficientFunds.kind,
        }
        assert kinds == set(ErrorKind)

    def test_hierarchy(self):
        """Test callers can catch by family"""
        assert issubclass(InvalidAddressFormat, WalletBalanceError)
        assert not issubclass(InvalidAddressFormat, BalanceError)
        assert issubclass(InvalidTransactionAmount, BalanceError)
        assert issubclass(InsufficientFunds, BalanceError)

    def test_invalid_address_format(self):
        """Test address errors carry the offending input"""
        error = InvalidAddressFormat("abc", "length 3 outside 32-44")
        assert error.candidate == "abc"
        assert "abc" in str(error)
        assert error.to_dict() == {
            "error": "invalid_address_format",
            "message": str(error),
            "candidate": "abc",
            "reason": "length 3 outside 32-44",
        }

        assert InvalidAddressFormat(None, "expected a string").to_dict()["candidate"] == "None"

    def test_invalid_transaction_amount(self):
        """Test amount errors carry index and amount"""
        error = InvalidTransactionAmount(3, Decimal('-10'), balance=Decimal('5'))
        assert error.index == 3
        assert error.amount == Decimal('-10')
        data = error.to_dict()
        assert data["error"] == "invalid_transaction_amount"
        assert data["index"] == 3
        assert data["amount"] == "-10"
        assert data["balance"] == "5"

    def test_insufficient_funds(self):
        """Test funds errors carry requested and available amounts"""
        error = InsufficientFunds(1, Decimal('50'), Decimal('20'))
        assert error.requested == Decimal('50')
        assert error.available == Decimal('20')
        assert error.balance == Decimal('20')
        assert "available 20, requested 50" in str(error)
        data = error.to_dict()
        assert data["error"] == "insufficient_funds"
        assert data["requested"] == "50"
        assert data["available"] == "20"

    def test_raised_and_caught(self):
        """Test errors behave as ordinary exceptions"""
        with pytest.raises(BalanceError):
            raise InsufficientFunds(0, Decimal('1'), Decimal('0'))


if __name__ == "__main__":
    pytest.main([__file__])
