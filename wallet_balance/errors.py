"""
Error Taxonomy Module

Closed set of failures produced by address validation and balance
calculation. Callers branch on the exception class or on ``kind``,
never on message text.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Kinds of wallet balance failures"""
    INVALID_ADDRESS_FORMAT = "invalid_address_format"
    INVALID_TRANSACTION_AMOUNT = "invalid_transaction_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


class WalletBalanceError(Exception):
    """Base class for every error raised by this package"""
    kind: ErrorKind

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dict for API responses and logs"""
        return {"error": self.kind.value, "message": str(self)}


class InvalidAddressFormat(WalletBalanceError):
    """Raised when a wallet address fails the length or alphabet check"""
    kind = ErrorKind.INVALID_ADDRESS_FORMAT

    def __init__(self, candidate: Any, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"Invalid wallet address {candidate!r}: {reason}")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["candidate"] = self.candidate if isinstance(self.candidate, str) else repr(self.candidate)
        data["reason"] = self.reason
        return data


class BalanceError(WalletBalanceError):
    """
    Base class for failures tied to one transaction of a run.

    ``balance`` is the running balance when the transaction was rejected;
    transactions before ``index`` remain applied.
    """

    def __init__(self, message: str, index: int, transaction: Any = None,
                 balance: Optional[Decimal] = None):
        self.index = index
        self.transaction = transaction
        self.balance = balance
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["index"] = self.index
        if self.balance is not None:
            data["balance"] = str(self.balance)
        return data


class InvalidTransactionAmount(BalanceError):
    """Raised when an amount is zero, negative, non-finite, or overflows the balance"""
    kind = ErrorKind.INVALID_TRANSACTION_AMOUNT

    def __init__(self, index: int, amount: Any, reason: str = "amount must be a finite positive value",
                 transaction: Any = None, balance: Optional[Decimal] = None):
        self.amount = amount
        self.reason = reason
        super().__init__(
            f"Invalid amount {amount}: {reason}",
            index, transaction, balance
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["amount"] = str(self.amount)
        data["reason"] = self.reason
        return data


class InsufficientFunds(BalanceError):
    """Raised when a withdrawal exceeds the balance available at that point"""
    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, index: int, requested: Decimal, available: Decimal,
                 transaction: Any = None):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds: available {available}, requested {requested}",
            index, transaction, available
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["requested"] = str(self.requested)
        data["available"] = str(self.available)
        return data
