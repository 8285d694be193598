"""
Pydantic schemas for API requests and responses
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from ..balance import BalanceReport
from ..transactions import Transaction, TransactionType


class TransactionModel(BaseModel):
    transaction_type: Literal["deposit", "withdrawal"]
    amount: str = Field(..., description="Decimal amount as string")
    sequence: Optional[int] = Field(None, description="Ordering index from the source feed")
    timestamp: Optional[datetime] = None
    wallet_address: Optional[str] = None
    reference: Optional[str] = None

    def to_transaction(self) -> Transaction:
        return Transaction(
            transaction_type=TransactionType(self.transaction_type),
            amount=self.amount,
            sequence=self.sequence,
            timestamp=self.timestamp,
            wallet_address=self.wallet_address,
            reference=self.reference
        )


class BalanceRequest(BaseModel):
    transactions: List[TransactionModel]
    mode: Optional[Literal["fail_fast", "collect_all"]] = Field(
        None, description="Failure mode; the configured default when omitted"
    )
    sort: bool = Field(False, description="Order by sequence/timestamp before calculating")


class RejectedTransactionModel(BaseModel):
    index: int
    error: str
    message: str
    details: Dict[str, Any]


class BalanceResponse(BaseModel):
    address: str
    balance: str
    mode: str
    applied: int
    ignored: int = Field(0, description="Records for other wallets left out of the run")
    rejected: List[RejectedTransactionModel]
    history: List[str]

    @classmethod
    def from_report(cls, report: BalanceReport, ignored: int = 0,
                    positions: Optional[List[int]] = None) -> 'BalanceResponse':
        """
        Build the response from a report.

        positions maps each calculator index to the record's index in the
        request, when the request was filtered or reordered.
        """
        def request_index(index: int) -> int:
            return positions[index] if positions is not None else index

        return cls(
            address=report.address.value,
            balance=str(report.balance),
            mode=report.mode.value,
            applied=report.applied,
            ignored=ignored,
            rejected=[
                RejectedTransactionModel(
                    index=request_index(item.index),
                    error=item.error.kind.value,
                    message=str(item.error),
                    details={**item.error.to_dict(), "index": request_index(item.index)}
                )
                for item in report.rejected
            ],
            history=[str(balance) for balance in report.history]
        )


class AddressValidationResponse(BaseModel):
    address: str
    valid: bool
    reason: Optional[str] = None
