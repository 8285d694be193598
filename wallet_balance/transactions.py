"""
Transaction Records Module

Immutable deposit and withdrawal records as handed over by the feed that
loads a wallet's history, plus helpers for putting a feed into order and
picking out one wallet's records before balance calculation.
"""

from decimal import Decimal, InvalidOperation
from datetime import datetime
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union
from enum import Enum

from .addresses import WalletAddress


class TransactionType(Enum):
    """Types of wallet transactions"""
    DEPOSIT = "deposit"        # Adds funds to the wallet
    WITHDRAWAL = "withdrawal"  # Removes funds from the wallet


def to_decimal(value: Any) -> Decimal:
    """
    Convert an amount to Decimal without going through binary float math

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f"Cannot convert {value!r} to Decimal")


@dataclass(frozen=True)
class Transaction:
    """
    Single deposit or withdrawal.

    The amount is an unsigned magnitude; its direction comes from
    transaction_type. Sign and finiteness are checked by the balance
    calculator, which knows the transaction's position in the run.
    """
    transaction_type: TransactionType
    amount: Decimal
    sequence: Optional[int] = None
    timestamp: Optional[datetime] = None
    wallet_address: Optional[str] = None
    reference: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.transaction_type, TransactionType):
            object.__setattr__(self, 'transaction_type', TransactionType(self.transaction_type))
        object.__setattr__(self, 'amount', to_decimal(self.amount))

    @classmethod
    def deposit(cls, amount: Union[Decimal, int, str], **kwargs) -> 'Transaction':
        return cls(TransactionType.DEPOSIT, amount, **kwargs)

    @classmethod
    def withdrawal(cls, amount: Union[Decimal, int, str], **kwargs) -> 'Transaction':
        return cls(TransactionType.WITHDRAWAL, amount, **kwargs)

    @property
    def is_deposit(self) -> bool:
        return self.transaction_type == TransactionType.DEPOSIT

    @property
    def is_withdrawal(self) -> bool:
        return self.transaction_type == TransactionType.WITHDRAWAL


def transaction_sort_key(transaction: Transaction):
    """Sort key: sequence first, then timestamp, unkeyed records last"""
    has_sequence = transaction.sequence is not None
    has_timestamp = transaction.timestamp is not None
    return (
        not (has_sequence or has_timestamp),
        not has_sequence,
        transaction.sequence if has_sequence else 0,
        not has_timestamp,
        transaction.timestamp.timestamp() if has_timestamp else 0.0,
    )


def order_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """
    Sort transactions by sequence index, then timestamp.

    For feeds that do not guarantee chronological order. The sort is stable;
    records with neither key keep their relative order after the keyed ones.
    """
    return sorted(transactions, key=transaction_sort_key)


def belongs_to_wallet(address: WalletAddress, transaction: Transaction) -> bool:
    """Records without a wallet_address are assumed to belong to the target"""
    return transaction.wallet_address is None or transaction.wallet_address == address.value


def transactions_for_wallet(address: WalletAddress,
                            transactions: Iterable[Transaction]) -> List[Transaction]:
    """
    Select the records of one wallet from a mixed feed.
    """
    return [transaction for transaction in transactions if belongs_to_wallet(address, transaction)]
