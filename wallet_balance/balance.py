"""
Balance Calculation Engine

Folds a wallet's ordered transactions into a final balance. The balance
starts at zero for every run and never goes negative: a withdrawal larger
than the current balance is rejected and leaves the balance untouched.

Two failure modes are supported:

- FAIL_FAST stops at the first invalid transaction and raises its error.
  Transactions before it stay applied; the error carries their balance.
- COLLECT_ALL skips invalid transactions, records each one with its error,
  and returns the balance of the transactions that were applied.

Transactions are processed in the order given and are never re-sorted.
"""

from decimal import (
    Context, Decimal, Inexact, InvalidOperation, Overflow, ROUND_HALF_EVEN, localcontext
)
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union
from enum import Enum

from .addresses import WalletAddress
from .config import get_config
from .errors import BalanceError, InsufficientFunds, InvalidTransactionAmount
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionType

ZERO = Decimal('0')

# Any rounding or overflow in balance arithmetic is an error, not a silent loss of precision
BALANCE_CONTEXT = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, Overflow, Inexact],
)


class FailureMode(Enum):
    """How a run reacts to an invalid transaction"""
    FAIL_FAST = "fail_fast"      # Raise the first error
    COLLECT_ALL = "collect_all"  # Skip and record every invalid transaction


@dataclass(frozen=True)
class RejectedTransaction:
    """
    Transaction skipped during a COLLECT_ALL run.

    Errors compare by kind and content, so reports from repeated runs
    over the same input are equal.
    """
    index: int
    transaction: Transaction
    error: BalanceError

    def _key(self):
        return (self.index, self.transaction, self.error.kind, self.error.to_dict())

    def __eq__(self, other) -> bool:
        if not isinstance(other, RejectedTransaction):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.index, self.error.kind))


@dataclass(frozen=True)
class BalanceReport:
    """Outcome of one balance calculation run"""
    address: WalletAddress
    balance: Decimal
    mode: FailureMode
    applied: int
    rejected: Tuple[RejectedTransaction, ...] = ()
    history: Tuple[Decimal, ...] = ()  # Balance after each applied transaction

    @property
    def is_clean(self) -> bool:
        """True when no transaction was rejected"""
        return not self.rejected

    @property
    def processed(self) -> int:
        return self.applied + len(self.rejected)


class BalanceCalculator:
    """
    Computes wallet balances from transaction histories.

    Holds no state between runs; one instance can serve any number of
    wallets, including from several threads.
    """

    def __init__(self, mode: Optional[Union[FailureMode, str]] = None):
        if mode is None:
            mode = get_config().failure_mode
        self.mode = FailureMode(mode)
        self.logger = get_logger("wallet_balance.balance")

    def calculate(
        self,
        address: WalletAddress,
        transactions: Iterable[Transaction],
        correlation_id: Optional[str] = None
    ) -> BalanceReport:
        """
        Calculate the balance of a wallet

        Args:
            address: Wallet address, already validated
            transactions: Transactions in the order they must be applied
            correlation_id: Optional ID attached to every log record of the run

        Returns:
            BalanceReport with the final balance

        Raises:
            TypeError: If address is not a WalletAddress or an item is not a Transaction
            InvalidTransactionAmount: FAIL_FAST mode, amount not finite and positive
            InsufficientFunds: FAIL_FAST mode, withdrawal above the current balance
        """
        if not isinstance(address, WalletAddress):
            raise TypeError(
                f"address must be a WalletAddress, got {type(address).__name__}; "
                "use validate_address() first"
            )

        log_action(
            self.logger, "info", "Balance calculation started",
            address=address.value, action="balance_started",
            correlation_id=correlation_id, extra={"mode": self.mode.value}
        )

        balance = ZERO
        history: List[Decimal] = []
        rejected: List[RejectedTransaction] = []

        for index, transaction in enumerate(transactions):
            if not isinstance(transaction, Transaction):
                raise TypeError(
                    f"Transaction {index} must be a Transaction, got {type(transaction).__name__}"
                )

            try:
                balance = self._apply(index, transaction, balance)
            except BalanceError as e:
                log_action(
                    self.logger, "warning", f"Transaction rejected: {e}",
                    address=address.value, action="transaction_rejected",
                    transaction_index=index, correlation_id=correlation_id,
                    extra={"error": e.kind.value}
                )
                if self.mode == FailureMode.FAIL_FAST:
                    raise
                rejected.append(RejectedTransaction(index, transaction, e))
                continue

            history.append(balance)
            log_action(
                self.logger, "debug",
                f"Applied {transaction.transaction_type.value} of {transaction.amount}",
                address=address.value, action="transaction_applied",
                transaction_index=index, correlation_id=correlation_id,
                extra={"balance": str(balance)}
            )

        report = BalanceReport(
            address=address,
            balance=balance,
            mode=self.mode,
            applied=len(history),
            rejected=tuple(rejected),
            history=tuple(history),
        )

        log_action(
            self.logger, "info", "Balance calculation finished",
            address=address.value, action="balance_finished",
            correlation_id=correlation_id,
            extra={
                "balance": str(balance),
                "applied": report.applied,
                "rejected": len(report.rejected),
            }
        )

        return report

    def _apply(self, index: int, transaction: Transaction, balance: Decimal) -> Decimal:
        """Apply one transaction to the balance and return the new balance"""
        amount = transaction.amount

        if not amount.is_finite():
            raise InvalidTransactionAmount(
                index, amount, "amount is not finite",
                transaction=transaction, balance=balance
            )
        if amount <= ZERO:
            raise InvalidTransactionAmount(
                index, amount, "amount must be positive",
                transaction=transaction, balance=balance
            )

        if transaction.transaction_type == TransactionType.DEPOSIT:
            try:
                with localcontext(BALANCE_CONTEXT):
                    return balance + amount
            except (Inexact, Overflow):
                raise InvalidTransactionAmount(
                    index, amount, "deposit exceeds balance precision",
                    transaction=transaction, balance=balance
                )

        if amount > balance:
            raise InsufficientFunds(index, amount, balance, transaction=transaction)

        try:
            with localcontext(BALANCE_CONTEXT):
                return balance - amount
        except Inexact:
            raise InvalidTransactionAmount(
                index, amount, "withdrawal exceeds balance precision",
                transaction=transaction, balance=balance
            )


def calculate_wallet_balance(
    address: WalletAddress,
    transactions: Iterable[Transaction],
    mode: Optional[Union[FailureMode, str]] = None
) -> BalanceReport:
    """Calculate a wallet balance with a one-off BalanceCalculator"""
    return BalanceCalculator(mode).calculate(address, transactions)
