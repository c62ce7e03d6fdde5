"""Transactions, accounts and the channels that process payments.

Accounts are the one mutable aggregate in this package: applying a
transaction changes the balance in place, the same way an inventory item
changes its reservations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from ems.domain.exceptions import InvalidValueError
from ems.domain.model.value_objects import Money


@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Money
    category: str

    def __str__(self) -> str:
        return f"ID {self.id}: {self.category} {self.amount} on {self.date:%Y-%m-%d %H:%M}"


# ---------------------------------------------------------------------------
# Processors
# ---------------------------------------------------------------------------


class TransactionProcessor(Protocol):
    def process(self, transaction: Transaction) -> str: ...


class BankTransferProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[BankTransfer] {transaction.category}: {transaction.amount} "
            f"processed via Bank Transfer."
        )


class MobileMoneyProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[MobileMoney] {transaction.category}: {transaction.amount} "
            f"processed via Mobile Money."
        )


class CryptoWalletProcessor:
    def process(self, transaction: Transaction) -> str:
        return (
            f"[CryptoWallet] {transaction.category}: {transaction.amount} "
            f"processed via Crypto Wallet."
        )


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


class Account:
    """A plain account. Debits always succeed, even into overdraft."""

    label = "Account"

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        if not account_number or not account_number.strip():
            raise InvalidValueError("Account number is required.")
        self.account_number = account_number.strip()
        self.balance = initial_balance

    def apply_transaction(self, transaction: Transaction) -> str:
        """Debit the transaction amount and describe the new balance."""
        self.balance = self.balance - transaction.amount
        return f"[{self.label}] -{transaction.amount}. New Balance: {self.balance}"


class SavingsAccount(Account):
    """An account that can never be overdrawn."""

    label = "SavingsAccount"

    def apply_transaction(self, transaction: Transaction) -> str:
        if transaction.amount > self.balance:
            raise InvalidValueError("Insufficient funds")
        self.balance = self.balance - transaction.amount
        return (
            f"[{self.label}] Deducted {transaction.amount}. "
            f"Updated Balance: {self.balance}"
        )
