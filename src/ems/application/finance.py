"""Application service: process transactions against a savings account.

Each transaction goes through a payment channel, is debited from the
account and is then kept in the transaction store. A transaction the
account refuses is not kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ems.application.dto import TransactionLineDTO
from ems.domain.exceptions import DomainException, InvalidValueError
from ems.domain.model.finance import (
    Account,
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    SavingsAccount,
    Transaction,
    TransactionProcessor,
)
from ems.domain.model.value_objects import Money
from ems.domain.store import EntityStore
from ems.domain.validation import parse_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordOutcome:
    channel_message: str
    account_message: str


class TransactionRefusedError(InvalidValueError):
    """The account refused a debit after the channel had processed it.

    Carries the channel's message so callers can still report it.
    """

    def __init__(self, message: str, channel_message: str) -> None:
        super().__init__(message)
        self.channel_message = channel_message


class FinanceService:

    def __init__(
        self,
        transactions: EntityStore[int, Transaction],
        account: Account | None = None,
    ) -> None:
        self._transactions = transactions
        self._account = account

    @property
    def account(self) -> Account:
        if self._account is None:
            raise InvalidValueError("No account has been opened.")
        return self._account

    def open_savings_account(self, account_number: str, initial_balance: str) -> SavingsAccount:
        balance = parse_decimal(initial_balance, "Initial Balance")
        account = SavingsAccount(account_number, Money(balance))
        self._account = account
        logger.info("opened %s with %s", account.account_number, account.balance)
        return account

    def record(
        self, transaction: Transaction, processor: TransactionProcessor
    ) -> RecordOutcome:
        """Process, debit and store *transaction*.

        The transaction is stored first so key and amount checks happen
        before any money moves; if the account then refuses the debit the
        stored transaction is taken out again and TransactionRefusedError
        is raised with the channel message attached.
        """
        account = self.account
        self._transactions.add(transaction)
        channel_message = processor.process(transaction)
        try:
            account_message = account.apply_transaction(transaction)
        except InvalidValueError as exc:
            self._transactions.remove(transaction.id)
            logger.info("transaction %s refused: %s", transaction.id, exc)
            raise TransactionRefusedError(str(exc), channel_message) from exc
        return RecordOutcome(channel_message, account_message)

    def list_transactions(self) -> list[TransactionLineDTO]:
        return [
            TransactionLineDTO(
                id=tx.id,
                category=tx.category,
                amount=str(tx.amount),
                date=tx.date.strftime("%Y-%m-%d %H:%M"),
            )
            for tx in self._transactions.list_all()
        ]

    def run_demo(self, now: datetime | None = None) -> list[str]:
        """Replay the sample session and return its console lines."""
        now = now or datetime.now()
        account = self.open_savings_account("SA-1000", "1000")
        lines = [f"Created {account.account_number} with {account.balance}", ""]

        batch: list[tuple[Transaction, TransactionProcessor]] = [
            (Transaction(1, now, Money.of("120.50"), "Groceries"), MobileMoneyProcessor()),
            (Transaction(2, now, Money.of("250"), "Utilities"), BankTransferProcessor()),
            (Transaction(3, now, Money.of("800"), "Entertainment"), CryptoWalletProcessor()),
        ]
        for transaction, processor in batch:
            try:
                outcome = self.record(transaction, processor)
            except TransactionRefusedError as exc:
                lines.append(exc.channel_message)
                lines.append(f"[Error] {exc}")
                continue
            except DomainException as exc:
                lines.append(f"[Error] {exc}")
                continue
            lines.append(outcome.channel_message)
            lines.append(outcome.account_message)

        lines.append("")
        lines.append("Stored Transactions:")
        for line in self.list_transactions():
            lines.append(f"ID {line.id}: {line.category} {line.amount} on {line.date}")
        return lines
