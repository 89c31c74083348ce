"""Net balances per participant and greedy settlement of who owes whom."""
import logging
from typing import Iterable, Optional, Sequence

from splitledger.services.transfers import Transfer, split_row

logger = logging.getLogger(__name__)


def debtors(balances: dict[str, int]) -> dict[str, int]:
    """Participants with a negative balance (they owe money)."""
    return {name: bal for name, bal in balances.items() if bal < 0}


def creditors(balances: dict[str, int]) -> dict[str, int]:
    """Participants with a positive balance (they are owed money)."""
    return {name: bal for name, bal in balances.items() if bal > 0}


def max_creditor(balances: dict[str, int]) -> tuple[Optional[str], int]:
    best_name, best_amount = None, 0
    for name, amount in balances.items():
        if amount > best_amount:
            best_name, best_amount = name, amount
    return best_name, best_amount


def max_debtor(balances: dict[str, int]) -> tuple[Optional[str], int]:
    best_name, best_amount = None, 0
    for name, amount in balances.items():
        if amount < best_amount:
            best_name, best_amount = name, amount
    return best_name, best_amount


class Ledger:
    """
    Owns the balance of every participant and the settlement transfers.

    Positive balance = is owed money, negative balance = owes money. Every
    change is applied as a +amount/-amount pair so the balances always sum to 0.
    """

    def __init__(self):
        self.accounts: dict[str, int] = {}
        self._transactions: list[Transfer] = []

    def _adjust(self, name: str, amount: int) -> None:
        self.accounts[name] = self.accounts.get(name, 0) + amount

    def reconcile(self, transfer: Transfer) -> None:
        self._adjust(transfer.creditor, transfer.amount)
        self._adjust(transfer.debtor, -transfer.amount)
        logger.debug(f"Reconciled {transfer.debtor!r} -> {transfer.creditor!r}: {transfer.amount}")

    def ingest(self, rows: Iterable[Sequence]) -> int:
        """Split and reconcile every row, in order. Returns the number of rows read."""
        count = 0
        for fields in rows:
            for transfer in split_row(fields):
                self.reconcile(transfer)
            count += 1
        logger.info(f"Ingested {count} rows covering {len(self.accounts)} participants")
        return count

    def settle(self) -> list[Transfer]:
        """
        Pair the largest creditor with the largest debtor until one side runs out.
        Returns the transfers added by this call.
        """
        produced: list[Transfer] = []
        creditor, credit = max_creditor(self.accounts)
        debtor, debt = max_debtor(self.accounts)

        while credit != 0 and debt != 0:
            amount = min(credit, abs(debt))
            self.accounts[creditor] -= amount
            self.accounts[debtor] += amount
            transfer = Transfer(debtor=debtor, creditor=creditor, amount=amount)
            self._transactions.append(transfer)
            produced.append(transfer)
            logger.debug(f"Settlement step: {transfer}")

            creditor, credit = max_creditor(self.accounts)
            debtor, debt = max_debtor(self.accounts)

        logger.info(f"Settled with {len(produced)} transactions")
        return produced

    @property
    def balances(self) -> dict[str, int]:
        return dict(self.accounts)

    @property
    def debtors(self) -> dict[str, int]:
        return debtors(self.accounts)

    @property
    def creditors(self) -> dict[str, int]:
        return creditors(self.accounts)

    @property
    def transactions(self) -> tuple[Transfer, ...]:
        return tuple(self._transactions)

    @property
    def settlement_transactions(self) -> Optional[list[Transfer]]:
        if self._transactions:
            return list(self._transactions)
        return None
