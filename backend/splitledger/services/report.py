"""Plain-text rendering of settlement results."""
from typing import Iterable

from splitledger.services.transfers import Transfer


def format_transactions(transactions: Iterable[Transfer]) -> str:
    transactions = list(transactions)
    lines = [f"It will take ({len(transactions)}) transactions to settle all credits/debts:"]
    for i, t in enumerate(transactions, start=1):
        lines.append(f"{i}) {t}")
    return "\n".join(lines)


def format_balances(balances: dict[str, int]) -> str:
    return "\n".join(f"{name}: {bal:+d}" for name, bal in balances.items())
