"""Pydantic schemas for request/response."""
from typing import Union

from pydantic import BaseModel


# ----- Rows -----
class RowSplitRequest(BaseModel):
    fields: list[Union[str, int]]


class LedgerRequest(BaseModel):
    rows: list[list[Union[str, int]]] = []


# ----- Settlement -----
class TransferItem(BaseModel):
    debtor: str
    creditor: str
    amount: int
    message: str


class SettlementSummary(BaseModel):
    row_count: int
    balances: dict[str, int]
    debtors: dict[str, int]
    creditors: dict[str, int]
    settlements: list[TransferItem]
    transaction_count: int
    report: str
