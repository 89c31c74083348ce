"""Ledger: split rows and settle who owes whom."""
import io
import logging
from typing import Iterable, Sequence

from fastapi import APIRouter, HTTPException, Request

from splitledger.schemas import LedgerRequest, RowSplitRequest, SettlementSummary, TransferItem
from splitledger.services.csv_source import read_rows
from splitledger.services.ledger import Ledger
from splitledger.services.report import format_transactions
from splitledger.services.transfers import InvalidRowError, Transfer, split_row

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _transfer_item(t: Transfer) -> TransferItem:
    return TransferItem(debtor=t.debtor, creditor=t.creditor, amount=t.amount, message=str(t))


def _row_fields(row: Sequence) -> list:
    # Names are keys of the balance map; the total is validated by parse_row.
    return [f if i == 1 else str(f) for i, f in enumerate(row)]


def _settle_rows(rows: Iterable[Sequence[str]]) -> SettlementSummary:
    ledger = Ledger()
    try:
        row_count = ledger.ingest(rows)
    except InvalidRowError as e:
        logger.warning(f"Rejected row {e.fields}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    balances = ledger.balances
    debtors = ledger.debtors
    creditors = ledger.creditors
    settlements = ledger.settle()
    return SettlementSummary(
        row_count=row_count,
        balances=balances,
        debtors=debtors,
        creditors=creditors,
        settlements=[_transfer_item(t) for t in settlements],
        transaction_count=len(settlements),
        report=format_transactions(settlements),
    )


@router.post("/split", response_model=list[TransferItem])
def split(data: RowSplitRequest):
    try:
        transfers = split_row(_row_fields(data.fields))
    except InvalidRowError as e:
        logger.warning(f"Rejected row {e.fields}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return [_transfer_item(t) for t in transfers]


@router.post("/settle", response_model=SettlementSummary)
def settle(data: LedgerRequest):
    return _settle_rows(_row_fields(row) for row in data.rows)


@router.post("/settle/csv", response_model=SettlementSummary)
async def settle_csv(request: Request):
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV body must be UTF-8 text")
    rows = list(read_rows(io.StringIO(text, newline="")))
    return _settle_rows(rows)
