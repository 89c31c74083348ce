"""Read expense rows from CSV and build a settled ledger."""
import csv
import logging
import os
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from splitledger.services.ledger import Ledger

logger = logging.getLogger(__name__)

LEDGER_INPUT_FILE = os.getenv("LEDGER_INPUT_FILE", "./transactions.csv")

Source = Union[str, os.PathLike, TextIO]


def _iter_fields(stream: TextIO) -> Iterator[list[str]]:
    for fields in csv.reader(stream):
        if not fields or all(f == "" for f in fields):
            continue
        yield fields


def read_rows(source: Source) -> Iterator[list[str]]:
    """Yield [payer, amount, beneficiary, ...] rows; rows may have any number of fields."""
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        logger.info(f"Reading rows from {path}")
        with path.open(newline="", encoding="utf-8") as f:
            yield from _iter_fields(f)
    else:
        yield from _iter_fields(source)


def load_ledger(source: Optional[Source] = None, settle: bool = True) -> Ledger:
    """Ingest every row from source, then settle unless told not to. Defaults to LEDGER_INPUT_FILE."""
    if source is None:
        source = LEDGER_INPUT_FILE
    ledger = Ledger()
    # All rows must be reconciled before settlement starts.
    ledger.ingest(list(read_rows(source)))
    if settle:
        ledger.settle()
    return ledger
