"""Split raw expense rows into per-beneficiary transfers."""
import re
from dataclasses import dataclass
from typing import Sequence, Union

_AMOUNT_RE = re.compile(r"-?[0-9]+")


class InvalidRowError(ValueError):
    """A row that cannot be split: no beneficiaries or a bad total amount."""

    def __init__(self, message: str, fields: Sequence = ()):
        super().__init__(message)
        self.fields = list(fields)


@dataclass(frozen=True)
class Transfer:
    """debtor owes creditor amount."""
    debtor: str
    creditor: str
    amount: int

    def __str__(self) -> str:
        # Field order kept as "<creditor> owes <amount> <debtor>".
        return f"{self.creditor} owes {self.amount} {self.debtor}"


@dataclass(frozen=True)
class InputRow:
    payer: str
    total_amount: int
    beneficiaries: tuple[str, ...]

    @property
    def share(self) -> int:
        # Remainder of the division is dropped, not allocated.
        return self.total_amount // len(self.beneficiaries)


def _parse_amount(value, fields: Sequence) -> int:
    if isinstance(value, bool):
        raise InvalidRowError(f"Total amount must be an integer, got {value!r}", fields)
    if isinstance(value, int):
        amount = value
    else:
        text = str(value).strip()
        if not _AMOUNT_RE.fullmatch(text):
            raise InvalidRowError(f"Total amount must be an integer, got {value!r}", fields)
        amount = int(text)
    if amount < 0:
        raise InvalidRowError(f"Total amount must not be negative, got {amount}", fields)
    return amount


def parse_row(fields: Sequence) -> InputRow:
    """
    fields: [payer, totalAmount, beneficiary1, beneficiary2, ...]
    Raises InvalidRowError when the row has no beneficiaries or the total is not an integer.
    """
    fields = list(fields)
    if len(fields) < 2:
        raise InvalidRowError("Row needs a payer and a total amount", fields)
    payer, raw_amount, *beneficiaries = fields
    if not beneficiaries:
        raise InvalidRowError(f"Row for payer {payer!r} has no beneficiaries", fields)
    amount = _parse_amount(raw_amount, fields)
    return InputRow(payer=payer, total_amount=amount, beneficiaries=tuple(beneficiaries))


def split_row(row: Union[InputRow, Sequence]) -> list[Transfer]:
    """One transfer per beneficiary, each for an equal (floored) share of the total."""
    if not isinstance(row, InputRow):
        row = parse_row(row)
    if not row.beneficiaries:
        raise InvalidRowError(f"Row for payer {row.payer!r} has no beneficiaries")
    share = row.share
    return [Transfer(debtor=row.payer, creditor=b, amount=share) for b in row.beneficiaries]
