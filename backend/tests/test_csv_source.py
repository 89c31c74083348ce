import io

import pytest

from splitledger.services import csv_source
from splitledger.services.csv_source import load_ledger, read_rows
from splitledger.services.report import format_balances, format_transactions
from splitledger.services.transfers import InvalidRowError, Transfer


def test_read_rows_variable_length(csv_file):
    assert list(read_rows(csv_file)) == [["A", "300", "B", "C"], ["B", "90", "A"]]


def test_read_rows_skips_blank_lines():
    stream = io.StringIO("A,10,B\n\n,,\nC,20,D,E,F\n")
    assert list(read_rows(stream)) == [["A", "10", "B"], ["C", "20", "D", "E", "F"]]


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(OSError):
        list(read_rows(tmp_path / "missing.csv"))


def test_load_ledger_settles(csv_file):
    ledger = load_ledger(csv_file)
    assert [str(t) for t in ledger.settlement_transactions] == ["C owes 150 A", "B owes 60 A"]
    assert set(ledger.balances.values()) == {0}


def test_load_ledger_without_settling(csv_file):
    ledger = load_ledger(csv_file, settle=False)
    assert ledger.balances == {"B": 60, "A": -210, "C": 150}
    assert ledger.settlement_transactions is None


def test_load_ledger_default_path(csv_file, monkeypatch):
    monkeypatch.setattr(csv_source, "LEDGER_INPUT_FILE", str(csv_file))
    assert len(load_ledger().transactions) == 2


def test_load_ledger_bad_row(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("A,300,B\nB,lots,A\n")
    with pytest.raises(InvalidRowError):
        load_ledger(path)


def test_load_ledger_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    ledger = load_ledger(path)
    assert ledger.balances == {}
    assert ledger.settlement_transactions is None


def test_format_transactions():
    text = format_transactions([
        Transfer(debtor="A", creditor="C", amount=150),
        Transfer(debtor="A", creditor="B", amount=60),
    ])
    assert text == (
        "It will take (2) transactions to settle all credits/debts:\n"
        "1) C owes 150 A\n"
        "2) B owes 60 A"
    )


def test_format_transactions_empty():
    assert format_transactions([]) == "It will take (0) transactions to settle all credits/debts:"


def test_format_balances():
    assert format_balances({"A": -210, "B": 60, "C": 0}) == "A: -210\nB: +60\nC: +0"
