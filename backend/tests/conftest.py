import pytest
from fastapi.testclient import TestClient

from splitledger.main import app
from splitledger.services.ledger import Ledger


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def ledger():
    return Ledger()


@pytest.fixture
def sample_rows():
    return [["A", "300", "B", "C"], ["B", "90", "A"]]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text("A,300,B,C\nB,90,A\n")
    return path
