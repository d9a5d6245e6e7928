from pathlib import Path

import pytest

from budget_core.models import Record
from budget_core.services import Ledger
from budget_core.storage import JSONStorage


@pytest.fixture
def storage(tmp_path: Path) -> JSONStorage:
    return JSONStorage(tmp_path / "data")


@pytest.fixture
def ledger(storage: JSONStorage) -> Ledger:
    return Ledger(storage)


@pytest.fixture
def paycheck() -> Record:
    return Record("2024-01-10", "Paycheck", 2000.00, "Salary", True)


@pytest.fixture
def groceries() -> Record:
    return Record("2024-01-15", "Groceries", 150.00, "Food", False)
