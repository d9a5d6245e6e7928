import pytest

from budget_core.services import Ledger
from budget_core.storage import JSONStorage
from budget_tracker.cli import main


@pytest.fixture
def run(tmp_path, capsys):
    data_dir = tmp_path / "data"

    def _run(*argv):
        code = main(["--data-dir", str(data_dir), *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    _run.data_dir = data_dir
    return _run


def test_add_persists_transaction(run):
    code, out, _ = run("add", "2024-01-10", "Paycheck", "2000", "--category", "Other", "--income")

    assert code == 0
    assert "Transaction added" in out
    records = Ledger(JSONStorage(run.data_dir)).all()
    assert len(records) == 1
    assert records[0].is_income is True
    assert records[0].amount == 2000.0


def test_add_rejects_empty_description(run):
    code, _, err = run("add", "2024-01-10", "  ", "20")

    assert code == 1
    assert "Description cannot be empty" in err
    assert Ledger(JSONStorage(run.data_dir)).all() == ()


def test_add_rejects_non_numeric_amount(run):
    with pytest.raises(SystemExit) as excinfo:
        run("add", "2024-01-10", "Coffee", "four")
    assert excinfo.value.code == 2


def test_list_filters_by_type(run):
    run("add", "2024-01-10", "Paycheck", "2000", "--income")
    run("add", "2024-01-15", "Groceries", "150", "--category", "Food")

    code, out, _ = run("list", "--type", "Expense")

    assert code == 0
    assert "Found 1 transactions" in out
    assert "Groceries" in out
    assert "Paycheck" not in out


def test_list_on_empty_ledger(run):
    code, out, _ = run("list")

    assert code == 0
    assert "No transactions found." in out


def test_summary_and_categories(run):
    run("add", "2024-01-10", "Paycheck", "2000", "--income", "--category", "Other")
    run("add", "2024-01-15", "Groceries", "150", "--category", "Food")

    _, summary, _ = run("summary", "1", "2024")
    assert "Total Income: $2,000.00" in summary
    assert "Total Expenses: $150.00" in summary

    _, categories, _ = run("categories", "--month", "1", "--year", "2024")
    assert "Food" in categories
    assert "Other" not in categories


def test_categories_rejects_bad_year(run):
    code, _, err = run("categories", "--year", "soon")

    assert code == 1
    assert "Invalid year" in err


def test_export_writes_csv(run, tmp_path):
    run("add", "2024-01-15", "Groceries", "150", "--category", "Food")
    target = tmp_path / "out.csv"

    code, out, _ = run("export", str(target))

    assert code == 0
    assert "Exported 1 transactions" in out
    assert target.read_text(encoding="utf-8").startswith("Date,Description,Amount,Category,Type\n")


def test_corrupt_data_file_is_reported_but_not_fatal(run):
    run.data_dir.mkdir(parents=True)
    (run.data_dir / "transactions.json").write_text("garbage", encoding="utf-8")

    code, out, err = run("list")

    assert code == 0
    assert "Error loading transactions" in err
    assert "No transactions found." in out


def test_categories_with_zero_total_prints_without_percentages(run):
    run("add", "2024-01-02", "Refund", "-20", "--category", "Food")
    run("add", "2024-01-03", "Lunch", "20", "--category", "Food")

    code, out, _ = run("categories")

    assert code == 0
    assert "Food" in out
    assert "%" not in out
