from datetime import date

import pytest

from budget_core.exceptions import ValidationError
from budget_core.models import Record, parse_record_date


def test_record_exposes_constructor_values():
    record = Record("2024-03-15", "Coffee", 4.50, "Food", False)

    assert record.date == date(2024, 3, 15)
    assert record.description == "Coffee"
    assert record.amount == 4.50
    assert record.category == "Food"
    assert record.is_income is False
    assert record.kind == "Expense"


def test_empty_description_is_rejected():
    with pytest.raises(ValidationError):
        Record("2024-03-15", "", 4.50, "Food", False)


def test_unparseable_date_falls_back_to_today():
    record = Record("not-a-date", "Coffee", 4.50, "Food", False)

    assert record.date == date.today()


def test_date_values_are_kept_as_is():
    assert parse_record_date(date(2023, 12, 31)) == date(2023, 12, 31)


def test_records_are_immutable():
    record = Record("2024-03-15", "Coffee", 4.50, "Food", False)

    with pytest.raises(AttributeError):
        record.amount = 5.0  # type: ignore[misc]


def test_dict_round_trip_preserves_fields():
    record = Record("2024-01-10", "Paycheck", 2000.0, "Salary", True)

    data = record.to_dict()
    assert data == {
        "date": "2024-01-10",
        "description": "Paycheck",
        "amount": 2000.0,
        "category": "Salary",
        "is_income": True,
    }
    assert Record.from_dict(data) == record


def test_from_dict_rejects_bad_stored_date():
    with pytest.raises(ValueError):
        Record.from_dict(
            {"date": "garbage", "description": "x", "amount": 1, "category": "Food", "is_income": False}
        )


def test_unpadded_date_fields_are_accepted():
    assert Record("2024-3-5", "Coffee", 4.50, "Food", False).date == date(2024, 3, 5)


@pytest.mark.parametrize("text", ["20240315", "2024-W11-5", "2024/03/15", "2024-02-30"])
def test_non_dashed_or_impossible_dates_fall_back_to_today(text):
    assert parse_record_date(text) == date.today()
