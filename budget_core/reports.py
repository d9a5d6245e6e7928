"""Summaries, selection choices and CSV export built on top of the ledger."""

from __future__ import annotations

import calendar
import csv
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Iterable, List, Optional

from .exceptions import PersistenceError
from .models import Record
from .validators import ALL_MONTHS, ALL_YEARS

logger = logging.getLogger(__name__)

CSV_HEADER = ("Date", "Description", "Amount", "Category", "Type")

MONTH_NAMES = tuple(calendar.month_name[1:])


@dataclass(frozen=True)
class MonthlySummary:
    month: int
    year: int
    income: float
    expense: float

    @property
    def net_savings(self) -> float:
        return self.income - self.expense

    @property
    def savings_rate(self) -> float:
        if self.income <= 0:
            return 0.0
        return self.net_savings / self.income * 100

    @property
    def is_empty(self) -> bool:
        return self.income == 0 and self.expense == 0

    def to_text(self) -> str:
        return (
            f"Monthly Summary for {calendar.month_name[self.month]} {self.year}\n\n"
            f"Total Income: ${self.income:,.2f}\n"
            f"Total Expenses: ${self.expense:,.2f}\n"
            f"Net Savings: ${self.net_savings:,.2f}\n\n"
            f"Savings Rate: {self.savings_rate:.1f}%"
        )


def monthly_summary(ledger, month: int, year: int) -> MonthlySummary:
    income, expense = ledger.monthly_summary(month, year)
    return MonthlySummary(month=month, year=year, income=income, expense=expense)


def year_choices(today: Optional[date] = None, span: int = 5) -> List[int]:
    current = (today or date.today()).year
    return list(range(current - span, current + span + 1))


def breakdown_month_choices() -> List[str]:
    return [ALL_MONTHS, *MONTH_NAMES]


def breakdown_year_choices(today: Optional[date] = None) -> List[str]:
    return [ALL_YEARS, *(str(year) for year in year_choices(today))]


def format_amount_display(value: float) -> str:
    return f"{value:,.2f}"


def csv_row(record: Record) -> List[object]:
    return [
        record.date.isoformat(),
        record.description,
        Decimal(f"{record.amount:.2f}"),
        record.category,
        record.kind,
    ]


def export_csv(records: Iterable[Record], path: Path) -> int:
    """Write records to ``path`` as CSV and return the number of rows written."""
    path = Path(path)
    count = 0
    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            csv.writer(handle, lineterminator="\n").writerow(CSV_HEADER)
            writer = csv.writer(handle, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
            for record in records:
                writer.writerow(csv_row(record))
                count += 1
    except OSError as exc:
        raise PersistenceError(f"Error exporting data to {path}") from exc
    logger.info("Exported %d transactions to %s", count, path)
    return count
