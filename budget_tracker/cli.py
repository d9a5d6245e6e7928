"""Console interface for the budget tracker."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from budget_core.config import Settings, configure_logging, load_settings
from budget_core.exceptions import PersistenceError, ValidationError
from budget_core.models import Record
from budget_core.reports import export_csv, format_amount_display, monthly_summary
from budget_core.services import Ledger
from budget_core.storage import JSONStorage
from budget_core.validators import (
    CATEGORIES,
    RECORD_TYPES,
    parse_amount,
    validate_description,
)


def _parse_amount(value: str) -> float:
    try:
        return parse_amount(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_month(value: str) -> int:
    try:
        month = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid month '{value}'") from exc
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError("Month must be between 1 and 12")
    return month


def _load_ledger(settings: Settings) -> Ledger:
    return Ledger(JSONStorage(settings.data_dir), settings.resource)


def _format_record(record: Record) -> str:
    return (
        f"{record.date.isoformat()}  {record.kind:<7}  "
        f"{format_amount_display(record.amount):>12}  {record.category:<13}  {record.description}"
    )


def handle_add(args: argparse.Namespace, ledger: Ledger) -> None:
    record = Record(
        date=args.date,
        description=validate_description(args.description),
        amount=args.amount,
        category=args.category,
        is_income=args.income,
    )
    ledger.append(record)
    print("Transaction added:\n" + _format_record(record))


def handle_list(args: argparse.Namespace, ledger: Ledger) -> None:
    records = ledger.filter(args.type)
    if not records:
        print("No transactions found.")
        return
    print(f"Found {len(records)} transactions:")
    for record in records:
        print(_format_record(record))


def handle_summary(args: argparse.Namespace, ledger: Ledger) -> None:
    print(monthly_summary(ledger, args.month, args.year).to_text())


def handle_categories(args: argparse.Namespace, ledger: Ledger) -> None:
    breakdown = ledger.category_breakdown(args.month, args.year)
    if not breakdown:
        print("No expense data available.")
        return
    total = sum(breakdown.values())
    for category, amount in breakdown.items():
        print(f"{category:<13} {format_amount_display(amount):>12}  {_share(amount, total)}")
    print(f"{'Total':<13} {format_amount_display(total):>12}")


def _share(amount: float, total: float) -> str:
    if total <= 0:
        return "    -"
    return f"{amount / total * 100:5.1f}%"


def handle_export(args: argparse.Namespace, ledger: Ledger) -> None:
    count = export_csv(ledger.all(), args.path)
    print(f"Exported {count} transactions to {args.path}")


HANDLERS = {
    "add": handle_add,
    "list": handle_list,
    "summary": handle_summary,
    "categories": handle_categories,
    "export": handle_export,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Budget Tracker CLI")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding transactions.json (default: $BUDGET_TRACKER_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: $BUDGET_TRACKER_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Record a new transaction")
    add.add_argument("date", help="Transaction date (YYYY-MM-DD)")
    add.add_argument("description")
    add.add_argument("amount", type=_parse_amount)
    add.add_argument("--category", default="Other", help=f"One of: {', '.join(CATEGORIES)}")
    add.add_argument("--income", action="store_true", help="Record as income (default: expense)")

    list_parser = subparsers.add_parser("list", help="List transactions")
    list_parser.add_argument("--type", default="All", choices=RECORD_TYPES)

    summary = subparsers.add_parser("summary", help="Income and expense totals for a month")
    summary.add_argument("month", type=_parse_month)
    summary.add_argument("year", type=int)

    categories = subparsers.add_parser("categories", help="Expense totals per category")
    categories.add_argument("--month", type=_parse_month, help="Month 1-12 (default: all months)")
    categories.add_argument("--year", help="Year (default: all years)")

    export = subparsers.add_parser("export", help="Export all transactions to CSV")
    export.add_argument("path", type=Path)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.data_dir, args.log_level)
    configure_logging(settings.log_level)

    ledger = _load_ledger(settings)
    if ledger.load_error is not None:
        print(f"Error loading transactions: {ledger.load_error}", file=sys.stderr)

    try:
        HANDLERS[args.command](args, ledger)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
