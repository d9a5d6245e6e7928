"""Framework-agnostic business services for the budget tracker."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .exceptions import PersistenceError
from .models import Record
from .storage import JSONStorage
from .validators import normalize_month_filter, normalize_record_type, normalize_year_filter

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE = "transactions.json"


class Ledger:
    """Ordered, append-only collection of records kept in sync with one data file."""

    def __init__(self, storage: JSONStorage, resource: str = DEFAULT_RESOURCE) -> None:
        self._storage = storage
        self._resource = resource
        self._records: List[Record] = []
        self.load_error: Optional[PersistenceError] = None
        try:
            self.load()  # Hydrate in-memory state from persistence on construction.
        except PersistenceError as exc:
            logger.error("Error loading transactions: %s", exc)
            self.load_error = exc

    # Public API -----------------------------------------------------------
    def append(self, record: Record) -> None:
        """Add a record and persist the full sequence.

        The record stays in memory even when the save fails; the
        PersistenceError is re-raised so the caller can report it.
        """
        self._records.append(record)
        self.save()

    def all(self) -> Tuple[Record, ...]:
        return tuple(self._records)

    def filter(self, kind: Optional[str] = "All") -> List[Record]:
        canonical = normalize_record_type(kind)
        if canonical == "All":
            return list(self._records)
        wanted = canonical == "Income"
        return [record for record in self._records if record.is_income == wanted]

    def years(self) -> List[int]:
        return sorted({record.date.year for record in self._records})

    def monthly_summary(self, month: int, year: int) -> Tuple[float, float]:
        """Return (total_income, total_expense) for records dated in month/year."""
        total_income = 0.0
        total_expense = 0.0
        for record in self._records:
            if record.date.month != month or record.date.year != year:
                continue
            if record.is_income:
                total_income += record.amount
            else:
                total_expense += record.amount
        return total_income, total_expense

    def category_breakdown(
        self,
        month: Union[int, str, None] = None,
        year: Union[int, str, None] = None,
    ) -> Dict[str, float]:
        """Total expense amount per category, in first-seen category order.

        ``month`` of None/0 and ``year`` of None/"All Years" disable that filter.
        """
        month_filter = normalize_month_filter(month)
        year_filter = normalize_year_filter(year)
        breakdown: Dict[str, float] = {}
        for record in self._records:
            if record.is_income:
                continue
            if month_filter is not None and record.date.month != month_filter:
                continue
            if year_filter is not None and record.date.year != year_filter:
                continue
            breakdown[record.category] = breakdown.get(record.category, 0.0) + record.amount
        return breakdown

    def load(self) -> None:
        """Replace the in-memory sequence with the persisted one."""
        raw_records = self._storage.load(self._resource)
        try:
            records = [Record.from_dict(payload) for payload in raw_records]
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(
                f"Malformed transaction data in {self.path}: {exc}"
            ) from exc
        self._records = records
        logger.debug("Loaded %d transactions from %s", len(records), self.path)

    def save(self) -> None:
        try:
            # Persist current snapshot; storage layer handles atomic writes.
            self._storage.save(self._resource, [record.to_dict() for record in self._records])
        except PersistenceError as exc:
            logger.error("Error saving transactions: %s", exc)
            raise
        logger.debug("Saved %d transactions to %s", len(self._records), self.path)

    @property
    def path(self):
        return self._storage.path_for(self._resource)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(tuple(self._records))
