"""Data models for the budget tracker domain."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Union

from .exceptions import ValidationError

__all__ = ["Record", "parse_record_date"]

logger = logging.getLogger(__name__)


def parse_record_date(value: Union[str, date]) -> date:
    """Parse YYYY-MM-DD text, falling back to today's date when it does not parse."""
    if isinstance(value, date):
        return value
    try:
        # %m and %d also accept unpadded fields such as 2024-3-5.
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        # Typos silently become today; callers are not told.
        logger.warning("Unparseable date %r; using today's date", value)
        return date.today()


@dataclass(frozen=True)
class Record:
    date: date
    description: str
    amount: float
    category: str
    is_income: bool

    def __post_init__(self) -> None:
        if not self.description:
            raise ValidationError("Description cannot be empty")
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "date", parse_record_date(self.date))
        object.__setattr__(self, "amount", float(self.amount))
        object.__setattr__(self, "is_income", bool(self.is_income))

    @property
    def kind(self) -> str:
        return "Income" if self.is_income else "Expense"

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the record to JSON-friendly natives."""
        return {
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "is_income": self.is_income,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        """Hydrate a Record from JSON-native data.

        Stored dates must be valid; unlike user input they never fall back to today.
        """
        return cls(
            date=date.fromisoformat(data["date"]),
            description=data["description"],
            amount=float(data["amount"]),
            category=data["category"],
            is_income=bool(data["is_income"]),
        )
