"""Validation helpers shared by the budget tracker surfaces."""

from __future__ import annotations

from typing import Optional, Union

from .exceptions import ValidationError

CATEGORIES = (
    "Food",
    "Transport",
    "Entertainment",
    "Rent",
    "Utilities",
    "Books",
    "Other",
)

RECORD_TYPES = ("All", "Income", "Expense")

ALL_MONTHS = "All Months"
ALL_YEARS = "All Years"


def sanitize_amount_input(raw: Optional[str]) -> str:
    if raw is None:
        return ""
    return raw.replace(",", "").strip()


def parse_amount(raw: object, field: str = "amount") -> float:
    """Convert raw input to a float; sign and range are left to the caller."""
    if isinstance(raw, str):
        raw = sanitize_amount_input(raw)
        if not raw:
            raise ValidationError(f"{field} is required")
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be a numeric value") from exc


def validate_description(value: object) -> str:
    if not isinstance(value, str):
        raise ValidationError("description must be a string")
    if not value.strip():
        raise ValidationError("Description cannot be empty")
    return value


def normalize_record_type(value: Optional[str]) -> str:
    if value is None:
        return "All"
    canonical = value.strip().capitalize()
    if canonical not in RECORD_TYPES:
        raise ValidationError(f"type must be one of: {', '.join(RECORD_TYPES)}")
    return canonical


def normalize_month_filter(value: Union[int, str, None]) -> Optional[int]:
    """Return 1-12, or None for "all months" (None, 0 or "All Months")."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text or text.lower() in {"all", ALL_MONTHS.lower()}:
            return None
        try:
            value = int(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid month '{text}'") from exc
    if value == 0:
        return None
    if not 1 <= value <= 12:
        raise ValidationError("month must be between 1 and 12")
    return value


def normalize_year_filter(value: Union[int, str, None]) -> Optional[int]:
    """Return a year, or None for "all years" (None, "all" or "All Years")."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text or text.lower() in {"all", ALL_YEARS.lower()}:
            return None
        try:
            return int(text)
        except ValueError as exc:
            raise ValidationError(f"Invalid year '{text}'") from exc
    return int(value)
