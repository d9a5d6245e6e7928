"""Core record-keeping logic for the budget tracker."""

from .models import Record
from .services import Ledger
from .storage import JSONStorage
from .exceptions import PersistenceError, ValidationError

__all__ = [
    "Record",
    "Ledger",
    "JSONStorage",
    "PersistenceError",
    "ValidationError",
]
