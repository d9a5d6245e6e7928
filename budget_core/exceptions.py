"""Domain-specific exceptions for the budget tracker core."""

class ValidationError(ValueError):
    """Raised when user input does not meet validation requirements."""


class PersistenceError(IOError):
    """Raised when the data file or an export file cannot be read or written."""
