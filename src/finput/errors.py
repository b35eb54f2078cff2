"""Custom exceptions for finput."""


class FinputError(Exception):
    """Base class for finput errors."""


class OptionsError(FinputError, ValueError):
    """Raised when an Options value is out of range or inconsistent."""


class FinputClosedError(FinputError):
    """Raised when a destroyed field binding is used again."""
