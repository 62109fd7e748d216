"""Errors raised by store adapters."""


class MealStoreError(RuntimeError):
    """Raised when the remote store rejects or fails a request."""


class DuplicateMealError(MealStoreError):
    """Raised when an active record already exists for the employee and day."""
