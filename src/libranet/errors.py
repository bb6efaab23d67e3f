"""Lending error types.

Every failure of a lending operation is raised as a subclass of
LendingError at the point of failure, with the item left untouched.
"""

from datetime import datetime
from typing import Optional


class LendingError(Exception):
    """Base class for lending errors."""

    pass


class InvalidIdFormatError(LendingError, ValueError):
    """Raised when an item ID is not a decimal integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid ID format: {text!r}")


class InvalidDurationFormatError(LendingError, ValueError):
    """Raised when a borrow duration is not an ISO-8601 duration."""

    def __init__(self, text: str, detail: Optional[str] = None):
        self.text = text
        self.detail = detail
        message = f"Invalid borrow duration format {text!r}. Use ISO-8601 format, e.g. PT72H"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ItemUnavailableError(LendingError):
    """Raised when borrowing an item that is still on loan."""

    def __init__(self, item_id: int, borrow_end_time: Optional[datetime] = None):
        self.item_id = item_id
        self.borrow_end_time = borrow_end_time
        message = f"Item {item_id} not available for borrowing"
        if borrow_end_time is not None:
            message = f"{message} until {borrow_end_time.isoformat()}"
        super().__init__(message)


class NotBorrowedError(LendingError):
    """Raised when returning or playing an item that is not on loan."""

    def __init__(self, item_id: int, message: Optional[str] = None):
        self.item_id = item_id
        super().__init__(message or f"Item {item_id} was not borrowed")
