"""In-memory lendable items.

Items:
- Book: printed book with a page count
- AudioBook: playable audiobook with a playback duration
- EMagazine: e-magazine issue that can be archived

Every item runs the same borrow/return state machine. Loan expiry is
lazy: there is no timer, a lapsed loan only becomes available again when
availability is checked.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Optional, Protocol, TextIO, runtime_checkable

from ..errors import InvalidDurationFormatError, ItemUnavailableError, NotBorrowedError
from ..utils import parse_duration
from .schemas import ItemKind, ItemResponse, ItemState

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class LendableItem(ABC):
    """Base item - owns the availability state and borrow window."""

    def __init__(
        self,
        id: int,
        title: str,
        author: str,
        fine_per_day: float,
        *,
        clock: Optional[Clock] = None,
        output: Optional[TextIO] = None,
    ):
        """Initialize an available item.

        Args:
            id: Unique item ID
            title: Item title
            author: Item author
            fine_per_day: Per-day fine rate, stored only
            clock: Time source, defaults to the current UTC time
            output: Stream for play/archive messages, defaults to stdout
        """
        if fine_per_day < 0:
            raise ValueError("fine_per_day must be non-negative")

        self._id = id
        self._title = title
        self._author = author
        self._fine_per_day = fine_per_day
        self._clock = clock or utc_now
        self._output = output

        self._available = True
        self._borrow_end_time: Optional[datetime] = None

    @property
    @abstractmethod
    def kind(self) -> ItemKind:
        """Kind of this item."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self._id}, title='{self._title}', state={self.state.value})>"

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def fine_per_day(self) -> float:
        return self._fine_per_day

    @property
    def borrow_end_time(self) -> Optional[datetime]:
        """End of the current borrow window, None when available."""
        self.is_available()
        return self._borrow_end_time

    @property
    def state(self) -> ItemState:
        """Current state, after the expiry check."""
        return ItemState.AVAILABLE if self.is_available() else ItemState.BORROWED

    def get_id(self) -> int:
        return self._id

    def get_title(self) -> str:
        return self._title

    # -------------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------------

    def is_available(self) -> bool:
        """Check availability, expiring a lapsed loan first.

        Returns:
            True if the item can be borrowed
        """
        if self._available:
            return True

        if self._clock() > self._borrow_end_time:
            self._available = True
            self._borrow_end_time = None
            return True

        return False

    def borrow(self, duration_spec: str) -> None:
        """Borrow the item for an ISO-8601 duration.

        Args:
            duration_spec: Borrow duration, e.g. "PT72H"

        Raises:
            ItemUnavailableError: If the item is on loan and not yet expired
            InvalidDurationFormatError: If the duration cannot be parsed
        """
        if not self.is_available():
            raise ItemUnavailableError(self._id, self._borrow_end_time)

        duration = parse_duration(duration_spec)
        try:
            borrow_end_time = self._clock() + duration
        except OverflowError as e:
            raise InvalidDurationFormatError(duration_spec, "duration out of range") from e

        self._borrow_end_time = borrow_end_time
        self._available = False

    def return_item(self) -> None:
        """Return a borrowed item.

        A loan whose window has already lapsed counts as not borrowed, so
        returning it raises instead of being a no-op.

        Raises:
            NotBorrowedError: If the item is available
        """
        if self.is_available():
            raise NotBorrowedError(self._id, f"Item {self._id} was not borrowed")

        self._available = True
        self._borrow_end_time = None

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def _details(self) -> dict[str, Any]:
        """Kind-specific fields for snapshots."""
        return {}

    def to_response(self) -> ItemResponse:
        """Snapshot of the item after the expiry check."""
        available = self.is_available()
        return ItemResponse(
            id=self._id,
            kind=self.kind,
            title=self._title,
            author=self._author,
            fine_per_day=self._fine_per_day,
            state=ItemState.AVAILABLE if available else ItemState.BORROWED,
            borrow_end_time=self._borrow_end_time,
            **self._details(),
        )

    def _emit(self, message: str) -> None:
        print(message, file=self._output)


@runtime_checkable
class Playable(Protocol):
    """Capability of items that can be played."""

    def play(self) -> None: ...


class Book(LendableItem):
    """Book with a page count."""

    kind = ItemKind.BOOK

    def __init__(
        self,
        id: int,
        title: str,
        author: str,
        fine_per_day: float,
        page_count: int,
        **kwargs,
    ):
        super().__init__(id, title, author, fine_per_day, **kwargs)
        self._page_count = page_count

    @property
    def page_count(self) -> int:
        return self._page_count

    def _details(self) -> dict[str, Any]:
        return {"page_count": self._page_count}


class AudioBook(LendableItem):
    """Audiobook with a playback duration."""

    kind = ItemKind.AUDIOBOOK

    def __init__(
        self,
        id: int,
        title: str,
        author: str,
        fine_per_day: float,
        playback_duration: timedelta,
        **kwargs,
    ):
        super().__init__(id, title, author, fine_per_day, **kwargs)
        self._playback_duration = playback_duration

    @property
    def playback_duration(self) -> timedelta:
        return self._playback_duration

    def play(self) -> None:
        """Play the audiobook.

        Gated on the stored availability flag without running the expiry
        check, so a lapsed loan that nothing has refreshed yet still plays.

        Raises:
            NotBorrowedError: If the stored flag says the item is available
        """
        if self._available:
            raise NotBorrowedError(self._id, "Audiobook is not borrowed.")

        self._emit(f"Playing audiobook: {self._title} by {self._author}")

    def _details(self) -> dict[str, Any]:
        return {"playback_duration": self._playback_duration}


class EMagazine(LendableItem):
    """E-magazine issue that can be archived."""

    kind = ItemKind.EMAGAZINE

    def __init__(
        self,
        id: int,
        title: str,
        author: str,
        fine_per_day: float,
        issue_number: int,
        **kwargs,
    ):
        super().__init__(id, title, author, fine_per_day, **kwargs)
        self._issue_number = issue_number
        self._archived = False

    @property
    def issue_number(self) -> int:
        return self._issue_number

    @property
    def archived(self) -> bool:
        return self._archived

    def is_archived(self) -> bool:
        return self._archived

    def archive_issue(self) -> None:
        """Archive this issue. Archiving is one-way and idempotent."""
        self._archived = True
        self._emit(f"Archived e-magazine issue {self._issue_number}: {self._title}")

    def _details(self) -> dict[str, Any]:
        return {"issue_number": self._issue_number, "archived": self._archived}
