"""Pydantic schemas for lendable items."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..utils import parse_duration


class ItemKind(str, Enum):
    """Kind of lendable item."""

    BOOK = "book"
    AUDIOBOOK = "audiobook"
    EMAGAZINE = "emagazine"


class ItemState(str, Enum):
    """Borrow state of an item."""

    AVAILABLE = "available"
    BORROWED = "borrowed"


class ItemBase(BaseModel):
    """Fields shared by every item kind."""

    id: int = Field(..., ge=0)
    title: str = Field(..., min_length=1, max_length=500)
    author: str = Field(..., min_length=1, max_length=200)
    fine_per_day: float = Field(..., ge=0)


class BookCreate(ItemBase):
    """Schema for creating a book."""

    kind: Literal["book"] = "book"
    page_count: int = Field(..., gt=0)


class AudioBookCreate(ItemBase):
    """Schema for creating an audiobook."""

    kind: Literal["audiobook"] = "audiobook"
    playback_duration: timedelta

    @field_validator("playback_duration", mode="before")
    @classmethod
    def parse_iso_duration(cls, v):
        """Parse duration text with the borrow duration grammar."""
        if isinstance(v, str):
            return parse_duration(v)
        return v

    @field_validator("playback_duration")
    @classmethod
    def positive_duration(cls, v):
        """Validate playback duration is positive."""
        if v <= timedelta(0):
            raise ValueError("playback_duration must be positive")
        return v


class EMagazineCreate(ItemBase):
    """Schema for creating an e-magazine issue."""

    kind: Literal["emagazine"] = "emagazine"
    issue_number: int = Field(..., gt=0)


ItemCreate = Annotated[
    Union[BookCreate, AudioBookCreate, EMagazineCreate],
    Field(discriminator="kind"),
]


class ItemResponse(BaseModel):
    """Snapshot of an item, taken after the expiry check."""

    id: int
    kind: ItemKind
    title: str
    author: str
    fine_per_day: float
    state: ItemState
    borrow_end_time: Optional[datetime] = None

    # Kind-specific fields
    page_count: Optional[int] = None
    playback_duration: Optional[timedelta] = None
    issue_number: Optional[int] = None
    archived: Optional[bool] = None
