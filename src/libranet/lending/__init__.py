"""Lendable item module.

Provides functionality for:
- Borrowing and returning items for an ISO-8601 duration
- Lazy loan expiry on availability checks
- Book, audiobook and e-magazine item kinds
"""

from .factory import build_item
from .models import AudioBook, Book, EMagazine, LendableItem, Playable
from .schemas import (
    AudioBookCreate,
    BookCreate,
    EMagazineCreate,
    ItemCreate,
    ItemKind,
    ItemResponse,
    ItemState,
)

__all__ = [
    "build_item",
    "LendableItem",
    "Book",
    "AudioBook",
    "EMagazine",
    "Playable",
    "BookCreate",
    "AudioBookCreate",
    "EMagazineCreate",
    "ItemCreate",
    "ItemKind",
    "ItemResponse",
    "ItemState",
]
