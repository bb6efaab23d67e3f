"""Build lendable items from validated create schemas."""

from typing import Any, Optional, TextIO, Union

from pydantic import TypeAdapter

from .models import AudioBook, Book, Clock, EMagazine, LendableItem
from .schemas import AudioBookCreate, BookCreate, EMagazineCreate, ItemCreate

_item_create_adapter = TypeAdapter(ItemCreate)


def build_item(
    data: Union[BookCreate, AudioBookCreate, EMagazineCreate, dict[str, Any]],
    *,
    clock: Optional[Clock] = None,
    output: Optional[TextIO] = None,
) -> LendableItem:
    """Create an item of the kind named by the data.

    Args:
        data: Create schema, or a mapping with a "kind" key
        clock: Time source for the item
        output: Stream for play/archive messages

    Returns:
        The new item, available

    Raises:
        pydantic.ValidationError: If a mapping fails validation
    """
    if isinstance(data, dict):
        data = _item_create_adapter.validate_python(data)

    common = dict(
        id=data.id,
        title=data.title,
        author=data.author,
        fine_per_day=data.fine_per_day,
        clock=clock,
        output=output,
    )

    if isinstance(data, BookCreate):
        return Book(page_count=data.page_count, **common)
    if isinstance(data, AudioBookCreate):
        return AudioBook(playback_duration=data.playback_duration, **common)
    if isinstance(data, EMagazineCreate):
        return EMagazine(issue_number=data.issue_number, **common)

    raise TypeError(f"Unsupported item data: {type(data).__name__}")
