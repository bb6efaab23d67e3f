"""Sample lending session.

Borrows and returns a book, borrows and plays an audiobook, and archives
an e-magazine issue. A failing step, including an item that cannot be
built from the configured values, is reported and the session moves on
to the next item.
"""

import sys
from datetime import timedelta
from typing import Optional, TextIO

from .config import Config, get_config
from .errors import LendingError
from .lending import AudioBook, Book, EMagazine, LendableItem
from .utils import parse_id


def run_demo(
    config: Optional[Config] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> list[LendableItem]:
    """
    Run the sample lending session.

    Args:
        config: Configuration, defaults to the global config
        out: Stream for progress messages, defaults to stdout
        err: Stream for error messages, defaults to stderr

    Returns:
        The items used in the session, in their final state
    """
    config = config or get_config()
    out = out or sys.stdout
    err = err or sys.stderr
    items: list[LendableItem] = []

    try:
        book = Book(
            parse_id("101"),
            "Effective Java",
            "Joshua Bloch",
            config.default_fine_per_day,
            416,
            output=out,
        )
        items.append(book)
        book.borrow(config.default_loan_duration)
        print(f"Borrowed book: {book.title}, pages: {book.page_count}", file=out)
        book.return_item()
        print(f"Book returned, availability: {book.is_available()}", file=out)
    except (LendingError, ValueError) as e:
        print(f"Error: {e}", file=err)

    try:
        audio_book = AudioBook(
            102,
            "Java Concurrency",
            "Brian Goetz",
            15,
            timedelta(hours=4),
            output=out,
        )
        items.append(audio_book)
        audio_book.borrow("PT48H")
        audio_book.play()
        # Still on loan
        audio_book.borrow("PT48H")
    except (LendingError, ValueError) as e:
        print(f"Error: {e}", file=err)

    try:
        emag = EMagazine(103, "Tech Today", "Editors", 5, 27, output=out)
        items.append(emag)
        emag.archive_issue()
    except (LendingError, ValueError) as e:
        print(f"Error: {e}", file=err)

    return items
