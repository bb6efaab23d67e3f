"""Tests for item create schemas and build_item."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from libranet.lending import (
    AudioBook,
    AudioBookCreate,
    Book,
    BookCreate,
    EMagazine,
    EMagazineCreate,
    ItemKind,
    build_item,
)


class TestCreateSchemas:
    """Tests for create schema validation."""

    def test_book_create(self):
        """Test creating a valid book schema."""
        data = BookCreate(
            id=101,
            title="Effective Java",
            author="Joshua Bloch",
            fine_per_day=10,
            page_count=416,
        )
        assert data.kind == ItemKind.BOOK
        assert data.page_count == 416

    def test_audio_book_duration_from_iso_text(self):
        """Test playback duration accepts ISO-8601 text."""
        data = AudioBookCreate(
            id=102,
            title="Java Concurrency",
            author="Brian Goetz",
            fine_per_day=15,
            playback_duration="PT4H",
        )
        assert data.playback_duration == timedelta(hours=4)

    def test_audio_book_calendar_duration_rejected(self):
        """Test playback duration text follows the borrow duration grammar."""
        with pytest.raises(ValidationError):
            AudioBookCreate(
                id=102,
                title="Java Concurrency",
                author="Brian Goetz",
                fine_per_day=15,
                playback_duration="P1M",
            )

    def test_audio_book_zero_duration_rejected(self):
        """Test playback duration must be positive."""
        with pytest.raises(ValidationError):
            AudioBookCreate(
                id=102,
                title="Java Concurrency",
                author="Brian Goetz",
                fine_per_day=15,
                playback_duration=timedelta(0),
            )

    def test_negative_fine_rejected(self):
        """Test fine rate must be non-negative."""
        with pytest.raises(ValidationError):
            BookCreate(id=1, title="T", author="A", fine_per_day=-1, page_count=10)

    def test_empty_title_rejected(self):
        """Test title is required."""
        with pytest.raises(ValidationError):
            EMagazineCreate(id=1, title="", author="A", fine_per_day=0, issue_number=1)

    def test_issue_number_must_be_positive(self):
        """Test issue number must be positive."""
        with pytest.raises(ValidationError):
            EMagazineCreate(id=1, title="T", author="A", fine_per_day=0, issue_number=0)

    def test_missing_field_rejected(self):
        """Test every construction field is required."""
        with pytest.raises(ValidationError):
            BookCreate(id=1, title="T", author="A", page_count=10)


class TestBuildItem:
    """Tests for build_item."""

    def test_build_book(self):
        """Test building a book from a schema."""
        item = build_item(
            BookCreate(id=1, title="T", author="A", fine_per_day=2, page_count=100)
        )
        assert isinstance(item, Book)
        assert item.page_count == 100
        assert item.fine_per_day == 2
        assert item.is_available()

    def test_build_from_mapping(self):
        """Test building an item from a mapping with a kind."""
        item = build_item(
            {
                "kind": "audiobook",
                "id": 2,
                "title": "T",
                "author": "A",
                "fine_per_day": 1,
                "playback_duration": "PT1H30M",
            }
        )
        assert isinstance(item, AudioBook)
        assert item.playback_duration == timedelta(hours=1, minutes=30)

    def test_build_emagazine_from_mapping(self):
        """Test building an e-magazine from a mapping."""
        item = build_item(
            {
                "kind": "emagazine",
                "id": 3,
                "title": "Tech Today",
                "author": "Editors",
                "fine_per_day": 5,
                "issue_number": 27,
            }
        )
        assert isinstance(item, EMagazine)
        assert item.issue_number == 27
        assert item.is_archived() is False

    def test_build_unknown_kind(self):
        """Test an unknown kind fails validation."""
        with pytest.raises(ValidationError):
            build_item(
                {"kind": "dvd", "id": 1, "title": "T", "author": "A", "fine_per_day": 0}
            )

    def test_build_passes_clock_and_output(self, clock, output):
        """Test build_item wires the clock and output stream."""
        item = build_item(
            AudioBookCreate(
                id=4, title="T", author="A", fine_per_day=0, playback_duration="PT1H"
            ),
            clock=clock,
            output=output,
        )
        item.borrow("PT2H")
        item.play()

        assert item.borrow_end_time == clock.now + timedelta(hours=2)
        assert output.getvalue() == "Playing audiobook: T by A\n"
