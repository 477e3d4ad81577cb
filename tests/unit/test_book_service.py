"""Unit tests for the book vault store (src/services/book_service.py)"""
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.exceptions import DuplicateRecordError, RecordNotFoundError, ValidationError
from src.models.book import BookEntry, BookFormat
from src.services.book_service import BookStore


# ============================================================================
# Model Tests
# ============================================================================

def test_book_entry_defaults():
    entry = BookEntry(id="9", title="Meditations", author="Marcus Aurelius")
    assert entry.is_watchlist is False
    assert entry.chapter_notes == []
    assert entry.progress is None
    assert entry.date_added == date.today()


def test_book_entry_bookmark_past_end_rejected():
    with pytest.raises(PydanticValidationError):
        BookEntry(id="9", title="Sapiens", author="Harari", total_pages=443, current_page=500)


def test_book_entry_progress(sample_books):
    finished, _, reading = sample_books
    assert finished.progress == 1.0
    assert finished.is_finished
    assert reading.progress == pytest.approx(142 / 320)
    assert not reading.is_finished


def test_book_format_values():
    entry = BookEntry(id="9", title="Sapiens", author="Harari", format="audiobook")
    assert entry.format is BookFormat.AUDIOBOOK


# ============================================================================
# Store Tests
# ============================================================================

class TestBookStore:
    """Test add / update / delete on the in-memory vault"""

    def test_list_keeps_order(self, book_store):
        assert [entry.id for entry in book_store.list()] == ["3", "2", "1"]
        assert len(book_store) == 3

    def test_list_returns_copy(self, book_store):
        book_store.list().clear()
        assert len(book_store) == 3

    def test_add_prepends(self, book_store):
        entry = BookEntry(id="4", title="The Lean Startup", author="Eric Ries", is_watchlist=True)
        book_store.add(entry)
        assert book_store.list()[0].id == "4"
        assert "4" in book_store

    def test_add_duplicate_id(self, book_store):
        with pytest.raises(DuplicateRecordError):
            book_store.add(BookEntry(id="1", title="Copy", author="Someone"))

    def test_init_rejects_duplicates(self):
        entry = BookEntry(id="1", title="A", author="B")
        with pytest.raises(DuplicateRecordError):
            BookStore([entry, entry])

    def test_update_merges_partial(self, book_store):
        updated = book_store.update("2", is_watchlist=False, notes="Borrowed from library")
        assert updated.is_watchlist is False
        assert updated.notes == "Borrowed from library"
        assert updated.title == "The Psychology of Money"
        assert book_store.get("2") == updated

    def test_update_keeps_position(self, book_store):
        book_store.update("2", title="Psychology of Money")
        assert [entry.id for entry in book_store.list()] == ["3", "2", "1"]

    def test_update_unknown_id(self, book_store):
        with pytest.raises(RecordNotFoundError) as exc_info:
            book_store.update("missing", title="x")
        assert exc_info.value.record_id == "missing"

    def test_update_invalid_value(self, book_store):
        with pytest.raises(ValidationError):
            book_store.update("1", current_page=1000)
        assert book_store.get("1").current_page == 142

    def test_update_cannot_change_id(self, book_store):
        with pytest.raises(ValidationError):
            book_store.update("1", id="99")

    def test_delete(self, book_store):
        book_store.delete("2")
        assert "2" not in book_store
        with pytest.raises(RecordNotFoundError):
            book_store.get("2")

    def test_delete_unknown_id(self, book_store):
        with pytest.raises(RecordNotFoundError):
            book_store.delete("missing")

    def test_watchlist_and_owned(self, book_store):
        assert [entry.id for entry in book_store.watchlist()] == ["2"]
        assert [entry.id for entry in book_store.owned()] == ["3", "1"]

    def test_empty_store(self):
        store = BookStore()
        assert store.list() == []
        assert store.watchlist() == []


class TestReadingFeatures:
    """Test chapter notes and bookmarks"""

    def test_add_chapter_note(self, book_store):
        note = book_store.add_chapter_note("1", "Chapter 1", "Habits compound")
        entry = book_store.get("1")
        assert entry.chapter_notes == [note]
        assert entry.chapter_notes[0].notes == "Habits compound"

    def test_chapter_notes_accumulate(self, book_store):
        book_store.add_chapter_note("1", "Chapter 1")
        book_store.add_chapter_note("1", "Chapter 2")
        assert [n.title for n in book_store.get("1").chapter_notes] == ["Chapter 1", "Chapter 2"]

    def test_chapter_note_needs_title(self, book_store):
        with pytest.raises(ValidationError):
            book_store.add_chapter_note("1", "")

    def test_chapter_note_unknown_book(self, book_store):
        with pytest.raises(RecordNotFoundError):
            book_store.add_chapter_note("missing", "Chapter 1")

    def test_set_bookmark(self, book_store):
        entry = book_store.set_bookmark("1", 200)
        assert entry.current_page == 200
        assert entry.progress == pytest.approx(200 / 320)

    def test_set_bookmark_past_end(self, book_store):
        with pytest.raises(ValidationError):
            book_store.set_bookmark("1", 321)


def test_book_entry_rejects_unknown_fields():
    with pytest.raises(PydanticValidationError):
        BookEntry(id="9", title="Sapiens", author="Harari", pages=443)


def test_update_unknown_field_rejected(book_store):
    """A misspelt field must not be silently dropped"""
    with pytest.raises(ValidationError):
        book_store.update("1", titel="Typo")
    assert book_store.get("1").title == "Atomic Habits"
