"""
BookStore - in-memory book vault

Owns the vault's entries (newest first) and is handed to the screens that
need it. Nothing is persisted; the store lives as long as its owner.
"""

import logging
from typing import Any, Iterable, List, Optional

import pydantic

from src.exceptions import DuplicateRecordError, RecordNotFoundError, ValidationError
from src.models.book import BookEntry, ChapterNote

logger = logging.getLogger(__name__)


class BookStore:
    """
    Book vault entries keyed by id.

    Responsibilities:
    - add / update / delete entries
    - "To Read" (watchlist) and "Own" views
    - chapter notes and reading bookmarks
    """

    def __init__(self, entries: Optional[Iterable[BookEntry]] = None):
        self._entries: List[BookEntry] = []
        for entry in entries or []:
            if self._find(entry.id) is not None:
                raise DuplicateRecordError(
                    f"Duplicate book id {entry.id}", record_type="Book", record_id=entry.id
                )
            self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, book_id: str) -> bool:
        return self._find(book_id) is not None

    def _find(self, book_id: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.id == book_id:
                return index
        return None

    def _index(self, book_id: str, operation: str) -> int:
        index = self._find(book_id)
        if index is None:
            raise RecordNotFoundError(
                f"Book {book_id} not found",
                record_type="Book",
                record_id=book_id,
                operation=operation,
            )
        return index

    def list(self) -> List[BookEntry]:
        """All entries, newest first"""
        return list(self._entries)

    def watchlist(self) -> List[BookEntry]:
        return [entry for entry in self._entries if entry.is_watchlist]

    def owned(self) -> List[BookEntry]:
        return [entry for entry in self._entries if not entry.is_watchlist]

    def get(self, book_id: str) -> BookEntry:
        return self._entries[self._index(book_id, "get_book")]

    def add(self, entry: BookEntry) -> BookEntry:
        """Add a new entry at the front of the vault"""
        if self._find(entry.id) is not None:
            raise DuplicateRecordError(
                f"Book {entry.id} already exists",
                record_type="Book",
                record_id=entry.id,
                operation="add_book",
            )
        self._entries.insert(0, entry)
        logger.info(f"Added book {entry.id}: {entry.title!r}")
        return entry

    def update(self, book_id: str, **updates: Any) -> BookEntry:
        """
        Merge a partial update into an entry.

        Args:
            book_id: Entry to update
            **updates: Field values to replace (the id itself cannot change)

        Returns:
            The re-validated entry
        """
        index = self._index(book_id, "update_book")
        if "id" in updates and updates["id"] != book_id:
            raise ValidationError(
                message="Book id cannot be changed",
                field="id",
                value=updates["id"],
                operation="update_book",
            )

        merged = {**self._entries[index].model_dump(), **updates}
        try:
            updated = BookEntry.model_validate(merged)
        except pydantic.ValidationError as e:
            raise ValidationError(
                message=f"Invalid update for book {book_id}",
                value=updates,
                operation="update_book",
                cause=e,
            )

        self._entries[index] = updated
        logger.info(f"Updated book {book_id}: {sorted(updates)}")
        return updated

    def delete(self, book_id: str) -> None:
        index = self._index(book_id, "delete_book")
        removed = self._entries.pop(index)
        logger.info(f"Deleted book {book_id}: {removed.title!r}")

    def add_chapter_note(self, book_id: str, title: str, notes: str = "") -> ChapterNote:
        """Append a chapter note to a book"""
        entry = self.get(book_id)
        try:
            note = ChapterNote(title=title, notes=notes)
        except pydantic.ValidationError as e:
            raise ValidationError(
                message="Chapter note needs a title",
                field="title",
                value=title,
                operation="add_chapter_note",
                cause=e,
            )
        self.update(book_id, chapter_notes=[*entry.chapter_notes, note])
        return note

    def set_bookmark(self, book_id: str, page: int) -> BookEntry:
        """Move the reading bookmark"""
        return self.update(book_id, current_page=page)
