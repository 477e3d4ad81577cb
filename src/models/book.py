"""Book vault models"""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BookFormat(str, Enum):
    PHYSICAL = "physical"
    EBOOK = "ebook"
    AUDIOBOOK = "audiobook"


class ChapterNote(BaseModel):
    """Chapter-by-chapter notes on a book"""
    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = Field(min_length=1)
    notes: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BookEntry(BaseModel):
    """A book in the vault, either owned or on the "To Read" watchlist"""

    model_config = ConfigDict(extra="forbid")

    id: str
    title: str = Field(min_length=1)
    author: str
    format: Optional[BookFormat] = None
    cover_url: Optional[str] = None
    is_watchlist: bool = False  # True = "To Read", False = "Own"
    date_added: date = Field(default_factory=date.today)
    notes: Optional[str] = None
    chapter_notes: List[ChapterNote] = Field(default_factory=list)
    current_page: Optional[int] = Field(None, ge=0)  # bookmark
    total_pages: Optional[int] = Field(None, gt=0)

    @model_validator(mode='after')
    def validate_bookmark(self) -> 'BookEntry':
        """Bookmark cannot point past the last page"""
        if (
            self.current_page is not None
            and self.total_pages is not None
            and self.current_page > self.total_pages
        ):
            raise ValueError(
                f"current_page ({self.current_page}) exceeds total_pages ({self.total_pages})"
            )
        return self

    @property
    def progress(self) -> Optional[float]:
        """Fraction read, None without a bookmark and page count"""
        if self.current_page is None or self.total_pages is None:
            return None
        return self.current_page / self.total_pages

    @property
    def is_finished(self) -> bool:
        return self.progress == 1.0
