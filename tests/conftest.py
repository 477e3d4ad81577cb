"""Global test fixtures and utilities for Clarity tests"""
import pytest
from datetime import date
from unittest.mock import Mock

from src.handlers.sleep_dial import CircularTimeSelector, LoggingHaptics
from src.models.book import BookEntry, BookFormat
from src.models.clock import ClockTime
from src.services.book_service import BookStore
from src.utils.dial_geometry import DialGeometry


# ============================================================================
# Sleep Dial Fixtures
# ============================================================================

@pytest.fixture
def geometry():
    """Dial layout used by the morning check-in screen"""
    return DialGeometry(size=340, stroke_width=36, margin=40)


@pytest.fixture
def bedtime():
    return ClockTime(hour=22, minute=0)


@pytest.fixture
def wake_time():
    return ClockTime(hour=6, minute=0)


@pytest.fixture
def haptics():
    return LoggingHaptics()


@pytest.fixture
def selector(geometry, bedtime, wake_time, haptics):
    """Selector with Mock change callbacks"""
    return CircularTimeSelector(
        bedtime=bedtime,
        wake_time=wake_time,
        on_bedtime_change=Mock(),
        on_wake_time_change=Mock(),
        haptics=haptics,
        geometry=geometry,
        hit_box_radius=80,
        snap_minutes=5,
    )


# ============================================================================
# Book Vault Fixtures
# ============================================================================

@pytest.fixture
def sample_books():
    """Two owned books and one on the watchlist, newest first"""
    return [
        BookEntry(
            id="3",
            title="Deep Work",
            author="Cal Newport",
            format=BookFormat.AUDIOBOOK,
            is_watchlist=False,
            date_added=date(2024, 8, 5),
            total_pages=296,
            current_page=296,
        ),
        BookEntry(
            id="2",
            title="The Psychology of Money",
            author="Morgan Housel",
            format=BookFormat.EBOOK,
            is_watchlist=True,
            date_added=date(2024, 10, 20),
            total_pages=256,
        ),
        BookEntry(
            id="1",
            title="Atomic Habits",
            author="James Clear",
            format=BookFormat.PHYSICAL,
            is_watchlist=False,
            date_added=date(2024, 9, 15),
            total_pages=320,
            current_page=142,
        ),
    ]


@pytest.fixture
def book_store(sample_books):
    return BookStore(sample_books)
