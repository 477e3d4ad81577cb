"""
Service Layer Package

Owners of check-in state that the screens are handed:
- SleepCheckInSession: bedtime / wake-time values behind the sleep dial
- BookStore: in-memory book vault entries
"""

from src.services.book_service import BookStore
from src.services.sleep_checkin import SleepCheckInSession

__all__ = [
    "BookStore",
    "SleepCheckInSession",
]
