"""
Session management module.

Provides persistent session storage and the live ``Session`` object the
copy pipeline runs against.
"""
from .protocols import SessionStorage
from .models import SessionData
from .sqlite_session import SQLiteSession
from .memory_session import MemorySession
from .session import Session

__all__ = [
    'SessionStorage',
    'SessionData',
    'SQLiteSession',
    'MemorySession',
    'Session',
]
