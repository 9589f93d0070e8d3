"""Utility modules for the advice proxy."""

from .rwlock import AsyncRWLock

__all__ = [
    "AsyncRWLock",
]
