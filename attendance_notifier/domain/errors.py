"""Error types raised by the notification engine."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for every error raised by the notification engine."""


class ValidationError(NotificationError, ValueError):
    """Raised when required input is missing or malformed."""


class NotFoundError(NotificationError, LookupError):
    """Raised when a referenced entity or an owned notification is absent.

    Lifecycle operations raise it both for missing records and for records
    owned by another recipient, so callers cannot tell the two apart.
    """


class StoreError(NotificationError):
    """Raised when the underlying persistence layer fails."""


class DuplicateNotificationError(StoreError):
    """Raised when an insert collides with an existing active daily reminder."""


__all__ = [
    "DuplicateNotificationError",
    "NotFoundError",
    "NotificationError",
    "StoreError",
    "ValidationError",
]
