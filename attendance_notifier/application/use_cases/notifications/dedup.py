"""Advisory duplicate check run before creating daily reminders."""

from __future__ import annotations

from datetime import date

from attendance_notifier.domain.entities import NotificationType
from attendance_notifier.infrastructure.repositories import NotificationRepository


def reminder_exists(
    notifications: NotificationRepository,
    *,
    notification_type: NotificationType,
    recipient_id: int,
    course_id: int,
    on_date: date,
) -> bool:
    """Return ``True`` when an equivalent active notification is already stored.

    Dates are compared by calendar day. The check is advisory: concurrent
    writers are caught by the unique index on active daily reminders, which
    surfaces as :class:`~attendance_notifier.domain.errors.DuplicateNotificationError`.
    """

    existing = notifications.find_active(
        notification_type=notification_type,
        recipient_id=recipient_id,
        course_id=course_id,
        on_date=on_date,
    )
    return existing is not None


__all__ = ["reminder_exists"]
