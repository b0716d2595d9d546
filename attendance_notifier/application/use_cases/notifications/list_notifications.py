"""Use case for paginated listing of a recipient's notifications."""

from __future__ import annotations

import math
from dataclasses import dataclass

from attendance_notifier.config import get_settings
from attendance_notifier.domain.entities import AttendanceNotification, NotificationType
from attendance_notifier.domain.errors import ValidationError
from attendance_notifier.infrastructure.repositories import NotificationRepository


@dataclass
class NotificationPage:
    """One page of notifications plus pagination counters."""

    items: list[AttendanceNotification]
    page: int
    page_size: int
    pages: int
    total: int
    unread_count: int


def list_notifications(
    notifications: NotificationRepository,
    *,
    recipient_id: int,
    page: int = 1,
    page_size: int | None = None,
    notification_type: NotificationType | str | None = None,
    is_read: bool | None = None,
) -> NotificationPage:
    """Return the active notifications of ``recipient_id``, newest first."""

    settings = get_settings()
    if page_size is None:
        page_size = settings.default_page_size
    if page < 1:
        raise ValidationError("Page must be greater than or equal to 1")
    if page_size < 1:
        raise ValidationError("Page size must be greater than or equal to 1")
    page_size = min(page_size, settings.max_page_size)

    if notification_type is not None:
        try:
            notification_type = NotificationType(notification_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown notification type: {notification_type!r}") from exc

    total = notifications.count_for_recipient(
        recipient_id, notification_type=notification_type, is_read=is_read
    )
    items = notifications.list_for_recipient(
        recipient_id,
        notification_type=notification_type,
        is_read=is_read,
        skip=(page - 1) * page_size,
        limit=page_size,
    )
    unread_count = notifications.count_for_recipient(recipient_id, is_read=False)
    return NotificationPage(
        items=list(items),
        page=page,
        page_size=page_size,
        pages=math.ceil(total / page_size),
        total=total,
        unread_count=unread_count,
    )


__all__ = ["NotificationPage", "list_notifications"]
