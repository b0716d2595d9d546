"""Use case for marking a single notification as read."""

from attendance_notifier.domain.entities import AttendanceNotification
from attendance_notifier.domain.errors import NotFoundError
from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.utils import now_in_app_timezone


def mark_notification_read(
    notifications: NotificationRepository, *, notification_id: int, recipient_id: int
) -> AttendanceNotification:
    """Mark the caller's notification as read, refreshing ``read_at`` on repeats."""

    updated = notifications.mark_read(
        notification_id, recipient_id=recipient_id, read_at=now_in_app_timezone()
    )
    if updated is None:
        raise NotFoundError("Notification not found")
    return updated
