"""Use case for marking every unread notification of a recipient as read."""

from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.utils import now_in_app_timezone


def mark_all_notifications_read(
    notifications: NotificationRepository, *, recipient_id: int
) -> int:
    """Return the number of notifications that changed to read."""

    return notifications.mark_all_read(
        recipient_id=recipient_id, read_at=now_in_app_timezone()
    )
