"""Use case for soft-deleting a notification."""

from attendance_notifier.domain.errors import NotFoundError
from attendance_notifier.infrastructure.repositories import NotificationRepository


def delete_notification(
    notifications: NotificationRepository, *, notification_id: int, recipient_id: int
) -> None:
    """Deactivate the caller's notification; the record itself is kept."""

    if not notifications.soft_delete(notification_id, recipient_id=recipient_id):
        raise NotFoundError("Notification not found")
