"""Priority policy for attendance notifications."""

from __future__ import annotations

from typing import Final

from attendance_notifier.domain.entities import NotificationPriority, NotificationType
from attendance_notifier.domain.errors import ValidationError

URGENT_ATTENDANCE_THRESHOLD: Final[float] = 50

_FIXED_PRIORITIES: Final[dict[NotificationType, NotificationPriority]] = {
    NotificationType.DAILY_REMINDER: NotificationPriority.MEDIUM,
    NotificationType.ATTENDANCE_MARKED: NotificationPriority.LOW,
}


def priority_for(
    notification_type: NotificationType | str,
    attendance_percentage: float | None = None,
) -> NotificationPriority:
    """Return the priority assigned to a new notification of ``notification_type``.

    Low attendance alerts escalate to ``urgent`` strictly below
    :data:`URGENT_ATTENDANCE_THRESHOLD` percent and are ``high`` otherwise.
    """

    try:
        notification_type = NotificationType(notification_type)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    if notification_type is NotificationType.LOW_ATTENDANCE_ALERT:
        if attendance_percentage is None:
            raise ValidationError("Low attendance alerts require an attendance percentage")
        if attendance_percentage < URGENT_ATTENDANCE_THRESHOLD:
            return NotificationPriority.URGENT
        return NotificationPriority.HIGH
    return _FIXED_PRIORITIES[notification_type]


__all__ = ["URGENT_ATTENDANCE_THRESHOLD", "priority_for"]
