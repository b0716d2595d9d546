"""Tests for the notification priority policy."""

import pytest

from attendance_notifier.domain.entities import NotificationPriority, NotificationType
from attendance_notifier.domain.errors import ValidationError
from attendance_notifier.domain.priority import priority_for


@pytest.mark.parametrize(
    ("notification_type", "percentage", "expected"),
    [
        (NotificationType.DAILY_REMINDER, None, NotificationPriority.MEDIUM),
        (NotificationType.ATTENDANCE_MARKED, None, NotificationPriority.LOW),
        (NotificationType.LOW_ATTENDANCE_ALERT, 0, NotificationPriority.URGENT),
        (NotificationType.LOW_ATTENDANCE_ALERT, 49, NotificationPriority.URGENT),
        (NotificationType.LOW_ATTENDANCE_ALERT, 49.99, NotificationPriority.URGENT),
        (NotificationType.LOW_ATTENDANCE_ALERT, 50, NotificationPriority.HIGH),
        (NotificationType.LOW_ATTENDANCE_ALERT, 74.5, NotificationPriority.HIGH),
        ("daily_reminder", None, NotificationPriority.MEDIUM),
    ],
)
def test_priority_for(notification_type, percentage, expected):
    assert priority_for(notification_type, percentage) is expected


def test_fixed_priorities_ignore_percentage():
    assert priority_for(NotificationType.DAILY_REMINDER, 10) is NotificationPriority.MEDIUM
    assert priority_for(NotificationType.ATTENDANCE_MARKED, 10) is NotificationPriority.LOW


def test_low_attendance_alert_requires_percentage():
    with pytest.raises(ValidationError):
        priority_for(NotificationType.LOW_ATTENDANCE_ALERT)


def test_unknown_type_is_rejected():
    with pytest.raises(ValidationError):
        priority_for("attendance_report")
