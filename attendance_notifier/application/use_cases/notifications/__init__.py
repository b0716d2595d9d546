"""Use cases that generate, query and update attendance notifications."""

from .dedup import reminder_exists
from .delete_notification import delete_notification
from .generate_daily_reminders import (
    DailyReminderBatch,
    GenerationFailure,
    generate_daily_reminders,
)
from .list_notifications import NotificationPage, list_notifications
from .mark_all_notifications_read import mark_all_notifications_read
from .mark_notification_read import mark_notification_read
from .record_attendance_marked import record_attendance_marked
from .record_low_attendance_alert import record_low_attendance_alert
from .references import ReferenceResolver
from .summarize_notifications import NotificationStats, summarize_notifications

__all__ = [
    "DailyReminderBatch",
    "GenerationFailure",
    "NotificationPage",
    "NotificationStats",
    "ReferenceResolver",
    "delete_notification",
    "generate_daily_reminders",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "record_attendance_marked",
    "record_low_attendance_alert",
    "reminder_exists",
    "summarize_notifications",
]
