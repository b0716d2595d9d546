"""Aggregate application use cases."""

from .notifications import (
    generate_daily_reminders,
    list_notifications,
    record_attendance_marked,
    record_low_attendance_alert,
)

__all__ = [
    "generate_daily_reminders",
    "list_notifications",
    "record_attendance_marked",
    "record_low_attendance_alert",
]
