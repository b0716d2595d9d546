"""Domain entity representing an attendance notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from attendance_notifier.domain.errors import ValidationError

from .course import CourseSummary, SubjectSummary


class NotificationType(str, Enum):
    """Kinds of attendance notification produced by the engine."""

    DAILY_REMINDER = "daily_reminder"
    ATTENDANCE_MARKED = "attendance_marked"
    LOW_ATTENDANCE_ALERT = "low_attendance_alert"


class NotificationPriority(str, Enum):
    """Priority levels, from least to most pressing."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class AttendanceStatus(str, Enum):
    """Outcome recorded when a faculty member marks attendance."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


@dataclass(frozen=True)
class DailyReminderMetadata:
    course_code: str
    course_title: str
    reminder_date: date
    subject_id: int | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "course_code": self.course_code,
            "course_title": self.course_title,
            "reminder_date": self.reminder_date.isoformat(),
        }
        if self.subject_id is not None:
            payload["subject_id"] = self.subject_id
        return payload


@dataclass(frozen=True)
class AttendanceMarkedMetadata:
    status: AttendanceStatus
    marked_by: str
    course_code: str
    course_title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "status": AttendanceStatus(self.status).value,
            "marked_by": self.marked_by,
            "course_code": self.course_code,
            "course_title": self.course_title,
        }


@dataclass(frozen=True)
class LowAttendanceMetadata:
    attendance_percentage: float
    course_code: str
    course_title: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "attendance_percentage": self.attendance_percentage,
            "course_code": self.course_code,
            "course_title": self.course_title,
        }


METADATA_KEYS: dict[NotificationType, frozenset[str]] = {
    NotificationType.DAILY_REMINDER: frozenset(
        {"course_code", "course_title", "reminder_date"}
    ),
    NotificationType.ATTENDANCE_MARKED: frozenset(
        {"status", "marked_by", "course_code", "course_title"}
    ),
    NotificationType.LOW_ATTENDANCE_ALERT: frozenset(
        {"attendance_percentage", "course_code", "course_title"}
    ),
}


def validate_metadata(notification_type: NotificationType, metadata: dict[str, Any]) -> None:
    """Raise :class:`ValidationError` when ``metadata`` does not fit ``notification_type``."""

    missing = METADATA_KEYS[notification_type] - set(metadata)
    if missing:
        msg = (
            f"Metadata for {notification_type.value} notifications is missing: "
            f"{', '.join(sorted(missing))}"
        )
        raise ValidationError(msg)


@dataclass
class AttendanceNotification:
    """Attendance-related message addressed to a single recipient.

    Only ``is_read``, ``read_at`` and ``is_active`` change after creation.
    ``course`` and ``subject`` are display summaries filled in by listings.
    """

    id: int | None
    type: NotificationType
    title: str
    message: str
    recipient_id: int
    course_id: int
    date: date
    priority: NotificationPriority
    subject_id: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    read_at: datetime | None = None
    is_active: bool = True
    created_at: datetime | None = None
    course: CourseSummary | None = None
    subject: SubjectSummary | None = None

    def __post_init__(self) -> None:
        try:
            self.type = NotificationType(self.type)
            self.priority = NotificationPriority(self.priority)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc
        if isinstance(self.date, datetime):
            self.date = self.date.date()
        validate_metadata(self.type, self.metadata)
        if self.is_read != (self.read_at is not None):
            raise ValidationError("read_at must be set exactly when the notification is read")


__all__ = [
    "AttendanceMarkedMetadata",
    "AttendanceNotification",
    "AttendanceStatus",
    "DailyReminderMetadata",
    "LowAttendanceMetadata",
    "METADATA_KEYS",
    "NotificationPriority",
    "NotificationType",
    "validate_metadata",
]
