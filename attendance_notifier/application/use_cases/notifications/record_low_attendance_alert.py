"""Alert a student whose attendance in a course has dropped."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime

from attendance_notifier.domain.entities import (
    AttendanceNotification,
    LowAttendanceMetadata,
    NotificationType,
)
from attendance_notifier.domain.errors import ValidationError
from attendance_notifier.domain.priority import priority_for
from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.utils import now_in_app_timezone, today_in_app_timezone

from .generate_daily_reminders import coerce_notification_date
from .references import ReferenceResolver

logger = logging.getLogger(__name__)

LOW_ATTENDANCE_TITLE = "Low Attendance Alert"


def record_low_attendance_alert(
    notifications: NotificationRepository,
    references: ReferenceResolver,
    *,
    student_id: int,
    course_id: int,
    attendance_percentage: float,
    date: date | datetime | str | None = None,
) -> AttendanceNotification:
    """Create a ``low_attendance_alert`` notification for ``student_id``.

    The alert is ``urgent`` below 50% and ``high`` otherwise. ``date``
    defaults to today in the application timezone.
    """

    percentage = _validate_percentage(attendance_percentage)
    alert_date = today_in_app_timezone() if date is None else coerce_notification_date(date)

    student = references.get_student(student_id)
    course = references.get_course(course_id)

    metadata = LowAttendanceMetadata(
        attendance_percentage=percentage,
        course_code=course.course_code,
        course_title=course.title,
    )
    notification = AttendanceNotification(
        id=None,
        type=NotificationType.LOW_ATTENDANCE_ALERT,
        title=LOW_ATTENDANCE_TITLE,
        message=(
            f"Your attendance in {course.course_code} is {percentage}%. "
            "Please improve your attendance."
        ),
        recipient_id=student.id,
        course_id=course.id,
        date=alert_date,
        priority=priority_for(NotificationType.LOW_ATTENDANCE_ALERT, percentage),
        metadata=metadata.to_payload(),
        created_at=now_in_app_timezone(),
    )
    saved = notifications.create(notification)
    logger.info(
        "Low attendance alert (%s) for student %s in course %s",
        saved.priority.value,
        student.id,
        course.id,
    )
    return saved


def _validate_percentage(value: float) -> float:
    if isinstance(value, bool):
        raise ValidationError("Attendance percentage must be a number")
    try:
        percentage = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Attendance percentage must be a number") from exc
    if math.isnan(percentage) or not 0 <= percentage <= 100:
        raise ValidationError("Attendance percentage must be between 0 and 100")
    return int(percentage) if percentage.is_integer() else percentage


__all__ = ["LOW_ATTENDANCE_TITLE", "record_low_attendance_alert"]
