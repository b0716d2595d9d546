"""Notify a student that their attendance was marked."""

from __future__ import annotations

import logging
from datetime import date, datetime

from attendance_notifier.domain.entities import (
    AttendanceMarkedMetadata,
    AttendanceNotification,
    AttendanceStatus,
    NotificationType,
)
from attendance_notifier.domain.errors import ValidationError
from attendance_notifier.domain.priority import priority_for
from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.utils import now_in_app_timezone

from .generate_daily_reminders import coerce_notification_date
from .references import ReferenceResolver

logger = logging.getLogger(__name__)

ATTENDANCE_MARKED_TITLE = "Attendance Marked"


def record_attendance_marked(
    notifications: NotificationRepository,
    references: ReferenceResolver,
    *,
    student_id: int,
    course_id: int,
    status: AttendanceStatus | str,
    date: date | datetime | str,
    marked_by_id: int,
    subject_id: int | None = None,
) -> AttendanceNotification:
    """Create an ``attendance_marked`` notification for ``student_id``.

    Every marking event produces a new record; no duplicate check runs.
    """

    try:
        status = AttendanceStatus(status)
    except ValueError as exc:
        raise ValidationError(f"Unknown attendance status: {status!r}") from exc
    marked_on = coerce_notification_date(date)

    student = references.get_student(student_id)
    course = references.get_course(course_id)
    marker = references.get_marker(marked_by_id)

    metadata = AttendanceMarkedMetadata(
        status=status,
        marked_by=marker.name,
        course_code=course.course_code,
        course_title=course.title,
    )
    notification = AttendanceNotification(
        id=None,
        type=NotificationType.ATTENDANCE_MARKED,
        title=ATTENDANCE_MARKED_TITLE,
        message=(
            f"Your attendance for {course.course_code} has been marked as "
            f"{status.value} by {marker.name}"
        ),
        recipient_id=student.id,
        course_id=course.id,
        subject_id=subject_id,
        date=marked_on,
        priority=priority_for(NotificationType.ATTENDANCE_MARKED),
        metadata=metadata.to_payload(),
        created_at=now_in_app_timezone(),
    )
    saved = notifications.create(notification)
    logger.debug("Recorded attendance_marked notification %s for student %s", saved.id, student.id)
    return saved


__all__ = ["ATTENDANCE_MARKED_TITLE", "record_attendance_marked"]
