"""Batch creation of daily attendance reminders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from attendance_notifier.domain.entities import (
    AttendanceNotification,
    Course,
    DailyReminderMetadata,
    NotificationType,
    User,
)
from attendance_notifier.domain.errors import (
    DuplicateNotificationError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from attendance_notifier.domain.priority import priority_for
from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.utils import now_in_app_timezone, to_calendar_date

from .dedup import reminder_exists
from .references import ReferenceResolver

logger = logging.getLogger(__name__)

DAILY_REMINDER_TITLE = "Daily Attendance Reminder"


@dataclass(frozen=True)
class GenerationFailure:
    """A (course, student) unit that could not be processed."""

    course_id: int
    student_id: int | None
    reason: str


@dataclass
class DailyReminderBatch:
    """Outcome of one daily reminder run."""

    date: date
    created: list[AttendanceNotification] = field(default_factory=list)
    failures: list[GenerationFailure] = field(default_factory=list)
    skipped: int = 0

    @property
    def created_count(self) -> int:
        return len(self.created)


def generate_daily_reminders(
    notifications: NotificationRepository,
    references: ReferenceResolver,
    *,
    date: date | datetime | str | None,
    course_id: int | None = None,
    subject_id: int | None = None,
) -> DailyReminderBatch:
    """Create one reminder per enrolled student of each targeted course.

    Pairs that already hold an active reminder for ``date`` are skipped, so
    re-running the batch for the same date creates nothing new. A failure
    while resolving a course roster or storing one reminder is recorded in
    :attr:`DailyReminderBatch.failures` and the remaining units still run.
    """

    reminder_date = coerce_notification_date(date)
    if subject_id is not None:
        references.get_subject(subject_id)
    courses = references.target_courses(course_id)

    batch = DailyReminderBatch(date=reminder_date)
    for course in courses:
        try:
            students = references.enrolled_students(course.id)
        except (NotFoundError, StoreError) as exc:
            logger.warning("Skipping course %s: roster lookup failed: %s", course.id, exc)
            batch.failures.append(
                GenerationFailure(course_id=course.id, student_id=None, reason=str(exc))
            )
            continue

        for student in students:
            try:
                created = _create_reminder(
                    notifications,
                    course=course,
                    student=student,
                    reminder_date=reminder_date,
                    subject_id=subject_id,
                )
            except DuplicateNotificationError:
                batch.skipped += 1
                continue
            except (NotFoundError, StoreError) as exc:
                logger.warning(
                    "Daily reminder for student %s in course %s failed: %s",
                    student.id,
                    course.id,
                    exc,
                )
                batch.failures.append(
                    GenerationFailure(course_id=course.id, student_id=student.id, reason=str(exc))
                )
                continue
            if created is None:
                batch.skipped += 1
            else:
                batch.created.append(created)

    logger.info(
        "Daily reminders for %s: %s created, %s skipped, %s failed",
        reminder_date.isoformat(),
        batch.created_count,
        batch.skipped,
        len(batch.failures),
    )
    return batch


def _create_reminder(
    notifications: NotificationRepository,
    *,
    course: Course,
    student: User,
    reminder_date: date,
    subject_id: int | None,
) -> AttendanceNotification | None:
    if reminder_exists(
        notifications,
        notification_type=NotificationType.DAILY_REMINDER,
        recipient_id=student.id,
        course_id=course.id,
        on_date=reminder_date,
    ):
        return None

    metadata = DailyReminderMetadata(
        course_code=course.course_code,
        course_title=course.title,
        reminder_date=reminder_date,
        subject_id=subject_id,
    )
    notification = AttendanceNotification(
        id=None,
        type=NotificationType.DAILY_REMINDER,
        title=DAILY_REMINDER_TITLE,
        message=f"Don't forget to attend {course.course_code} - {course.title} today!",
        recipient_id=student.id,
        course_id=course.id,
        subject_id=subject_id,
        date=reminder_date,
        priority=priority_for(NotificationType.DAILY_REMINDER),
        metadata=metadata.to_payload(),
        created_at=now_in_app_timezone(),
    )
    return notifications.create(notification)


def coerce_notification_date(value: date | datetime | str | None) -> date:
    if value is None or value == "":
        raise ValidationError("Date is required")
    try:
        return to_calendar_date(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


__all__ = [
    "DAILY_REMINDER_TITLE",
    "DailyReminderBatch",
    "GenerationFailure",
    "generate_daily_reminders",
]
