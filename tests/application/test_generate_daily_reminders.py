"""Tests for daily reminder generation against the SQLite store."""

from __future__ import annotations

import importlib
from datetime import date, datetime, timezone

import pytest

from attendance_notifier.application.use_cases.notifications import (
    ReferenceResolver,
    delete_notification,
    generate_daily_reminders,
    reminder_exists,
)
from attendance_notifier.domain.entities import NotificationPriority, NotificationType
from attendance_notifier.domain.errors import NotFoundError, ValidationError
from attendance_notifier.infrastructure.models import UserModel
from attendance_notifier.infrastructure.repositories import NotificationRepository

REMINDER_DATE = date(2024, 3, 1)


@pytest.fixture()
def notifications(session) -> NotificationRepository:
    return NotificationRepository(session)


@pytest.fixture()
def references(session) -> ReferenceResolver:
    return ReferenceResolver.from_session(session)


@pytest.fixture()
def course_with_two_students(campus):
    course_id = campus.course("CS101", "Programming Fundamentals")
    first = campus.user("Asha")
    second = campus.user("Bruno")
    campus.enroll(first, course_id)
    campus.enroll(second, course_id)
    return course_id, {first, second}


def test_generates_one_reminder_per_enrolled_student(
    notifications, references, course_with_two_students
):
    course_id, students = course_with_two_students

    batch = generate_daily_reminders(
        notifications, references, date=REMINDER_DATE, course_id=course_id
    )

    assert batch.created_count == 2
    assert batch.failures == []
    assert {n.recipient_id for n in batch.created} == students
    for notification in batch.created:
        assert notification.type is NotificationType.DAILY_REMINDER
        assert notification.priority is NotificationPriority.MEDIUM
        assert notification.date == REMINDER_DATE
        assert notification.title == "Daily Attendance Reminder"
        assert notification.message == (
            "Don't forget to attend CS101 - Programming Fundamentals today!"
        )
        assert notification.metadata["course_code"] == "CS101"
        assert notification.metadata["reminder_date"] == "2024-03-01"


def test_second_run_for_same_date_creates_nothing(
    notifications, references, course_with_two_students
):
    course_id, students = course_with_two_students

    generate_daily_reminders(notifications, references, date=REMINDER_DATE, course_id=course_id)
    batch = generate_daily_reminders(
        notifications, references, date="2024-03-01T18:30:00", course_id=course_id
    )

    assert batch.created_count == 0
    assert batch.skipped == 2
    for student_id in students:
        assert notifications.count_for_recipient(student_id) == 1


def test_other_dates_are_generated_independently(
    notifications, references, course_with_two_students
):
    course_id, _ = course_with_two_students

    generate_daily_reminders(notifications, references, date=REMINDER_DATE, course_id=course_id)
    batch = generate_daily_reminders(
        notifications, references, date=date(2024, 3, 2), course_id=course_id
    )

    assert batch.created_count == 2


def test_only_active_courses_and_current_enrollments_are_targeted(
    campus, notifications, references
):
    active = campus.course("MA201", "Linear Algebra")
    inactive = campus.course("HI100", "History", is_active=False)
    enrolled = campus.user("Chen")
    dropped = campus.user("Dara")
    withdrawn = campus.user("Eli")
    campus.enroll(enrolled, active)
    campus.enroll(dropped, active, status="dropped")
    campus.enroll(withdrawn, active, is_active=False)
    campus.enroll(enrolled, inactive)

    batch = generate_daily_reminders(notifications, references, date=REMINDER_DATE)

    assert [(n.recipient_id, n.course_id) for n in batch.created] == [(enrolled, active)]


def test_soft_deleted_reminder_is_regenerated(
    notifications, references, course_with_two_students
):
    course_id, students = course_with_two_students
    first_batch = generate_daily_reminders(
        notifications, references, date=REMINDER_DATE, course_id=course_id
    )
    removed = first_batch.created[0]

    delete_notification(
        notifications, notification_id=removed.id, recipient_id=removed.recipient_id
    )
    assert not reminder_exists(
        notifications,
        notification_type=NotificationType.DAILY_REMINDER,
        recipient_id=removed.recipient_id,
        course_id=course_id,
        on_date=REMINDER_DATE,
    )

    batch = generate_daily_reminders(
        notifications, references, date=REMINDER_DATE, course_id=course_id
    )
    assert [n.recipient_id for n in batch.created] == [removed.recipient_id]
    assert notifications.get(removed.id).is_active is False


def test_subject_is_carried_into_reminders(
    campus, notifications, references, course_with_two_students
):
    course_id, _ = course_with_two_students
    subject_id = campus.subject(course_id, "CS101-L", "Lab")

    batch = generate_daily_reminders(
        notifications, references, date=REMINDER_DATE, course_id=course_id, subject_id=subject_id
    )

    assert {n.subject_id for n in batch.created} == {subject_id}
    assert {n.metadata["subject_id"] for n in batch.created} == {subject_id}


@pytest.mark.parametrize("missing", [None, ""])
def test_date_is_required(notifications, references, missing):
    with pytest.raises(ValidationError, match="Date is required"):
        generate_daily_reminders(notifications, references, date=missing)


def test_malformed_date_is_rejected(notifications, references):
    with pytest.raises(ValidationError):
        generate_daily_reminders(notifications, references, date="first of march")


def test_unknown_or_inactive_course_filter_is_not_found(campus, notifications, references):
    inactive = campus.course("HI100", "History", is_active=False)

    with pytest.raises(NotFoundError):
        generate_daily_reminders(notifications, references, date=REMINDER_DATE, course_id=999)
    with pytest.raises(NotFoundError):
        generate_daily_reminders(
            notifications, references, date=REMINDER_DATE, course_id=inactive
        )


def test_unknown_subject_is_not_found(notifications, references, course_with_two_students):
    course_id, _ = course_with_two_students

    with pytest.raises(NotFoundError, match="Subject"):
        generate_daily_reminders(
            notifications, references, date=REMINDER_DATE, course_id=course_id, subject_id=404
        )


def test_concurrent_duplicate_is_skipped_by_unique_index(
    monkeypatch, notifications, references, course_with_two_students
):
    course_id, _ = course_with_two_students
    generate_daily_reminders(notifications, references, date=REMINDER_DATE, course_id=course_id)

    # Simulate a second writer that passed the advisory check before the first committed.
    module = importlib.import_module(
        "attendance_notifier.application.use_cases.notifications.generate_daily_reminders"
    )
    monkeypatch.setattr(module, "reminder_exists", lambda *args, **kwargs: False)

    batch = generate_daily_reminders(
        notifications, references, date=datetime(2024, 3, 1, 7, tzinfo=timezone.utc),
        course_id=course_id,
    )

    assert batch.created_count == 0
    assert batch.skipped == 2
    assert batch.failures == []


def test_student_without_role_fails_only_their_course(
    campus, session, notifications, references
):
    broken_course = campus.course("BIO1", "Biology")
    healthy_course = campus.course("CHE1", "Chemistry")
    orphan = UserModel(role_id=9999, name="Orphan", email="orphan@campus.test")
    session.add(orphan)
    session.commit()
    healthy = campus.user("Gale")
    campus.enroll(orphan.id, broken_course)
    campus.enroll(healthy, healthy_course)

    batch = generate_daily_reminders(notifications, references, date=REMINDER_DATE)

    assert [(n.recipient_id, n.course_id) for n in batch.created] == [(healthy, healthy_course)]
    assert [(f.course_id, f.student_id) for f in batch.failures] == [(broken_course, None)]
    assert "Role of user" in batch.failures[0].reason
