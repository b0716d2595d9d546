"""Failure isolation of reminder batches, run against in-memory collaborators."""

from __future__ import annotations

import dataclasses
from datetime import date

from attendance_notifier.application.use_cases.notifications import generate_daily_reminders
from attendance_notifier.domain.entities import Course, Role, User
from attendance_notifier.domain.errors import NotFoundError, StoreError

STUDENT_ROLE = Role(id=3, name="Student", alias="student")


def _student(user_id: int) -> User:
    return User(id=user_id, role=STUDENT_ROLE, name=f"Student {user_id}", email=f"s{user_id}@x.test")


class InMemoryNotificationStore:
    """Notification store double that can fail inserts for chosen recipients."""

    def __init__(self, failing_recipients=()) -> None:
        self.records = []
        self.failing_recipients = set(failing_recipients)

    def find_active(self, *, notification_type, recipient_id, course_id, on_date):
        for record in self.records:
            if (
                record.is_active
                and record.type == notification_type
                and record.recipient_id == recipient_id
                and record.course_id == course_id
                and record.date == on_date
            ):
                return record
        return None

    def create(self, notification):
        if notification.recipient_id in self.failing_recipients:
            raise StoreError("write timed out")
        stored = dataclasses.replace(notification, id=len(self.records) + 1)
        self.records.append(stored)
        return stored


class StaticReferences:
    """Reference resolver double backed by fixed rosters."""

    def __init__(self, rosters, broken_courses=(), vanished_courses=()) -> None:
        self.courses = [
            Course(id=course_id, course_code=f"C{course_id}", title=f"Course {course_id}")
            for course_id in rosters
        ]
        self.rosters = rosters
        self.broken_courses = set(broken_courses)
        self.vanished_courses = set(vanished_courses)

    def get_subject(self, subject_id):
        raise NotFoundError("Subject not found")

    def target_courses(self, course_id=None):
        return [course for course in self.courses if course_id in (None, course.id)]

    def enrolled_students(self, course_id):
        if course_id in self.broken_courses:
            raise StoreError("connection reset")
        if course_id in self.vanished_courses:
            raise NotFoundError("Course not found")
        return [_student(student_id) for student_id in self.rosters[course_id]]


def test_failed_insert_does_not_abort_sibling_units():
    store = InMemoryNotificationStore(failing_recipients={11})
    references = StaticReferences({1: [10, 11, 12], 2: [11, 13]})

    batch = generate_daily_reminders(store, references, date=date(2024, 3, 1))

    assert sorted((n.course_id, n.recipient_id) for n in batch.created) == [
        (1, 10),
        (1, 12),
        (2, 13),
    ]
    assert sorted((f.course_id, f.student_id) for f in batch.failures) == [(1, 11), (2, 11)]
    assert all(f.reason == "write timed out" for f in batch.failures)


def test_roster_failure_is_recorded_per_course():
    store = InMemoryNotificationStore()
    references = StaticReferences(
        {1: [10], 2: [20], 3: [30]}, broken_courses={2}, vanished_courses={3}
    )

    batch = generate_daily_reminders(store, references, date=date(2024, 3, 1))

    assert [n.recipient_id for n in batch.created] == [10]
    assert [(f.course_id, f.student_id) for f in batch.failures] == [(2, None), (3, None)]


def test_failed_units_are_created_when_the_batch_is_resumed():
    store = InMemoryNotificationStore(failing_recipients={11})
    references = StaticReferences({1: [10, 11]})
    generate_daily_reminders(store, references, date=date(2024, 3, 1))

    store.failing_recipients.clear()
    batch = generate_daily_reminders(store, references, date=date(2024, 3, 1))

    assert [n.recipient_id for n in batch.created] == [11]
    assert batch.skipped == 1
    assert len(store.records) == 2
