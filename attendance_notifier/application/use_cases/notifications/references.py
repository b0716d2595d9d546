"""Resolve the people and courses a notification talks about."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from attendance_notifier.domain.entities import Course, Subject, User
from attendance_notifier.domain.errors import NotFoundError, StoreError
from attendance_notifier.infrastructure.repositories import (
    CourseRepository,
    EnrollmentRepository,
    UserRepository,
)

T = TypeVar("T")


@contextmanager
def _reference_lookup(description: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StoreError(f"Store failed while resolving {description}") from exc


class ReferenceResolver:
    """Look up students, courses and markers, failing fast when one is missing."""

    def __init__(
        self,
        *,
        users: UserRepository,
        courses: CourseRepository,
        enrollments: EnrollmentRepository,
    ) -> None:
        self.users = users
        self.courses = courses
        self.enrollments = enrollments

    @classmethod
    def from_session(cls, session: Session) -> "ReferenceResolver":
        return cls(
            users=UserRepository(session),
            courses=CourseRepository(session),
            enrollments=EnrollmentRepository(session),
        )

    def get_student(self, student_id: int) -> User:
        return self._require(self.users.get, student_id, "Student")

    def get_marker(self, user_id: int) -> User:
        return self._require(self.users.get, user_id, "Marking user")

    def get_course(self, course_id: int) -> Course:
        return self._require(self.courses.get, course_id, "Course")

    def get_subject(self, subject_id: int) -> Subject:
        return self._require(self.courses.get_subject, subject_id, "Subject")

    def target_courses(self, course_id: int | None = None) -> Sequence[Course]:
        """Return the single active course ``course_id`` or every active course."""

        if course_id is None:
            with _reference_lookup("active courses"):
                return list(self.courses.list_active())
        return [self._require(self.courses.get_active, course_id, "Active course")]

    def enrolled_students(self, course_id: int) -> Sequence[User]:
        with _reference_lookup(f"the roster of course {course_id}"):
            return list(self.enrollments.list_enrolled_students(course_id))

    @staticmethod
    def _require(lookup: Callable[[int], T | None], identifier: int, label: str) -> T:
        with _reference_lookup(f"{label.lower()} {identifier}"):
            entity = lookup(identifier)
        if entity is None:
            raise NotFoundError(f"{label} not found")
        return entity


__all__ = ["ReferenceResolver"]
