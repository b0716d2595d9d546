"""Domain entities for courses and subjects."""

from __future__ import annotations

from dataclasses import dataclass

COURSE_STATUS_ACTIVE = "active"
COURSE_STATUS_INACTIVE = "inactive"
COURSE_STATUS_ARCHIVED = "archived"


@dataclass
class Course:
    """Course offered by the institution."""

    id: int
    course_code: str
    title: str
    status: str = COURSE_STATUS_ACTIVE
    is_active: bool = True


@dataclass
class Subject:
    """Subject taught inside a course."""

    id: int
    course_id: int | None
    name: str
    code: str
    is_active: bool = True


@dataclass(frozen=True)
class CourseSummary:
    """Display fields of a course attached to listed notifications."""

    id: int
    title: str
    course_code: str


@dataclass(frozen=True)
class SubjectSummary:
    """Display fields of a subject attached to listed notifications."""

    id: int
    name: str
    code: str


__all__ = [
    "COURSE_STATUS_ACTIVE",
    "COURSE_STATUS_ARCHIVED",
    "COURSE_STATUS_INACTIVE",
    "Course",
    "CourseSummary",
    "Subject",
    "SubjectSummary",
]
