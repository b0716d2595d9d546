"""Domain entities exposed by the application."""

from .course import (
    COURSE_STATUS_ACTIVE,
    COURSE_STATUS_ARCHIVED,
    COURSE_STATUS_INACTIVE,
    Course,
    CourseSummary,
    Subject,
    SubjectSummary,
)
from .enrollment import (
    ENROLLMENT_STATUS_COMPLETED,
    ENROLLMENT_STATUS_DROPPED,
    ENROLLMENT_STATUS_ENROLLED,
)
from .notification import (
    AttendanceMarkedMetadata,
    AttendanceNotification,
    AttendanceStatus,
    DailyReminderMetadata,
    LowAttendanceMetadata,
    NotificationPriority,
    NotificationType,
)
from .role import ROLE_ADMIN, ROLE_FACULTY, ROLE_STUDENT, Role
from .user import User

__all__ = [
    "AttendanceMarkedMetadata",
    "AttendanceNotification",
    "AttendanceStatus",
    "COURSE_STATUS_ACTIVE",
    "COURSE_STATUS_ARCHIVED",
    "COURSE_STATUS_INACTIVE",
    "Course",
    "CourseSummary",
    "DailyReminderMetadata",
    "ENROLLMENT_STATUS_COMPLETED",
    "ENROLLMENT_STATUS_DROPPED",
    "ENROLLMENT_STATUS_ENROLLED",
    "LowAttendanceMetadata",
    "NotificationPriority",
    "NotificationType",
    "ROLE_ADMIN",
    "ROLE_FACULTY",
    "ROLE_STUDENT",
    "Role",
    "Subject",
    "SubjectSummary",
    "User",
]
