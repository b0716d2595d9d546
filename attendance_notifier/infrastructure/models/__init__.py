"""ORM models used by the application infrastructure."""

from .role import RoleModel
from .user import UserModel
from .course import CourseModel, SubjectModel
from .enrollment import EnrollmentModel
from .attendance_notification import AttendanceNotificationModel

__all__ = [
    "AttendanceNotificationModel",
    "CourseModel",
    "EnrollmentModel",
    "RoleModel",
    "SubjectModel",
    "UserModel",
]
