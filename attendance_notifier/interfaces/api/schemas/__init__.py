from .attendance_notification import (
    AttendanceMarkedRequest,
    CourseSummaryRead,
    DailyReminderRequest,
    DailyReminderResponse,
    GenerationFailureRead,
    LowAttendanceAlertRequest,
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationStatsRead,
    PaginationRead,
    StatsBucketRead,
    SubjectSummaryRead,
)

__all__ = [
    "AttendanceMarkedRequest",
    "CourseSummaryRead",
    "DailyReminderRequest",
    "DailyReminderResponse",
    "GenerationFailureRead",
    "LowAttendanceAlertRequest",
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationStatsRead",
    "PaginationRead",
    "StatsBucketRead",
    "SubjectSummaryRead",
]
