"""Status values of a student's enrollment in a course.

Only ``enrolled`` rows that are still active count as current enrollments.
"""

ENROLLMENT_STATUS_ENROLLED = "enrolled"
ENROLLMENT_STATUS_DROPPED = "dropped"
ENROLLMENT_STATUS_COMPLETED = "completed"


__all__ = [
    "ENROLLMENT_STATUS_COMPLETED",
    "ENROLLMENT_STATUS_DROPPED",
    "ENROLLMENT_STATUS_ENROLLED",
]
