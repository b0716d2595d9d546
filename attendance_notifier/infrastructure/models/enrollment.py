"""SQLAlchemy model for course enrollments."""

from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, String

from attendance_notifier.infrastructure.database import Base


class EnrollmentModel(Base):
    """Database representation of a student's enrollment in a course."""

    __tablename__ = "enrollment"
    __table_args__ = (
        Index("ix_enrollment_course_status", "course_id", "status", "is_active"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("course.id"), nullable=False)
    status = Column(String(20), nullable=False, default="enrolled")
    is_active = Column(Boolean, nullable=False, default=True)


__all__ = ["EnrollmentModel"]
