"""SQLAlchemy model for persisted attendance notifications."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    and_,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from attendance_notifier.infrastructure.database import Base
from attendance_notifier.utils import now_in_app_naive_datetime


class AttendanceNotificationModel(Base):
    """Database representation for attendance notifications."""

    __tablename__ = "attendance_notification"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(30), nullable=False, index=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    recipient_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("course.id"), nullable=False)
    subject_id = Column(Integer, ForeignKey("subject.id"), nullable=True)
    date = Column(Date, nullable=False, index=True)
    priority = Column(String(10), nullable=False, default="medium")
    payload = Column("metadata", JSON, nullable=False, default=dict)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    read_at = Column(DateTime(), nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    __table_args__ = (
        Index("ix_attendance_notification_recipient_read", "recipient_id", "is_read"),
        # At most one active daily reminder per recipient, course and date.
        Index(
            "ux_attendance_notification_active_reminder",
            "type",
            "recipient_id",
            "course_id",
            "date",
            unique=True,
            sqlite_where=and_(is_active == expression.true(), type == "daily_reminder"),
            postgresql_where=and_(is_active == expression.true(), type == "daily_reminder"),
        ),
    )

    course = relationship("CourseModel", lazy="joined")
    subject = relationship("SubjectModel", lazy="joined")


__all__ = ["AttendanceNotificationModel"]
