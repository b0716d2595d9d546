"""SQLAlchemy models for courses and their subjects."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from attendance_notifier.infrastructure.database import Base


class CourseModel(Base):
    """Database representation of a course."""

    __tablename__ = "course"

    id = Column(Integer, primary_key=True, index=True)
    course_code = Column(String(20), nullable=False, unique=True)
    title = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default="active")
    is_active = Column(Boolean, nullable=False, default=True, index=True)


class SubjectModel(Base):
    """Database representation of a subject taught within a course."""

    __tablename__ = "subject"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("course.id"), nullable=True, index=True)
    name = Column(String(200), nullable=False)
    code = Column(String(20), nullable=False, unique=True)
    is_active = Column(Boolean, nullable=False, default=True)


__all__ = ["CourseModel", "SubjectModel"]
