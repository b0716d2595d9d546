"""SQLAlchemy model for the role a user acts under."""

from sqlalchemy import Column, Integer, String

from attendance_notifier.infrastructure.database import Base


class RoleModel(Base):
    """Admin, faculty and student roles; ``alias`` drives authorization."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False)
    alias = Column(String(30), nullable=False, unique=True, index=True)


__all__ = ["RoleModel"]
