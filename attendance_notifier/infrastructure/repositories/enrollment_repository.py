"""Read access to course enrollments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session, joinedload

from attendance_notifier.domain.entities import ENROLLMENT_STATUS_ENROLLED, User
from attendance_notifier.infrastructure.models import EnrollmentModel, UserModel
from attendance_notifier.infrastructure.repositories.user_repository import UserRepository


class EnrollmentRepository:
    """Resolve the students currently enrolled in a course."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_enrolled_students(self, course_id: int) -> Sequence[User]:
        """Return students with an active ``enrolled`` enrollment in ``course_id``."""

        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .join(EnrollmentModel, EnrollmentModel.student_id == UserModel.id)
            .filter(EnrollmentModel.course_id == course_id)
            .filter(EnrollmentModel.status == ENROLLMENT_STATUS_ENROLLED)
            .filter(EnrollmentModel.is_active.is_(True))
            .filter(UserModel.deleted.is_(False))
            .order_by(UserModel.id)
        )
        students: dict[int, User] = {}
        for model in query.all():
            students.setdefault(model.id, UserRepository._to_entity(model))
        return list(students.values())


__all__ = ["EnrollmentRepository"]
