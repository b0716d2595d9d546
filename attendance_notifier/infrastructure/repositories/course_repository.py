"""Read access to courses and subjects."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from attendance_notifier.domain.entities import Course, Subject
from attendance_notifier.infrastructure.models import CourseModel, SubjectModel


class CourseRepository:
    """Look up courses and the subjects attached to them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, course_id: int) -> Course | None:
        model = self.session.get(CourseModel, course_id)
        return self._to_entity(model) if model else None

    def get_active(self, course_id: int) -> Course | None:
        model = (
            self.session.query(CourseModel)
            .filter(CourseModel.id == course_id)
            .filter(CourseModel.is_active.is_(True))
            .first()
        )
        return self._to_entity(model) if model else None

    def list_active(self) -> Sequence[Course]:
        query = (
            self.session.query(CourseModel)
            .filter(CourseModel.is_active.is_(True))
            .order_by(CourseModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get_subject(self, subject_id: int) -> Subject | None:
        model = self.session.get(SubjectModel, subject_id)
        if model is None:
            return None
        return Subject(
            id=model.id,
            course_id=model.course_id,
            name=model.name,
            code=model.code,
            is_active=model.is_active,
        )

    @staticmethod
    def _to_entity(model: CourseModel) -> Course:
        return Course(
            id=model.id,
            course_code=model.course_code,
            title=model.title,
            status=model.status,
            is_active=model.is_active,
        )


__all__ = ["CourseRepository"]
