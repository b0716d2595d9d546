"""Shared fixtures: a throwaway SQLite database and record factories."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "attendance_notifier_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from attendance_notifier.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from attendance_notifier.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from attendance_notifier.infrastructure.models import (  # noqa: E402
    CourseModel,
    EnrollmentModel,
    RoleModel,
    SubjectModel,
    UserModel,
)


class CampusFactory:
    """Insert the reference records notifications point at."""

    def __init__(self, session) -> None:
        self.session = session
        self._roles: dict[str, int] = {}

    def role(self, alias: str) -> int:
        if alias not in self._roles:
            role = RoleModel(name=alias.title(), alias=alias)
            self._save(role)
            self._roles[alias] = role.id
        return self._roles[alias]

    def user(self, name: str, *, role: str = "student", is_active: bool = True) -> int:
        email = f"{name.lower().replace(' ', '.')}@campus.test"
        user = UserModel(role_id=self.role(role), name=name, email=email, is_active=is_active)
        return self._save(user).id

    def course(self, code: str, title: str, *, is_active: bool = True) -> int:
        course = CourseModel(course_code=code, title=title, is_active=is_active)
        return self._save(course).id

    def subject(self, course_id: int, code: str, name: str) -> int:
        subject = SubjectModel(course_id=course_id, code=code, name=name)
        return self._save(subject).id

    def enroll(
        self,
        student_id: int,
        course_id: int,
        *,
        status: str = "enrolled",
        is_active: bool = True,
    ) -> int:
        enrollment = EnrollmentModel(
            student_id=student_id, course_id=course_id, status=status, is_active=is_active
        )
        return self._save(enrollment).id

    def _save(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db_session:
        yield db_session


@pytest.fixture()
def campus(session) -> CampusFactory:
    return CampusFactory(session)
