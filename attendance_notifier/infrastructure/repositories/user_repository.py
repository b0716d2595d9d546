"""Read access to the users notifications are addressed to."""

from __future__ import annotations

from sqlalchemy.orm import Session, joinedload

from attendance_notifier.domain.entities import Role, User
from attendance_notifier.domain.errors import NotFoundError
from attendance_notifier.infrastructure.models import RoleModel, UserModel


class UserRepository:
    """Resolve students, markers and API principals by id."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        """Return the user unless it is missing or soft deleted."""

        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id == user_id, UserModel.deleted.is_(False))
            .first()
        )
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=_role_to_entity(model),
            name=model.name,
            email=model.email,
            is_active=model.is_active,
            deleted=model.deleted,
        )


def _role_to_entity(user: UserModel) -> Role:
    role: RoleModel | None = user.role
    if role is None:
        msg = f"Role of user {user.id} not found"
        raise NotFoundError(msg)
    return Role(id=role.id, name=role.name, alias=role.alias)


__all__ = ["UserRepository"]
