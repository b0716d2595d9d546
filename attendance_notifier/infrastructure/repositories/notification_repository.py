"""Persistence helpers for attendance notification entities."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date, datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from attendance_notifier.domain.entities import (
    AttendanceNotification,
    CourseSummary,
    NotificationType,
    SubjectSummary,
)
from attendance_notifier.domain.errors import DuplicateNotificationError, StoreError
from attendance_notifier.infrastructure.models import AttendanceNotificationModel
from attendance_notifier.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Provide CRUD operations for :class:`AttendanceNotification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> AttendanceNotification | None:
        with self._store_operation("loading a notification"):
            model = self.session.get(AttendanceNotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def find_active(
        self,
        *,
        notification_type: NotificationType,
        recipient_id: int,
        course_id: int,
        on_date: date,
    ) -> AttendanceNotification | None:
        if isinstance(on_date, datetime):
            on_date = on_date.date()
        with self._store_operation("looking up an active notification"):
            model = (
                self.session.query(AttendanceNotificationModel)
                .filter(AttendanceNotificationModel.type == NotificationType(notification_type).value)
                .filter(AttendanceNotificationModel.recipient_id == recipient_id)
                .filter(AttendanceNotificationModel.course_id == course_id)
                .filter(AttendanceNotificationModel.date == on_date)
                .filter(AttendanceNotificationModel.is_active.is_(True))
                .first()
            )
        return self._to_entity(model) if model else None

    def create(self, notification: AttendanceNotification) -> AttendanceNotification:
        model = AttendanceNotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if notification.type is NotificationType.DAILY_REMINDER and self.find_active(
                notification_type=notification.type,
                recipient_id=notification.recipient_id,
                course_id=notification.course_id,
                on_date=notification.date,
            ):
                msg = (
                    f"An active daily reminder already exists for recipient "
                    f"{notification.recipient_id} in course {notification.course_id} "
                    f"on {notification.date.isoformat()}"
                )
                raise DuplicateNotificationError(msg) from exc
            logger.exception("Integrity error while creating a notification")
            raise StoreError("Notification store rejected the new notification") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Notification store failed while creating a notification")
            raise StoreError("Notification store failed while creating a notification") from exc
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_read(
        self, notification_id: int, *, recipient_id: int, read_at: datetime | None = None
    ) -> AttendanceNotification | None:
        """Mark an owned, active notification as read and return it."""

        with self._store_operation("marking a notification as read"):
            model = self._owned_active_query(notification_id, recipient_id).first()
            if model is None:
                return None
            model.is_read = True
            model.read_at = ensure_app_naive_datetime(read_at or now_in_app_timezone())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_read(self, *, recipient_id: int, read_at: datetime | None = None) -> int:
        """Mark every unread active notification of ``recipient_id`` as read."""

        with self._store_operation("marking all notifications as read"):
            modified = (
                self.session.query(AttendanceNotificationModel)
                .filter(AttendanceNotificationModel.recipient_id == recipient_id)
                .filter(AttendanceNotificationModel.is_read.is_(False))
                .filter(AttendanceNotificationModel.is_active.is_(True))
                .update(
                    {
                        AttendanceNotificationModel.is_read: True,
                        AttendanceNotificationModel.read_at: ensure_app_naive_datetime(
                            read_at or now_in_app_timezone()
                        ),
                    },
                    synchronize_session=False,
                )
            )
            self.session.commit()
        return int(modified or 0)

    def soft_delete(self, notification_id: int, *, recipient_id: int) -> bool:
        """Deactivate an owned, active notification. Return ``False`` if none matched."""

        with self._store_operation("deleting a notification"):
            model = self._owned_active_query(notification_id, recipient_id).first()
            if model is None:
                return False
            model.is_active = False
            self.session.add(model)
            self.session.commit()
        return True

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        notification_type: NotificationType | None = None,
        is_read: bool | None = None,
        skip: int = 0,
        limit: int | None = 10,
    ) -> Sequence[AttendanceNotification]:
        query = self._recipient_query(
            recipient_id, notification_type=notification_type, is_read=is_read
        ).order_by(
            AttendanceNotificationModel.created_at.desc(),
            AttendanceNotificationModel.id.desc(),
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        with self._store_operation("listing notifications"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def count_for_recipient(
        self,
        recipient_id: int,
        *,
        notification_type: NotificationType | None = None,
        is_read: bool | None = None,
    ) -> int:
        query = self._recipient_query(
            recipient_id, notification_type=notification_type, is_read=is_read
        )
        with self._store_operation("counting notifications"):
            return query.count()

    def stats_for_recipient(self, recipient_id: int) -> list[tuple[str, str, bool, int]]:
        """Return ``(type, priority, is_read, count)`` rows for active notifications."""

        with self._store_operation("computing notification statistics"):
            rows = (
                self.session.query(
                    AttendanceNotificationModel.type,
                    AttendanceNotificationModel.priority,
                    AttendanceNotificationModel.is_read,
                    func.count(AttendanceNotificationModel.id),
                )
                .filter(AttendanceNotificationModel.recipient_id == recipient_id)
                .filter(AttendanceNotificationModel.is_active.is_(True))
                .group_by(
                    AttendanceNotificationModel.type,
                    AttendanceNotificationModel.priority,
                    AttendanceNotificationModel.is_read,
                )
                .all()
            )
        return [(row[0], row[1], bool(row[2]), int(row[3])) for row in rows]

    @contextmanager
    def _store_operation(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception("Notification store failed while %s", action)
            raise StoreError(f"Notification store failed while {action}") from exc

    def _owned_active_query(self, notification_id: int, recipient_id: int) -> Query:
        return (
            self.session.query(AttendanceNotificationModel)
            .filter(AttendanceNotificationModel.id == notification_id)
            .filter(AttendanceNotificationModel.recipient_id == recipient_id)
            .filter(AttendanceNotificationModel.is_active.is_(True))
        )

    def _recipient_query(
        self,
        recipient_id: int,
        *,
        notification_type: NotificationType | None,
        is_read: bool | None,
    ) -> Query:
        query = (
            self.session.query(AttendanceNotificationModel)
            .filter(AttendanceNotificationModel.recipient_id == recipient_id)
            .filter(AttendanceNotificationModel.is_active.is_(True))
        )
        if notification_type is not None:
            query = query.filter(
                AttendanceNotificationModel.type == NotificationType(notification_type).value
            )
        if is_read is not None:
            query = query.filter(AttendanceNotificationModel.is_read.is_(is_read))
        return query

    @staticmethod
    def _apply_entity_to_model(
        model: AttendanceNotificationModel, notification: AttendanceNotification
    ) -> None:
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.type = notification.type.value
        model.title = notification.title
        model.message = notification.message
        model.recipient_id = notification.recipient_id
        model.course_id = notification.course_id
        model.subject_id = notification.subject_id
        model.date = notification.date
        model.priority = notification.priority.value
        model.payload = dict(notification.metadata or {})
        model.is_read = notification.is_read
        model.read_at = ensure_app_naive_datetime(notification.read_at)
        model.is_active = notification.is_active

    @staticmethod
    def _to_entity(model: AttendanceNotificationModel) -> AttendanceNotification:
        course = model.course
        subject = model.subject
        return AttendanceNotification(
            id=model.id,
            type=model.type,
            title=model.title,
            message=model.message,
            recipient_id=model.recipient_id,
            course_id=model.course_id,
            subject_id=model.subject_id,
            date=model.date,
            priority=model.priority,
            metadata=dict(model.payload or {}),
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
            course=(
                CourseSummary(id=course.id, title=course.title, course_code=course.course_code)
                if course is not None
                else None
            ),
            subject=(
                SubjectSummary(id=subject.id, name=subject.name, code=subject.code)
                if subject is not None
                else None
            ),
        )


__all__ = ["NotificationRepository"]
