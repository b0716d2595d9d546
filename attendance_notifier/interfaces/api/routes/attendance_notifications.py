"""Routes for generating and managing attendance notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from attendance_notifier.application.use_cases.notifications import (
    ReferenceResolver,
    delete_notification as delete_notification_uc,
    generate_daily_reminders as generate_daily_reminders_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
    record_attendance_marked as record_attendance_marked_uc,
    record_low_attendance_alert as record_low_attendance_alert_uc,
    summarize_notifications as summarize_notifications_uc,
)
from attendance_notifier.domain.entities import AttendanceNotification, NotificationType, User
from attendance_notifier.domain.errors import (
    NotFoundError,
    NotificationError,
    StoreError,
    ValidationError,
)
from attendance_notifier.infrastructure.repositories import NotificationRepository
from attendance_notifier.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_repository,
    get_reference_resolver,
    require_admin,
    require_attendance_recorder,
)
from attendance_notifier.interfaces.api.schemas import (
    AttendanceMarkedRequest,
    DailyReminderRequest,
    DailyReminderResponse,
    GenerationFailureRead,
    LowAttendanceAlertRequest,
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationStatsRead,
    PaginationRead,
)

router = APIRouter(prefix="/attendance/notifications", tags=["attendance-notifications"])
logger = logging.getLogger(__name__)


def _to_read_model(notification: AttendanceNotification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _to_http_exception(exc: NotificationError) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, StoreError):
        logger.error("Notification store failure: %s", exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Server error while processing attendance notifications",
    )


@router.post("/daily-reminder", response_model=DailyReminderResponse)
def generate_daily_reminders(
    payload: DailyReminderRequest,
    notifications: NotificationRepository = Depends(get_notification_repository),
    references: ReferenceResolver = Depends(get_reference_resolver),
    _: User = Depends(require_admin),
) -> DailyReminderResponse:
    """Generate daily attendance reminders for the enrolled students."""

    try:
        batch = generate_daily_reminders_uc(
            notifications,
            references,
            date=payload.date,
            course_id=payload.course_id,
            subject_id=payload.subject_id,
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc

    return DailyReminderResponse(
        notifications_generated=batch.created_count,
        skipped=batch.skipped,
        notifications=[_to_read_model(notification) for notification in batch.created],
        failures=[GenerationFailureRead.model_validate(failure) for failure in batch.failures],
    )


@router.post(
    "/attendance-marked",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
)
def record_attendance_marked(
    payload: AttendanceMarkedRequest,
    notifications: NotificationRepository = Depends(get_notification_repository),
    references: ReferenceResolver = Depends(get_reference_resolver),
    current_user: User = Depends(require_attendance_recorder),
) -> NotificationRead:
    """Notify a student that the caller marked their attendance."""

    try:
        notification = record_attendance_marked_uc(
            notifications,
            references,
            student_id=payload.student_id,
            course_id=payload.course_id,
            subject_id=payload.subject_id,
            status=payload.status,
            date=payload.date,
            marked_by_id=current_user.id,
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return _to_read_model(notification)


@router.post(
    "/low-attendance-alert",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
)
def record_low_attendance_alert(
    payload: LowAttendanceAlertRequest,
    notifications: NotificationRepository = Depends(get_notification_repository),
    references: ReferenceResolver = Depends(get_reference_resolver),
    _: User = Depends(require_attendance_recorder),
) -> NotificationRead:
    """Alert a student whose attendance in a course is low."""

    try:
        notification = record_low_attendance_alert_uc(
            notifications,
            references,
            student_id=payload.student_id,
            course_id=payload.course_id,
            attendance_percentage=payload.attendance_percentage,
            date=payload.date,
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return _to_read_model(notification)


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    type: NotificationType | None = Query(None),
    is_read: bool | None = Query(None),
    notifications: NotificationRepository = Depends(get_notification_repository),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the caller's active attendance notifications, newest first."""

    try:
        result = list_notifications_uc(
            notifications,
            recipient_id=current_user.id,
            page=page,
            page_size=limit,
            notification_type=type,
            is_read=is_read,
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc

    return NotificationListResponse(
        notifications=[_to_read_model(notification) for notification in result.items],
        pagination=PaginationRead(current=result.page, pages=result.pages, total=result.total),
        unread_count=result.unread_count,
    )


@router.get("/stats", response_model=NotificationStatsRead)
def notification_stats(
    notifications: NotificationRepository = Depends(get_notification_repository),
    current_user: User = Depends(get_current_active_user),
) -> NotificationStatsRead:
    """Return read/unread counters grouped by type and priority."""

    try:
        stats = summarize_notifications_uc(notifications, recipient_id=current_user.id)
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return NotificationStatsRead.model_validate(stats)


@router.put("/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_notifications_read(
    notifications: NotificationRepository = Depends(get_notification_repository),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    """Mark every unread notification of the caller as read."""

    try:
        modified = mark_all_notifications_read_uc(notifications, recipient_id=current_user.id)
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return MarkAllReadResponse(modified_count=modified)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    notifications: NotificationRepository = Depends(get_notification_repository),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Mark one of the caller's notifications as read."""

    try:
        notification = mark_notification_read_uc(
            notifications, notification_id=notification_id, recipient_id=current_user.id
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return _to_read_model(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    notifications: NotificationRepository = Depends(get_notification_repository),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    """Soft-delete one of the caller's notifications."""

    try:
        delete_notification_uc(
            notifications, notification_id=notification_id, recipient_id=current_user.id
        )
    except NotificationError as exc:
        raise _to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
