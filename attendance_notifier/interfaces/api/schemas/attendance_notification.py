"""Pydantic models describing attendance notification payloads."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from attendance_notifier.domain.entities import (
    AttendanceStatus,
    NotificationPriority,
    NotificationType,
)


class CourseSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    course_code: str


class SubjectSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    code: str


class NotificationRead(BaseModel):
    """Representation of an attendance notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    type: NotificationType
    title: str
    message: str
    recipient_id: int
    course: CourseSummaryRead | None = None
    subject: SubjectSummaryRead | None = None
    date: dt.date
    priority: NotificationPriority
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_read: bool
    read_at: dt.datetime | None = None
    created_at: dt.datetime


class PaginationRead(BaseModel):
    current: int
    pages: int
    total: int


class NotificationListResponse(BaseModel):
    notifications: list[NotificationRead]
    pagination: PaginationRead
    unread_count: int


class DailyReminderRequest(BaseModel):
    """Payload that triggers daily reminder generation."""

    date: dt.date = Field(..., description="Calendar date the reminders refer to")
    course_id: int | None = Field(default=None, ge=1)
    subject_id: int | None = Field(default=None, ge=1)


class GenerationFailureRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    course_id: int
    student_id: int | None = None
    reason: str


class DailyReminderResponse(BaseModel):
    notifications_generated: int
    skipped: int
    notifications: list[NotificationRead]
    failures: list[GenerationFailureRead] = Field(default_factory=list)


class AttendanceMarkedRequest(BaseModel):
    """Payload describing an attendance marking event."""

    student_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    subject_id: int | None = Field(default=None, ge=1)
    status: AttendanceStatus
    date: dt.date


class LowAttendanceAlertRequest(BaseModel):
    """Payload describing a student whose attendance dropped."""

    student_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    attendance_percentage: float = Field(..., ge=0, le=100)
    date: dt.date | None = None


class MarkAllReadResponse(BaseModel):
    modified_count: int


class StatsBucketRead(BaseModel):
    total: int
    unread: int


class NotificationStatsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    unread: int
    by_type: dict[str, StatsBucketRead] = Field(default_factory=dict)
    by_priority: dict[str, StatsBucketRead] = Field(default_factory=dict)


__all__ = [
    "AttendanceMarkedRequest",
    "CourseSummaryRead",
    "DailyReminderRequest",
    "DailyReminderResponse",
    "GenerationFailureRead",
    "LowAttendanceAlertRequest",
    "MarkAllReadResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationStatsRead",
    "PaginationRead",
    "StatsBucketRead",
    "SubjectSummaryRead",
]
