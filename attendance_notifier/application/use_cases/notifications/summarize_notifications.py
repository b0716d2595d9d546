"""Use case computing read/unread counters for a recipient."""

from __future__ import annotations

from dataclasses import dataclass, field

from attendance_notifier.infrastructure.repositories import NotificationRepository


@dataclass
class NotificationStats:
    """Totals over a recipient's active notifications, bucketed by type and priority."""

    total: int = 0
    unread: int = 0
    by_type: dict[str, dict[str, int]] = field(default_factory=dict)
    by_priority: dict[str, dict[str, int]] = field(default_factory=dict)


def summarize_notifications(
    notifications: NotificationRepository, *, recipient_id: int
) -> NotificationStats:
    stats = NotificationStats()
    for notification_type, priority, is_read, count in notifications.stats_for_recipient(
        recipient_id
    ):
        unread = 0 if is_read else count
        stats.total += count
        stats.unread += unread
        for buckets, key in ((stats.by_type, notification_type), (stats.by_priority, priority)):
            bucket = buckets.setdefault(key, {"total": 0, "unread": 0})
            bucket["total"] += count
            bucket["unread"] += unread
    return stats


__all__ = ["NotificationStats", "summarize_notifications"]
