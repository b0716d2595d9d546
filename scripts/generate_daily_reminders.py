"""Generate daily attendance reminders from the command line.

Intended to be invoked by an external scheduler once per calendar date.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date

from attendance_notifier.application.use_cases.notifications import (
    ReferenceResolver,
    generate_daily_reminders,
)
from attendance_notifier.domain.errors import NotificationError
from attendance_notifier.infrastructure.database import SessionLocal, initialize_database
from attendance_notifier.infrastructure.repositories import NotificationRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for reminder generation."""

    parser = argparse.ArgumentParser(
        description="Create daily attendance reminders for enrolled students.",
    )
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        required=True,
        help="Reminder date in YYYY-MM-DD format",
    )
    parser.add_argument(
        "--course-id",
        type=int,
        default=None,
        help="Only generate reminders for this course",
    )
    parser.add_argument(
        "--subject-id",
        type=int,
        default=None,
        help="Subject identifier recorded on every reminder (optional)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every skipped or failed unit",
    )
    return parser.parse_args()


def main() -> int:
    """Run one reminder batch and return the process exit status."""

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    initialize_database()

    session = SessionLocal()
    try:
        batch = generate_daily_reminders(
            NotificationRepository(session),
            ReferenceResolver.from_session(session),
            date=args.date,
            course_id=args.course_id,
            subject_id=args.subject_id,
        )
    except NotificationError as exc:
        raise SystemExit(f"Could not generate daily reminders: {exc}") from exc
    finally:
        session.close()

    print(
        f"Daily reminders for {batch.date.isoformat()}:\n"
        f"  Created: {batch.created_count}\n"
        f"  Skipped: {batch.skipped}\n"
        f"  Failed: {len(batch.failures)}"
    )
    for failure in batch.failures:
        student = failure.student_id if failure.student_id is not None else "-"
        print(f"    course={failure.course_id} student={student}: {failure.reason}")
    return 1 if batch.failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
