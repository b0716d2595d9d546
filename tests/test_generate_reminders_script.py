"""Tests for the scheduler entry point that runs one reminder batch."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

from attendance_notifier.infrastructure.repositories import NotificationRepository

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "generate_daily_reminders.py"


@pytest.fixture()
def script():
    spec = importlib.util.spec_from_file_location("generate_daily_reminders_script", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_date_argument_is_required(script, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["generate_daily_reminders.py"])

    with pytest.raises(SystemExit) as excinfo:
        script.parse_args()

    assert excinfo.value.code == 2
    assert "--date" in capsys.readouterr().err


def test_malformed_date_argument_is_rejected(script, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["generate_daily_reminders.py", "--date", "03/01/2024"])

    with pytest.raises(SystemExit) as excinfo:
        script.parse_args()

    assert excinfo.value.code == 2


def test_run_creates_reminders_and_reports_counts(script, campus, session, monkeypatch, capsys):
    course_id = campus.course("AR100", "Art History")
    student = campus.user("Hugo")
    campus.enroll(student, course_id)
    monkeypatch.setattr(sys, "argv", ["generate_daily_reminders.py", "--date", "2024-03-01"])

    assert script.main() == 0

    output = capsys.readouterr().out
    assert "Daily reminders for 2024-03-01" in output
    assert "Created: 1" in output
    assert NotificationRepository(session).count_for_recipient(student) == 1
