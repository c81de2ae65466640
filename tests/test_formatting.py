"""Tests for response formatting."""

from datetime import date
from uuid import uuid4

from exercise_tracker.api.formatting import (
    format_date,
    format_entry,
    format_log,
    format_user,
)
from exercise_tracker.domain.models import ExerciseEntry, UserRecord


def test_format_date_uses_fixed_abbreviations() -> None:
    assert format_date(date(2023, 5, 10)) == "Wed May 10 2023"
    assert format_date(date(2024, 1, 1)) == "Mon Jan 01 2024"
    assert format_date(date(999, 12, 5)) == "Thu Dec 05 0999"


def test_format_user() -> None:
    user = UserRecord(id=uuid4(), username="alice")

    assert format_user(user) == {"username": "alice", "_id": str(user.id)}


def test_format_entry_and_log() -> None:
    user = UserRecord(id=uuid4(), username="alice")
    entries = [
        ExerciseEntry(uuid4(), user.id, "run", 30, date(2023, 5, 10)),
        ExerciseEntry(uuid4(), user.id, "swim", 12.5, date(2023, 5, 11)),
    ]

    assert format_entry(user, entries[0]) == {
        "_id": str(user.id),
        "username": "alice",
        "date": "Wed May 10 2023",
        "duration": 30,
        "description": "run",
    }
    assert format_log(user, entries) == {
        "_id": str(user.id),
        "username": "alice",
        "count": 2,
        "log": [
            {"description": "run", "duration": 30, "date": "Wed May 10 2023"},
            {"description": "swim", "duration": 12.5, "date": "Thu May 11 2023"},
        ],
    }


def test_format_log_empty() -> None:
    user = UserRecord(id=uuid4(), username="bob")

    assert format_log(user, [])["count"] == 0
    assert format_log(user, [])["log"] == []
