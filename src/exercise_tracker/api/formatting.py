"""Response shapes for users, entries and logs.

Dates are rendered as ``Wed May 10 2023`` from fixed English abbreviations so
the output never depends on the process locale.
"""

from datetime import date

from exercise_tracker.domain.models import ExerciseEntry, UserRecord
from exercise_tracker.domain.validation import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
)


def format_date(value: date) -> str:
    """Format a date as weekday, month, zero-padded day and 4-digit year."""
    weekday = WEEKDAY_ABBREVIATIONS[value.weekday()]
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return f"{weekday} {month} {value.day:02d} {value.year:04d}"


def format_user(user: UserRecord) -> dict[str, object]:
    """Return the public view of a user."""
    return {"username": user.username, "_id": str(user.id)}


def format_entry(user: UserRecord, entry: ExerciseEntry) -> dict[str, object]:
    """Return a created entry merged with its owner."""
    return {
        "_id": str(user.id),
        "username": user.username,
        "date": format_date(entry.date),
        "duration": entry.duration,
        "description": entry.description,
    }


def format_log(user: UserRecord, entries: list[ExerciseEntry]) -> dict[str, object]:
    """Return a user's log with its entry count."""
    log = [
        {
            "description": entry.description,
            "duration": entry.duration,
            "date": format_date(entry.date),
        }
        for entry in entries
    ]
    return {
        "_id": str(user.id),
        "username": user.username,
        "count": len(log),
        "log": log,
    }
