"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class ExerciseEntry:
    """A single exercise record belonging to a user."""

    id: UUID
    user_id: UUID
    description: str
    duration: int | float
    date: date


@dataclass(frozen=True)
class NewEntry:
    """Validated input for a new exercise entry."""

    description: str
    duration: int | float
    date: date
