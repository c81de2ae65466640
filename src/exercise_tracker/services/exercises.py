"""Exercise entry and log business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from exercise_tracker.domain.log_query import LogQuery, build_log_query
from exercise_tracker.domain.models import ExerciseEntry, UserRecord
from exercise_tracker.domain.validation import (
    resolve_entry_date,
    validate_entry_fields,
)
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Persistence interface for exercise entries."""

    def create_entry(
        self, user_id: UUID, description: str, duration: int | float, entry_date: date
    ) -> ExerciseEntry:
        """Create and return a new exercise entry."""

    def query_entries(self, query: LogQuery) -> list[ExerciseEntry]:
        """Return entries matching the query, sorted by date ascending."""


def utc_today() -> date:
    """Return the current calendar date in UTC."""
    return datetime.now(tz=UTC).date()


def today_in(timezone_name: str) -> Callable[[], date]:
    """Return a clock giving the current calendar date in a timezone."""
    tz = ZoneInfo(timezone_name)

    def today() -> date:
        return datetime.now(tz=tz).date()

    return today


@dataclass
class ExerciseService:
    """Service for recording exercises and reading logs."""

    user_service: UserService
    repository: ExerciseRepository
    today: Callable[[], date] = field(default=utc_today)

    def add_entry(
        self,
        raw_user_id: str,
        description: str | None,
        duration: object,
        entry_date: str | None,
    ) -> tuple[UserRecord, ExerciseEntry]:
        """Validate and store a new entry for an existing user.

        Required fields are checked first, then the user, then the date.
        """
        value = validate_entry_fields(description, duration)
        user = self.user_service.get_user(raw_user_id)
        day = resolve_entry_date(entry_date, today=self.today())
        entry = self.repository.create_entry(
            user.id,
            description,  # type: ignore[arg-type]
            value,
            day,
        )
        logger.info(
            "Recorded exercise",
            extra={"user_id": str(user.id), "entry_id": str(entry.id)},
        )
        return user, entry

    def get_log(
        self,
        raw_user_id: str,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | None = None,
    ) -> tuple[UserRecord, list[ExerciseEntry]]:
        """Return a user's log filtered by date range and capped by limit."""
        user = self.user_service.get_user(raw_user_id)
        query = build_log_query(user.id, date_from, date_to, limit)
        return user, self.repository.query_entries(query)
