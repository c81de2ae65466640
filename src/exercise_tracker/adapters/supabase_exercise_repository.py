"""Supabase repository for exercise entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_errors import store_errors
from exercise_tracker.domain.errors import StoreUnavailable
from exercise_tracker.domain.log_query import LogQuery
from exercise_tracker.domain.models import ExerciseEntry
from exercise_tracker.services.exercises import ExerciseRepository

_COLUMNS = "id, user_id, description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise entries."""

    client: Client
    table: str = "exercises"

    def create_entry(
        self, user_id: UUID, description: str, duration: int | float, entry_date: date
    ) -> ExerciseEntry:
        """Create an exercise row and return it."""
        with store_errors("create exercise"):
            response = (
                self.client.table(self.table)
                .insert(
                    {
                        "user_id": str(user_id),
                        "description": description,
                        "duration": duration,
                        "date": entry_date.isoformat(),
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreUnavailable("Failed to create exercise in Supabase")
        return _parse_entry(response.data[0])

    def query_entries(self, query: LogQuery) -> list[ExerciseEntry]:
        """Return a user's entries in the query's range, oldest first."""
        if query.matches_nothing:
            return []
        request = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("user_id", str(query.user_id))
        )
        if isinstance(query.date_from, date):
            request = request.gte("date", query.date_from.isoformat())
        if isinstance(query.date_to, date):
            request = request.lte("date", query.date_to.isoformat())
        request = request.order("date", desc=False).order("created_at", desc=False)
        if query.limit is not None:
            request = request.limit(query.limit)
        with store_errors("query exercises"):
            response = request.execute()
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> ExerciseEntry:
    return ExerciseEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        description=str(row.get("description", "")),
        duration=_parse_duration(row.get("duration", 0)),
        date=date.fromisoformat(str(row["date"])[:10]),
    )


def _parse_duration(raw: object) -> int | float:
    value = float(raw)  # type: ignore[arg-type]
    return int(value) if value.is_integer() else value
