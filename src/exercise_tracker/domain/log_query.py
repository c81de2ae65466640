"""Log query construction for the exercise log endpoint."""

from dataclasses import dataclass
from datetime import date
from typing import Final
from uuid import UUID

from exercise_tracker.domain.validation import parse_date, parse_limit


class _InvalidDate:
    """Marker for a range bound that could not be parsed."""

    def __repr__(self) -> str:
        return "INVALID_DATE"


INVALID_DATE: Final = _InvalidDate()

DateBound = date | _InvalidDate | None


@dataclass(frozen=True)
class LogQuery:
    """Store query for a user's exercise log.

    Results are always sorted by date ascending.
    """

    user_id: UUID
    date_from: DateBound = None
    date_to: DateBound = None
    limit: int | None = None

    @property
    def matches_nothing(self) -> bool:
        """Return True when a bound is invalid, so no entry can match."""
        return self.date_from is INVALID_DATE or self.date_to is INVALID_DATE

    def includes(self, entry_date: date) -> bool:
        """Return True when a date falls within the query's range."""
        if self.matches_nothing:
            return False
        if isinstance(self.date_from, date) and entry_date < self.date_from:
            return False
        return not (isinstance(self.date_to, date) and entry_date > self.date_to)


def build_log_query(
    user_id: UUID,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: str | None = None,
) -> LogQuery:
    """Translate raw ``from``/``to``/``limit`` parameters into a LogQuery.

    Unparsable bounds become ``INVALID_DATE`` and make the query match
    nothing. A non-numeric or non-positive limit means no cap.
    """
    parsed_limit = parse_limit(limit)
    if parsed_limit is not None and parsed_limit <= 0:
        parsed_limit = None
    return LogQuery(
        user_id=user_id,
        date_from=_parse_bound(date_from),
        date_to=_parse_bound(date_to),
        limit=parsed_limit,
    )


def _parse_bound(value: str | None) -> DateBound:
    if value is None or not value.strip():
        return None
    parsed = parse_date(value)
    return INVALID_DATE if parsed is None else parsed
