"""Input validation for users and exercise entries."""

import math
import re
from datetime import date, datetime

from exercise_tracker.domain.errors import InvalidDate, InvalidNumber, MissingField
from exercise_tracker.domain.models import NewEntry

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_ABBREVIATIONS = tuple(name[:3] for name in WEEKDAY_NAMES)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")
_YEAR_FIRST = re.compile(r"^(\d{4})[/.-](\d{1,2})[/.-](\d{1,2})$")
_MONTH_FIRST = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_TOKEN_SEPARATORS = re.compile(r"[\s,]+")
_TIME_OF_DAY = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")
_ZONE = re.compile(r"^(?:[A-Za-z]{1,5}|[+-]\d{4})$")


def validate_new_user(username: str | None) -> str:
    """Return the username as given, raising MissingField when it is blank."""
    if not username or not username.strip():
        raise MissingField("Username is required")
    return username


def validate_new_entry(
    description: str | None,
    duration: object,
    entry_date: str | None,
    *,
    today: date,
) -> NewEntry:
    """Validate raw entry fields and resolve the duration and date.

    ``today`` is used when no date was supplied, which keeps this function
    free of clock access.
    """
    value = validate_entry_fields(description, duration)
    return NewEntry(
        description=description,  # type: ignore[arg-type]
        duration=value,
        date=resolve_entry_date(entry_date, today=today),
    )


def validate_entry_fields(description: str | None, duration: object) -> int | float:
    """Check the required entry fields and return the coerced duration."""
    if not description or not description.strip():
        raise MissingField
    if duration is None or (isinstance(duration, str) and not duration.strip()):
        raise MissingField
    return coerce_duration(duration)


def resolve_entry_date(entry_date: str | None, *, today: date) -> date:
    """Return the parsed entry date, or ``today`` when none was supplied."""
    if entry_date is None or not entry_date.strip():
        return today
    parsed = parse_date(entry_date)
    if parsed is None:
        raise InvalidDate
    return parsed


def coerce_duration(raw: object) -> int | float:
    """Coerce a raw duration to a finite number."""
    if isinstance(raw, bool):
        raise InvalidNumber
    if isinstance(raw, int | float):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except ValueError as exc:
            raise InvalidNumber from exc
    if not math.isfinite(value):
        raise InvalidNumber
    return int(value) if value.is_integer() else value


def parse_date(value: str) -> date | None:
    """Parse a calendar date, returning None when the value is not a date.

    Accepts ISO dates and date-times (their calendar date is kept),
    ``2023/05/10``, ``05/10/2023``, and month-name forms such as
    ``Wed May 10 2023``, ``May 10, 2023`` or ``Wed, 10 May 2023 08:00:00 GMT``.
    """
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        pass
    if match := _YEAR_FIRST.match(cleaned):
        year, month, day = match.groups()
        return _make_date(year, month, day)
    if match := _MONTH_FIRST.match(cleaned):
        month, day, year = match.groups()
        return _make_date(year, month, day)
    return _parse_textual_date(cleaned)


def parse_limit(value: str | None) -> int | None:
    """Return the leading integer of a limit parameter, if any."""
    if value is None:
        return None
    match = _LEADING_INTEGER.match(value)
    if not match:
        return None
    return int(match.group(1))


def _parse_textual_date(value: str) -> date | None:
    tokens = [token for token in _TOKEN_SEPARATORS.split(value) if token]
    if tokens and _name_index(tokens[0], WEEKDAY_NAMES) is not None:
        tokens = tokens[1:]
    if len(tokens) > 3 and _TIME_OF_DAY.match(tokens[3]):  # noqa: PLR2004
        tokens = tokens[:3] + tokens[4:]
        if len(tokens) == 4 and _ZONE.match(tokens[3]):  # noqa: PLR2004
            tokens = tokens[:3]
    if len(tokens) != 3:  # noqa: PLR2004
        return None
    first, second, year = tokens
    month = _name_index(first, MONTH_NAMES)
    day = second
    if month is None:
        month = _name_index(second, MONTH_NAMES)
        day = first
    if month is None:
        return None
    return _make_date(year, str(month + 1), day)


def _name_index(token: str, names: tuple[str, ...]) -> int | None:
    lowered = token.lower().rstrip(".")
    for index, name in enumerate(names):
        if lowered in {name.lower(), name[:3].lower()}:
            return index
    return None


def _make_date(year: str, month: str, day: str) -> date | None:
    if not (year.isdigit() and month.isdigit() and day.isdigit()):
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None
