"""Translation of Supabase client failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from exercise_tracker.domain.errors import ClientInputError, StoreUnavailable

UNIQUE_VIOLATION = "23505"


@contextmanager
def store_errors(
    action: str, unique_violation: type[ClientInputError] | None = None
) -> Iterator[None]:
    """Re-raise PostgREST and transport failures as StoreUnavailable.

    When ``unique_violation`` is given, a unique constraint failure is raised
    as that error instead.
    """
    try:
        yield
    except APIError as exc:
        if unique_violation is not None and exc.code == UNIQUE_VIOLATION:
            raise unique_violation from exc
        raise StoreUnavailable(f"Failed to {action}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise StoreUnavailable(f"Failed to {action}: {exc}") from exc
