"""User and exercise log endpoints.

Input errors are answered with status 200 and an ``{"error": ...}`` body;
only store and unexpected failures produce a 500.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from fastapi import APIRouter, Query, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from exercise_tracker.api.formatting import format_entry, format_log, format_user
from exercise_tracker.api.request_models import (
    LogParams,
    NewExerciseForm,
    NewUserForm,
)
from exercise_tracker.domain.errors import (
    ENTRY_FIELDS_REQUIRED,
    ClientInputError,
    StoreUnavailable,
)

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["exercises"])

SERVER_ERROR = "Server error"
FormT = TypeVar("FormT", bound=BaseModel)
_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@router.post("", response_model=None)
async def create_user(request: Request) -> object:
    """Register a new user."""
    container: AppContainer = request.app.state.container
    form = await _read_form(request, NewUserForm)
    if form is None:
        return {"error": "Username is required"}

    def build() -> dict[str, object]:
        return format_user(container.user_service.create_user(form.username))

    return await _respond("create user", build)


@router.get("", response_model=None)
async def list_users(request: Request) -> object:
    """Return all users."""
    container: AppContainer = request.app.state.container

    def build() -> list[dict[str, object]]:
        return [format_user(user) for user in container.user_service.list_users()]

    return await _respond("list users", build)


@router.post("/{user_id}/exercises", response_model=None)
async def add_exercise(user_id: str, request: Request) -> object:
    """Record an exercise entry for a user."""
    container: AppContainer = request.app.state.container
    form = await _read_form(request, NewExerciseForm)
    if form is None:
        return {"error": ENTRY_FIELDS_REQUIRED}

    def build() -> dict[str, object]:
        user, entry = container.exercise_service.add_entry(
            user_id, form.description, form.duration, form.date
        )
        return format_entry(user, entry)

    return await _respond("add exercise", build)


@router.get("/{user_id}/logs", response_model=None)
async def exercise_log(
    user_id: str,
    request: Request,
    date_from: str | None = Query(default=None, alias="from"),
    date_to: str | None = Query(default=None, alias="to"),
    limit: str | None = None,
) -> object:
    """Return a user's exercise log, optionally filtered and limited."""
    container: AppContainer = request.app.state.container
    params = LogParams(date_from=date_from, date_to=date_to, limit=limit)

    def build() -> dict[str, object]:
        user, entries = container.exercise_service.get_log(
            user_id, params.date_from, params.date_to, params.limit
        )
        return format_log(user, entries)

    return await _respond("read exercise log", build)


async def _respond(action: str, build: Callable[[], object]) -> object:
    """Run blocking store work off the event loop and map failures."""
    try:
        return await run_in_threadpool(build)
    except ClientInputError as exc:
        return {"error": exc.message}
    except StoreUnavailable:
        logger.exception("Store unavailable", extra={"action": action})
        return _server_error()
    except Exception:
        logger.exception("Unexpected failure", extra={"action": action})
        return _server_error()


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR},
    )


async def _read_form(request: Request, model: type[FormT]) -> FormT | None:
    """Parse a JSON or form-encoded body into a model, or None if malformed."""
    content_type = request.headers.get("content-type", "")
    payload: object = {}
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
    elif content_type.startswith(_FORM_CONTENT_TYPES):
        payload = dict(await request.form())
    if not isinstance(payload, dict):
        payload = {}
    try:
        return model.model_validate(payload)
    except ValidationError:
        return None
