"""Pydantic models for request bodies and query parameters."""

from pydantic import BaseModel, ConfigDict


class NewUserForm(BaseModel):
    """Body for user registration."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    username: str | None = None


class NewExerciseForm(BaseModel):
    """Body for adding an exercise entry."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    description: str | None = None
    duration: str | float | None = None
    date: str | None = None


class LogParams(BaseModel):
    """Query parameters for reading a log."""

    date_from: str | None = None
    date_to: str | None = None
    limit: str | None = None
