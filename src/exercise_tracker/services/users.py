"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.errors import UserNotFound
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.domain.validation import validate_new_user

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user, raising DuplicateUsername if taken."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def create_user(self, username: str | None) -> UserRecord:
        """Register a new user."""
        user = self.repository.create_user(validate_new_user(username))
        logger.info("Created user", extra={"user_id": str(user.id)})
        return user

    def list_users(self) -> list[UserRecord]:
        """Return all registered users."""
        return self.repository.list_users()

    def get_user(self, raw_user_id: str) -> UserRecord:
        """Return the user for a raw id, raising UserNotFound when unknown."""
        user_id = parse_user_id(raw_user_id)
        if user_id is None:
            raise UserNotFound
        user = self.repository.get_user(user_id)
        if user is None:
            raise UserNotFound
        return user


def parse_user_id(raw: str) -> UUID | None:
    """Parse a user id from a path segment."""
    try:
        return UUID(raw.strip())
    except ValueError:
        return None
