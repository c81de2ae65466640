"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from exercise_tracker.adapters.supabase_errors import store_errors
from exercise_tracker.domain.errors import DuplicateUsername, StoreUnavailable
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client
    table: str = "users"

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        with store_errors("create user", unique_violation=DuplicateUsername):
            response = (
                self.client.table(self.table).insert({"username": username}).execute()
            )
        if not response.data:
            raise StoreUnavailable("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users in creation order."""
        with store_errors("list users"):
            response = (
                self.client.table(self.table)
                .select("id, username")
                .order("created_at", desc=False)
                .execute()
            )
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        with store_errors("fetch user"):
            response = (
                self.client.table(self.table)
                .select("id, username")
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=UUID(str(row["id"])), username=str(row["username"]))
