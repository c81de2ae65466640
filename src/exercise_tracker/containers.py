"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseService, today_in
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    exercise_service: ExerciseService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(
        supabase_client, table=resolved_settings.users_table
    )
    exercise_repository = SupabaseExerciseRepository(
        supabase_client, table=resolved_settings.exercises_table
    )
    user_service = UserService(user_repository)
    exercise_service = ExerciseService(
        user_service=user_service,
        repository=exercise_repository,
        today=today_in(resolved_settings.default_timezone),
    )

    async def close_resources() -> None:
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        exercise_service=exercise_service,
        close_resources=close_resources,
    )
