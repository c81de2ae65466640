"""Error taxonomy for the exercise tracker."""

ENTRY_FIELDS_REQUIRED = "Description and valid duration are required"


class ExerciseTrackerError(Exception):
    """Base error carrying a user-facing message."""

    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(ExerciseTrackerError):
    """Errors caused by the caller's input, reported with a 200 status."""


class MissingField(ClientInputError):
    default_message = ENTRY_FIELDS_REQUIRED


class InvalidNumber(ClientInputError):
    default_message = ENTRY_FIELDS_REQUIRED


class InvalidDate(ClientInputError):
    default_message = "Invalid date format"


class UserNotFound(ClientInputError):
    default_message = "User not found"


class DuplicateUsername(ClientInputError):
    default_message = "Username already taken"


class StoreUnavailable(ExerciseTrackerError):
    """The record store failed or could not be reached."""
