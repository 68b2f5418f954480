"""Error types raised by the generation pipeline.

Each error carries the HTTP status and a fixed caller-safe message. The
exception text itself is only written to the server log.
"""


class FitGoalError(Exception):
    """Base class for all fitgoal errors."""

    status_code = 500
    public_message = "Internal server error."


class ConfigurationError(FitGoalError):
    """The server is missing required configuration (e.g. the API key)."""

    public_message = "The server is not configured for plan generation."


class ValidationError(FitGoalError):
    """The request is missing required fields or carries invalid values."""

    status_code = 400
    public_message = "Invalid request."

    def __init__(self, message: str = "Invalid request."):
        super().__init__(message)
        # Validation messages are written by us, so they are safe to return
        self.public_message = message


class UpstreamError(FitGoalError):
    """The AI provider failed, timed out or rejected the request."""

    public_message = "The AI service failed to generate a plan."


class ParseError(FitGoalError):
    """The AI provider returned text that is not a valid workout plan."""

    public_message = "The AI service returned an invalid plan."


class StorageError(FitGoalError):
    """Reading from or writing to the workout database failed."""

    public_message = "The workout database is unavailable."


class AuthError(FitGoalError):
    """The caller did not present valid credentials."""

    status_code = 401
    public_message = "Authentication required."
