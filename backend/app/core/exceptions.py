from typing import Any, Dict

from fastapi import status

# Response envelopes
# CRUD routes answer {"error": ...}; auth routes answer {"success": false, "message": ...}
ERROR_ENVELOPE = "error"
RESULT_ENVELOPE = "result"


class AppError(Exception):
    """
    Base exception for request failures.

    Carries the HTTP status and the message shown to the client.
    The message must never contain internal details (SQL, stack traces);
    those go to the server log at the raise site.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error."

    def __init__(self, message: str | None = None, *, envelope: str = ERROR_ENVELOPE):
        self.message = message or self.default_message
        self.envelope = envelope
        super().__init__(self.message)

    def with_message(self, message: str | None = None, envelope: str | None = None) -> "AppError":
        """Same error type with a route-specific client message and/or envelope"""
        return type(self)(message or self.message, envelope=envelope or self.envelope)

    def to_dict(self) -> Dict[str, Any]:
        if self.envelope == RESULT_ENVELOPE:
            return {"success": False, "message": self.message}
        return {"error": self.message}


class ValidationError(AppError):
    """Missing required fields or a malformed request"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required."


class ConflictError(AppError):
    """Username already taken"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Username already exists."


class AuthError(AppError):
    # Same status and message for unknown username and wrong password
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid username or password."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class StoreError(AppError):
    default_message = "Database error."


class HashError(AppError):
    default_message = "Internal server error."
