"""
Error types raised by the signup and login handlers.

Every client-facing error is an HTTPException so FastAPI can render it;
the application exception handler turns the detail into a {"message": ...} body.
"""
from fastapi import HTTPException, status


class AuthServiceError(HTTPException):
    """Base class for errors reported to the client with a status code and message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(status_code=self.status_code, detail=message)
        self.message = message


class ValidationError(AuthServiceError):
    """Email or password missing from the request body."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AuthServiceError):
    """Signup with an email that is already registered."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(AuthServiceError):
    """Unknown email or wrong password during login."""

    status_code = status.HTTP_401_UNAUTHORIZED


class StorageError(Exception):
    """Reading or writing the user store failed. Never leaves the storage accessor."""
