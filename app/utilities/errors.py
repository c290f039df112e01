"""Error taxonomy shared by services and routes.

Every error is an ``HTTPException`` so FastAPI routes them through the
handlers registered in ``main.py``, which render ``{error, details?}``.
"""

from typing import List, Optional

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base error carrying a status code, a message and optional details"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server error"

    def __init__(self, message: Optional[str] = None, details: Optional[List[str]] = None):
        self.message = message or self.message
        self.details = list(details) if details else None
        super().__init__(status_code=self.status_code, detail=self.message)


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad Request"


class InvalidId(BadRequest):
    """Identifier is not a well-formed ObjectId"""

    message = "Invalid id"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"

    def __init__(self, message: Optional[str] = None, details: Optional[List[str]] = None):
        super().__init__(message, details)
        self.headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden: admin only"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not Found"


class ServerError(AppError):
    pass


def format_validation_errors(errors) -> List[str]:
    """Flatten pydantic error dicts into ``"<field>: <message>"`` strings."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        messages.append(f"{field}: {error.get('msg', 'invalid value')}")
    return messages
