"""Exceptions raised by the Travel Journal API services."""

from typing import Dict, List, Optional


class APIError(Exception):
    """Base exception for API client errors.

    Attributes:
        status_code: HTTP status code, when a response was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(APIError):
    """401: missing or expired access token."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, status_code=401)


class ForbiddenError(APIError):
    """403: authenticated but not allowed."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message, status_code=403)


class NotFoundError(APIError):
    """404: the trip, block or theme doesn't exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, status_code=404)


class ValidationError(APIError):
    """400/422 with field-level validation errors.

    Attributes:
        errors: Messages grouped by field name
    """

    def __init__(self, errors: Dict[str, List[str]], status_code: int = 400):
        self.errors = errors
        summary = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Validation failed: {summary}", status_code=status_code)


class ServerError(APIError):
    """5xx, or a 400/422 that only carries a message."""


class DecodingError(APIError):
    """A successful response whose body doesn't match the expected model."""


class TransportError(APIError):
    """Network failure or timeout before a response was received."""
