"""Domain error taxonomy.

Each error carries the HTTP status the API layer renders it with, so the
services never import anything from FastAPI.
"""

from typing import Any


class DomainError(Exception):
    """Base class for errors raised by the design workflow."""

    status_code: int = 400

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class NotFoundError(DomainError):
    """Referenced design, product, review or user does not exist."""

    status_code = 404


class ForbiddenError(DomainError):
    """Caller lacks rights over the targeted resource."""

    status_code = 403


class InvalidStateError(DomainError):
    """Operation attempted against a design in the wrong status."""

    status_code = 409


class ValidationError(DomainError):
    """Malformed input such as a missing rejection comment or unknown color."""

    status_code = 400


class InvariantViolationError(DomainError):
    """Persisted data is inconsistent (an approved design without approval)."""

    status_code = 500
