"""Core domain rules: transforms, design lifecycle and authorization."""

from stamp_studio.domain.errors import (
    DomainError,
    ForbiddenError,
    InvalidStateError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from stamp_studio.domain.lifecycle import DesignStatus, ReviewStatus, Role
from stamp_studio.domain.policy import Caller, DesignAction
from stamp_studio.domain.transforms import PrintArea, Transforms, Vector3

__all__ = [
    "Caller",
    "DesignAction",
    "DesignStatus",
    "DomainError",
    "ForbiddenError",
    "InvalidStateError",
    "InvariantViolationError",
    "NotFoundError",
    "PrintArea",
    "ReviewStatus",
    "Role",
    "Transforms",
    "ValidationError",
    "Vector3",
]
