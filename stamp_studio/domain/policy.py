"""Authorization policy for design access.

Every operation that touches a Design goes through ``authorize_design`` so
ownership and role rules live in one place.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from stamp_studio.domain.errors import ForbiddenError
from stamp_studio.domain.lifecycle import Role

ELEVATED_ROLES = frozenset({Role.DESIGNER, Role.ADMIN})
REVIEWER_ROLES = ELEVATED_ROLES


class DesignAction(str, Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class Caller:
    """Authenticated user performing an operation."""

    user_id: int
    role: Role

    @property
    def is_client(self) -> bool:
        return self.role == Role.CLIENT

    def owns(self, owner_id: int) -> bool:
        return self.user_id == owner_id


class OwnedResource(Protocol):
    user_id: int


# Roles that may act on a design they do not own
_NON_OWNER_ROLES: dict[DesignAction, frozenset[Role]] = {
    DesignAction.READ: ELEVATED_ROLES,
    DesignAction.UPDATE: frozenset({Role.ADMIN}),
    DesignAction.DELETE: frozenset({Role.ADMIN}),
}


def authorize_design(caller: Caller, design: OwnedResource, action: DesignAction) -> None:
    """Raise ForbiddenError unless ``caller`` may perform ``action`` on ``design``.

    Owners may always read, update and delete their own designs. Non-owners
    need one of the roles listed for the action.
    """
    if caller.owns(design.user_id):
        return
    if caller.role in _NON_OWNER_ROLES[action]:
        return
    raise ForbiddenError(
        f"Unauthorized to {action.value} this design",
        user_id=caller.user_id,
        role=caller.role.value,
    )


def ensure_no_status_change(caller: Caller, changes: Iterable[str]) -> None:
    """Reject update payloads that try to set the design status directly.

    Status only moves through the review workflow.
    """
    if "status" not in set(changes):
        return
    if caller.is_client:
        raise ForbiddenError("Clients cannot change design status", user_id=caller.user_id)
    raise ForbiddenError(
        "Design status can only change through review",
        user_id=caller.user_id,
        role=caller.role.value,
    )


def require_role(caller: Caller, allowed: Iterable[Role]) -> None:
    """Raise ForbiddenError unless the caller holds one of ``allowed``."""
    if caller.role not in frozenset(allowed):
        raise ForbiddenError(
            "Forbidden: Insufficient permissions",
            user_id=caller.user_id,
            role=caller.role.value,
        )
