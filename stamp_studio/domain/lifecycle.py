"""Design lifecycle: statuses, roles and the allowed transitions."""

from enum import Enum

from stamp_studio.domain.errors import InvalidStateError


class DesignStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ReviewStatus(str, Enum):
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Role(str, Enum):
    CLIENT = "CLIENT"
    DESIGNER = "DESIGNER"
    ADMIN = "ADMIN"


# PENDING is the only state with outgoing edges; APPROVED and REJECTED are terminal.
TRANSITIONS: dict[DesignStatus, frozenset[DesignStatus]] = {
    DesignStatus.PENDING: frozenset({DesignStatus.APPROVED, DesignStatus.REJECTED}),
    DesignStatus.APPROVED: frozenset(),
    DesignStatus.REJECTED: frozenset(),
}

REVIEW_OUTCOMES: dict[ReviewStatus, DesignStatus] = {
    ReviewStatus.APPROVED: DesignStatus.APPROVED,
    ReviewStatus.REJECTED: DesignStatus.REJECTED,
}


def can_transition(current: DesignStatus, target: DesignStatus) -> bool:
    """Return True if a design may move from ``current`` to ``target``."""
    return target in TRANSITIONS[current]


def is_terminal(status: DesignStatus) -> bool:
    return not TRANSITIONS[status]


def ensure_reviewable(status: DesignStatus) -> None:
    """Raise unless a design in ``status`` can receive a review decision."""
    if status != DesignStatus.PENDING:
        raise InvalidStateError("Only pending designs can be reviewed", status=status.value)


def ensure_modifiable(status: DesignStatus) -> None:
    """Raise unless the owner may still edit a design in ``status``."""
    if status != DesignStatus.PENDING:
        raise InvalidStateError("Only pending designs can be modified", status=status.value)


def ensure_sheet_ready(status: DesignStatus) -> None:
    if status != DesignStatus.APPROVED:
        raise InvalidStateError(
            "Only approved designs can generate technical sheets",
            status=status.value,
        )
