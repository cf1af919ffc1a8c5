from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from jobboard.core.auth import Principal, Role
from jobboard.services.errors import RepositoryForbiddenError, RepositoryValidationError


class VisibilityStatus(str, Enum):
    UNDER_REVIEW = "UNDER_REVIEW"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    # Reserved: storable, never assigned through moderation.
    ARCHIVED = "ARCHIVED"


INITIAL_VISIBILITY_STATUS = VisibilityStatus.UNDER_REVIEW
MODERATION_STATUSES = frozenset(
    {VisibilityStatus.UNDER_REVIEW, VisibilityStatus.ACCEPTED, VisibilityStatus.REJECTED}
)


def coerce_moderation_status(value: Any) -> VisibilityStatus:
    """Resolve a status an administrator may assign; any state may move to any of these."""
    normalized = value.value if isinstance(value, VisibilityStatus) else value
    if isinstance(normalized, str):
        normalized = normalized.strip().upper()
    try:
        status = VisibilityStatus(normalized)
    except ValueError as exc:
        raise RepositoryValidationError(
            "visibility_status must be one of: UNDER_REVIEW, ACCEPTED, REJECTED",
        ) from exc
    if status not in MODERATION_STATUSES:
        raise RepositoryValidationError(
            "visibility_status must be one of: UNDER_REVIEW, ACCEPTED, REJECTED",
        )
    return status


def ensure_can_mutate(*, principal: Principal, created_by: int, action: str) -> None:
    if principal.is_admin or principal.user_id == created_by:
        return
    raise RepositoryForbiddenError(f"not authorized to {action} this job")


def ensure_administrator(*, principal: Principal, action: str) -> None:
    if not principal.is_admin:
        raise RepositoryForbiddenError(f"not authorized to {action}")


def can_view(*, principal: Principal, created_by: int, visibility_status: str) -> bool:
    if principal.role is Role.ADMINISTRATOR:
        return True
    if visibility_status == VisibilityStatus.ACCEPTED.value:
        return True
    return principal.role is Role.CREATOR and principal.user_id == created_by


def visibility_condition(principal: Principal, bind: Callable[[Any], str], *, alias: str = "j") -> str | None:
    """Return the role filter for listings, or None when the caller sees everything."""
    if principal.role is Role.ADMINISTRATOR:
        return None
    accepted = bind(VisibilityStatus.ACCEPTED.value)
    if principal.role is Role.CREATOR:
        return f"({alias}.visibility_status = {accepted} or {alias}.created_by = {bind(principal.user_id)})"
    return f"{alias}.visibility_status = {accepted}"
