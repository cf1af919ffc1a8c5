"""Eligibility-class normalization for job postings.

A posting declares who may apply through its eligibility class. Each class
owns a group of conditional fields; the fields of every other class are
forced to null so the stored row only ever carries the active group.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Any

from jobboard.services.errors import RepositoryValidationError

ELIGIBILITY_FIELDS = (
    "student_currently_studying",
    "year_selection",
    "experience_min",
    "experience_max",
)

REMOTE_WORKPLACE_TYPE = 1


class Eligibility(IntEnum):
    CURRENT_STUDENT = 1
    FRESHER = 2
    EXPERIENCED = 3


def coerce_eligibility(value: Any, *, default: Eligibility = Eligibility.CURRENT_STUDENT) -> Eligibility:
    if value is None:
        return default
    if isinstance(value, bool):
        raise RepositoryValidationError("eligibility must be one of: 1, 2, 3")
    try:
        return Eligibility(int(value))
    except (TypeError, ValueError) as exc:
        raise RepositoryValidationError("eligibility must be one of: 1, 2, 3") from exc


def normalize_eligibility(eligibility: Any, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Validate the fields of the active class and null out every other class."""
    eligibility_class = coerce_eligibility(eligibility)
    normalized: dict[str, Any] = {
        "eligibility": int(eligibility_class),
        "student_currently_studying": None,
        "year_selection": None,
        "experience_min": None,
        "experience_max": None,
    }

    if eligibility_class is Eligibility.CURRENT_STUDENT:
        currently_studying = fields.get("student_currently_studying")
        if currently_studying is not None and not isinstance(currently_studying, bool):
            raise RepositoryValidationError("student_currently_studying must be a boolean")
        normalized["student_currently_studying"] = currently_studying
        return normalized

    if eligibility_class is Eligibility.FRESHER:
        year_selection = _coerce_year_selection(fields.get("year_selection"))
        if not year_selection:
            raise RepositoryValidationError("year_selection is required for freshers")
        normalized["year_selection"] = year_selection
        return normalized

    experience_min = _coerce_experience(fields.get("experience_min"), field_name="experience_min")
    experience_max = _coerce_experience(fields.get("experience_max"), field_name="experience_max")
    if experience_min is None or experience_max is None:
        raise RepositoryValidationError("experience range is required for experienced candidates")
    if experience_max < experience_min:
        raise RepositoryValidationError("experience_max must be greater than or equal to experience_min")
    normalized["experience_min"] = experience_min
    normalized["experience_max"] = experience_max
    return normalized


def normalize_workplace(workplace_type: Any, job_location: Any) -> dict[str, Any]:
    """Remote postings carry no location; every other workplace type requires one."""
    if isinstance(workplace_type, bool) or workplace_type is None:
        raise RepositoryValidationError("workplace_type must be an integer between 1 and 4")
    try:
        normalized_type = int(workplace_type)
    except (TypeError, ValueError) as exc:
        raise RepositoryValidationError("workplace_type must be an integer between 1 and 4") from exc
    if not 1 <= normalized_type <= 4:
        raise RepositoryValidationError("workplace_type must be an integer between 1 and 4")

    if normalized_type == REMOTE_WORKPLACE_TYPE:
        return {"workplace_type": normalized_type, "job_location": None}

    location = job_location.strip() if isinstance(job_location, str) else None
    if not location:
        raise RepositoryValidationError("job_location is required unless the workplace is remote")
    return {"workplace_type": normalized_type, "job_location": location}


def _coerce_year_selection(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (str, int)):
        value = [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise RepositoryValidationError("year_selection must be a list of year tags")

    years: set[str] = set()
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            continue
        tag = str(item).strip()
        if tag:
            years.add(tag)
    return sorted(years)


def _coerce_experience(value: Any, *, field_name: str) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        experience = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise RepositoryValidationError(f"{field_name} must be a number") from exc
    if not experience.is_finite() or experience < 0:
        raise RepositoryValidationError(f"{field_name} must be a non-negative number")
    return experience
