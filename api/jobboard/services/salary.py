from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import asyncpg  # type: ignore[import-untyped]
from pydantic import TypeAdapter, ValidationError

from jobboard.schemas.salary import SALARY_AMOUNT_FIELDS, SalaryDetail
from jobboard.services.errors import RepositoryValidationError

_SALARY_ADAPTER: TypeAdapter[SalaryDetail] = TypeAdapter(SalaryDetail)

# Amount fields that must be populated for each variant; every other amount
# field is written as null.
VARIANT_FIELDS: dict[str, frozenset[str]] = {
    "FIXED": frozenset({"fixed_amount"}),
    "RANGE": frozenset({"min_amount", "max_amount"}),
    "FIXED_INCENTIVE": frozenset({"fixed_amount", "incentive_details"}),
    "UNPAID": frozenset(),
}

SALARY_COLUMNS = (
    "salary_type",
    *SALARY_AMOUNT_FIELDS,
    "is_salary_hidden",
    "is_negotiable",
    "currency",
    "salary_period",
)


def parse_salary_detail(
    payload: Any,
    *,
    default_currency: str = "INR",
    default_salary_period: str = "MONTH",
) -> SalaryDetail:
    if not isinstance(payload, Mapping):
        raise RepositoryValidationError("salary must be an object with a salary_type")

    data = {key: value for key, value in payload.items() if value is not None}
    data.setdefault("currency", default_currency)
    data.setdefault("salary_period", default_salary_period)
    salary_type = data.get("salary_type")
    if isinstance(salary_type, str):
        data["salary_type"] = salary_type.strip().upper()

    try:
        return _SALARY_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise RepositoryValidationError(f"invalid salary: {_first_error(exc)}") from exc


def salary_columns(detail: SalaryDetail) -> dict[str, Any]:
    """Flatten a salary variant into the wide ``salary_details`` row."""
    values = detail.model_dump()
    columns = {column: values.get(column) for column in SALARY_COLUMNS}
    active = VARIANT_FIELDS[detail.salary_type]
    for field_name in SALARY_AMOUNT_FIELDS:
        if field_name not in active:
            columns[field_name] = None
    check_salary_columns(columns)
    return columns


def check_salary_columns(columns: Mapping[str, Any]) -> None:
    salary_type = columns.get("salary_type")
    active = VARIANT_FIELDS.get(salary_type) if isinstance(salary_type, str) else None
    if active is None:
        raise RepositoryValidationError(f"unknown salary_type: {salary_type!r}")

    for field_name in SALARY_AMOUNT_FIELDS:
        populated = columns.get(field_name) is not None
        if field_name in active and not populated:
            raise RepositoryValidationError(f"{field_name} is required for salary_type {salary_type}")
        if field_name not in active and populated:
            raise RepositoryValidationError(f"{field_name} is not allowed for salary_type {salary_type}")

    if salary_type == "RANGE" and columns["min_amount"] > columns["max_amount"]:
        raise RepositoryValidationError("min_amount must be less than or equal to max_amount")


def salary_from_row(row: Mapping[str, Any]) -> SalaryDetail | None:
    if row.get("salary_type") is None:
        return None
    data = {column: row.get(column) for column in SALARY_COLUMNS}
    return parse_salary_detail(data)


def salary_row_to_dict(row: Mapping[str, Any]) -> dict[str, Any] | None:
    if row.get("salary_type") is None:
        return None
    return {
        "salary_type": row["salary_type"],
        "fixed_amount": row.get("fixed_amount"),
        "min_amount": row.get("min_amount"),
        "max_amount": row.get("max_amount"),
        "incentive_details": row.get("incentive_details"),
        "is_salary_hidden": bool(row.get("is_salary_hidden")),
        "is_negotiable": bool(row.get("is_negotiable")),
        "currency": row.get("currency"),
        "salary_period": row.get("salary_period"),
    }


async def write_salary_detail(
    conn: asyncpg.Connection,
    *,
    job_id: int,
    detail: SalaryDetail,
    update: bool = False,
) -> None:
    """Persist ``detail`` as the salary row of ``job_id`` on the caller's transaction."""
    columns = salary_columns(detail)
    values = [columns[column] for column in SALARY_COLUMNS]

    if update:
        status = await conn.execute(
            """
            update salary_details
            set
              salary_type = $2,
              fixed_amount = $3,
              min_amount = $4,
              max_amount = $5,
              incentive_details = $6,
              is_salary_hidden = $7,
              is_negotiable = $8,
              currency = $9,
              salary_period = $10,
              updated_at = now()
            where id = $1
            """,
            job_id,
            *values,
        )
        if not _is_zero_rows(status):
            return

    await conn.execute(
        """
        insert into salary_details (
          id,
          salary_type,
          fixed_amount,
          min_amount,
          max_amount,
          incentive_details,
          is_salary_hidden,
          is_negotiable,
          currency,
          salary_period
        )
        values ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
        """,
        job_id,
        *values,
    )


def _is_zero_rows(status: Any) -> bool:
    return isinstance(status, str) and status.rsplit(" ", 1)[-1] == "0"


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part not in VARIANT_FIELDS)
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message
