from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from functools import lru_cache
from typing import Any

import asyncpg  # type: ignore[import-untyped]
from asyncpg import exceptions as pg_exc
from opentelemetry import trace

from jobboard.core.auth import Principal
from jobboard.core.config import get_settings
from jobboard.schemas.salary import SalaryDetail
from jobboard.services.associations import (
    JOB_ASSOCIATION_TABLES,
    JOB_CATEGORIES,
    JOB_FACILITIES,
    JOB_SKILLS,
    coerce_tag_ids,
    delete_associations,
    replace_associations,
)
from jobboard.services.eligibility import ELIGIBILITY_FIELDS, normalize_eligibility, normalize_workplace
from jobboard.services.errors import (
    RepositoryConflictError,
    RepositoryError,
    RepositoryForbiddenError,
    RepositoryNotFoundError,
    RepositoryStorageError,
    RepositoryUnavailableError,
    RepositoryValidationError,
)
from jobboard.services.listing import (
    JOB_AGGREGATE_COLUMNS_SQL,
    JOB_AGGREGATE_FROM_SQL,
    build_listing_query,
    compute_page_count,
)
from jobboard.services.moderation import (
    INITIAL_VISIBILITY_STATUS,
    VisibilityStatus,
    can_view,
    coerce_moderation_status,
    ensure_administrator,
    ensure_can_mutate,
)
from jobboard.services.salary import parse_salary_detail, salary_from_row, salary_row_to_dict, write_salary_detail

__all__ = [
    "PostgresRepository",
    "RepositoryConflictError",
    "RepositoryError",
    "RepositoryForbiddenError",
    "RepositoryNotFoundError",
    "RepositoryStorageError",
    "RepositoryUnavailableError",
    "RepositoryValidationError",
    "get_repository",
]

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

JOB_STATUSES = {"pending", "interview", "declined"}
JOB_TYPES = {"full-time", "part-time", "internship", "contract"}
COMPANY_LENGTH = (5, 100)
POSITION_LENGTH = (5, 200)
MIN_DESCRIPTION_LENGTH = 10
CONTACT_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

STORAGE_FAILURES = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError)

# Calendar dates (deadline vs creation day) are compared in UTC both here and in the store.
STORE_TIMEZONE = "UTC"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class PostgresRepository:
    def __init__(
        self,
        database_url: str | None,
        min_pool_size: int,
        max_pool_size: int,
        command_timeout_seconds: float = 15.0,
        default_page_size: int = 5,
        max_page_size: int = 100,
        max_job_categories: int = 10,
        default_currency: str = "INR",
        default_salary_period: str = "MONTH",
    ) -> None:
        self.database_url = database_url
        self.min_pool_size = min_pool_size
        self.max_pool_size = max_pool_size
        self.command_timeout_seconds = command_timeout_seconds
        self.default_page_size = max(1, default_page_size)
        self.max_page_size = max(self.default_page_size, max_page_size)
        self.max_job_categories = max(0, max_job_categories)
        self.default_currency = default_currency
        self.default_salary_period = default_salary_period
        self._pool: asyncpg.Pool | None = None

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None

    async def ping(self) -> None:
        pool = await self._get_pool()
        async with self._storage_errors("ping"):
            await pool.fetchval("select 1")

    async def list_jobs(
        self,
        *,
        principal: Principal,
        search: str | None = None,
        sort: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> dict[str, Any]:
        query = build_listing_query(
            principal,
            search=search,
            sort=sort,
            page=page,
            page_size=page_size,
            default_page_size=self.default_page_size,
            max_page_size=self.max_page_size,
        )
        pool = await self._get_pool()
        async with self._storage_errors("jobs.list"):
            rows = await pool.fetch(query.sql, *query.params)
            total = await pool.fetchval(query.count_sql, *query.count_params)

        if not rows:
            raise RepositoryNotFoundError("no jobs found")

        total_count = int(total or 0)
        return {
            "rows": [self._job_row_to_dict(row) for row in rows],
            "total_count": total_count,
            "current_page": query.page,
            "page_size": query.page_size,
            "page_count": compute_page_count(total_count, query.page_size),
        }

    async def get_job(self, job_id: int, *, principal: Principal | None = None) -> dict[str, Any]:
        pool = await self._get_pool()
        async with self._storage_errors("jobs.get"):
            row = await self._fetch_job_aggregate_row(conn=pool, job_id=job_id)
        if not row:
            raise RepositoryNotFoundError("job not found")
        if principal is not None and not can_view(
            principal=principal,
            created_by=row["created_by"],
            visibility_status=row["visibility_status"],
        ):
            raise RepositoryNotFoundError("job not found")
        return self._job_row_to_dict(row)

    async def list_jobs_for_moderation(self, *, visibility_status: str | None = None) -> list[dict[str, Any]]:
        normalized_status = None
        if visibility_status is not None:
            normalized_status = self._coerce_visibility_filter(visibility_status)

        pool = await self._get_pool()
        async with self._storage_errors("jobs.moderation_queue"):
            rows = await pool.fetch(
                f"""
                select
                {JOB_AGGREGATE_COLUMNS_SQL},
                  u.username as creator_username,
                  u.email as creator_email
                {JOB_AGGREGATE_FROM_SQL}
                join users u on u.id = j.created_by
                where ($1::text is null or j.visibility_status = $1)
                order by j.created_at desc, j.id desc
                """,
                normalized_status,
            )
        return [self._creator_job_row_to_dict(row) for row in rows]

    async def list_my_jobs(self, *, creator_id: int) -> list[dict[str, Any]]:
        pool = await self._get_pool()
        async with self._storage_errors("jobs.mine"):
            rows = await pool.fetch(
                f"""
                select
                {JOB_AGGREGATE_COLUMNS_SQL},
                  u.username as creator_username,
                  u.email as creator_email
                {JOB_AGGREGATE_FROM_SQL}
                join users u on u.id = j.created_by
                where j.created_by = $1
                order by j.created_at desc, j.id desc
                """,
                creator_id,
            )
        if not rows:
            raise RepositoryNotFoundError("no jobs found for this user")
        return [self._creator_job_row_to_dict(row) for row in rows]

    async def create_job(self, *, creator_id: int, payload: Mapping[str, Any]) -> dict[str, Any]:
        with tracer.start_as_current_span("jobs.create") as span:
            span.set_attribute("job.creator_id", creator_id)

            associations = self._resolve_association_sets(payload, current=None)
            posting = self._normalize_posting_fields(payload, current=None)
            salary = self._resolve_salary(payload, current=None)

            pool = await self._get_pool()
            async with self._storage_errors("jobs.create"):
                duplicate = await pool.fetchval(
                    "select 1 from jobs where company = $1 and position = $2",
                    posting["company"],
                    posting["position"],
                )
            if duplicate:
                raise RepositoryConflictError("job already exists")

            eligibility = normalize_eligibility(
                payload.get("eligibility"),
                {field_name: payload.get(field_name) for field_name in ELIGIBILITY_FIELDS},
            )

            async with self._transaction("jobs.create") as conn:
                job_id = await conn.fetchval(
                    """
                    insert into jobs (
                      company,
                      position,
                      job_status,
                      job_type,
                      job_location,
                      workplace_type,
                      created_by,
                      job_vacancy,
                      job_deadline,
                      job_description,
                      job_contact,
                      visibility_status,
                      eligibility,
                      student_currently_studying,
                      year_selection,
                      experience_min,
                      experience_max
                    )
                    values ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15::text[], $16, $17)
                    returning id
                    """,
                    posting["company"],
                    posting["position"],
                    posting["job_status"],
                    posting["job_type"],
                    posting["job_location"],
                    posting["workplace_type"],
                    creator_id,
                    posting["job_vacancy"],
                    posting["job_deadline"],
                    posting["job_description"],
                    posting["job_contact"],
                    INITIAL_VISIBILITY_STATUS.value,
                    eligibility["eligibility"],
                    eligibility["student_currently_studying"],
                    eligibility["year_selection"],
                    eligibility["experience_min"],
                    eligibility["experience_max"],
                )
                await write_salary_detail(conn, job_id=job_id, detail=salary)
                await self._replace_job_associations(conn, job_id=job_id, associations=associations)

            span.set_attribute("job.id", job_id)
            logger.info("job created id=%s creator_id=%s", job_id, creator_id)
            return await self.get_job(job_id)

    async def update_job(
        self,
        *,
        job_id: int,
        principal: Principal,
        payload: Mapping[str, Any],
    ) -> dict[str, Any]:
        with tracer.start_as_current_span("jobs.update") as span:
            span.set_attribute("job.id", job_id)

            pool = await self._get_pool()
            async with self._storage_errors("jobs.update"):
                current = await self._fetch_job_aggregate_row(conn=pool, job_id=job_id)
            if not current:
                raise RepositoryNotFoundError("job not found")
            ensure_can_mutate(principal=principal, created_by=current["created_by"], action="update")

            associations = self._resolve_association_sets(payload, current=current)
            posting = self._normalize_posting_fields(payload, current=current)
            salary = self._resolve_salary(payload, current=current)
            eligibility = normalize_eligibility(
                self._pick(payload, current, "eligibility"),
                {field_name: self._pick(payload, current, field_name) for field_name in ELIGIBILITY_FIELDS},
            )

            async with self._transaction("jobs.update") as conn:
                status = await conn.execute(
                    """
                    update jobs
                    set
                      company = $2,
                      position = $3,
                      job_status = $4,
                      job_type = $5,
                      job_location = $6,
                      workplace_type = $7,
                      job_vacancy = $8,
                      job_deadline = $9,
                      job_description = $10,
                      job_contact = $11,
                      eligibility = $12,
                      student_currently_studying = $13,
                      year_selection = $14::text[],
                      experience_min = $15,
                      experience_max = $16,
                      updated_at = now()
                    where id = $1
                    """,
                    job_id,
                    posting["company"],
                    posting["position"],
                    posting["job_status"],
                    posting["job_type"],
                    posting["job_location"],
                    posting["workplace_type"],
                    posting["job_vacancy"],
                    posting["job_deadline"],
                    posting["job_description"],
                    posting["job_contact"],
                    eligibility["eligibility"],
                    eligibility["student_currently_studying"],
                    eligibility["year_selection"],
                    eligibility["experience_min"],
                    eligibility["experience_max"],
                )
                if self._affected_rows(status) == 0:
                    raise RepositoryNotFoundError("job not found")
                await write_salary_detail(conn, job_id=job_id, detail=salary, update=True)
                await self._replace_job_associations(conn, job_id=job_id, associations=associations)

            logger.info("job updated id=%s actor_id=%s", job_id, principal.user_id)
            return await self.get_job(job_id)

    async def delete_job(self, *, job_id: int, principal: Principal) -> dict[str, Any]:
        with tracer.start_as_current_span("jobs.delete") as span:
            span.set_attribute("job.id", job_id)

            pool = await self._get_pool()
            async with self._storage_errors("jobs.delete"):
                row = await pool.fetchrow("select id, created_by from jobs where id = $1", job_id)
            if not row:
                raise RepositoryNotFoundError("job not found")
            ensure_can_mutate(principal=principal, created_by=row["created_by"], action="delete")

            async with self._transaction("jobs.delete") as conn:
                await self._delete_job_dependents(conn, job_id=job_id)
                status = await conn.execute("delete from jobs where id = $1", job_id)
                if self._affected_rows(status) == 0:
                    raise RepositoryNotFoundError("job not found")

            logger.info("job deleted id=%s actor_id=%s", job_id, principal.user_id)
            return {"deleted": True, "id": job_id}

    async def delete_all_jobs(self, *, principal: Principal) -> dict[str, Any]:
        with tracer.start_as_current_span("jobs.delete_all") as span:
            ensure_administrator(principal=principal, action="delete all jobs")
            async with self._transaction("jobs.delete_all") as conn:
                await self._delete_job_dependents(conn, job_id=None)
                status = await conn.execute("delete from jobs")
            count = self._affected_rows(status)
            span.set_attribute("job.deleted_count", count)
            logger.info("all jobs deleted count=%s actor_id=%s", count, principal.user_id)
            return {"count": count}

    async def set_job_status(
        self,
        *,
        job_id: int,
        principal: Principal,
        status: Any,
        comment: str | None,
    ) -> dict[str, Any]:
        with tracer.start_as_current_span("jobs.set_status") as span:
            span.set_attribute("job.id", job_id)
            ensure_administrator(principal=principal, action="moderate jobs")
            visibility_status = coerce_moderation_status(status)
            admin_comment = self._coerce_text(comment)

            async with self._transaction("jobs.set_status") as conn:
                row = await conn.fetchrow(
                    """
                    select id, visibility_status
                    from jobs
                    where id = $1
                    for update
                    """,
                    job_id,
                )
                if not row:
                    raise RepositoryNotFoundError("job not found")
                await conn.execute(
                    """
                    update jobs
                    set
                      visibility_status = $2,
                      admin_comment = $3,
                      updated_at = now()
                    where id = $1
                    """,
                    job_id,
                    visibility_status.value,
                    admin_comment,
                )
                updated_row = await self._fetch_job_aggregate_row(conn=conn, job_id=job_id)
                if not updated_row:
                    raise RepositoryNotFoundError("job not found")

            logger.info(
                "job visibility changed id=%s from=%s to=%s",
                job_id,
                row["visibility_status"],
                visibility_status.value,
            )
            return self._job_row_to_dict(updated_row)

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[asyncpg.Connection]:
        """Yield a connection inside one transaction; commit on exit, roll back on any error."""
        pool = await self._get_pool()
        try:
            async with self._storage_errors(operation):
                async with pool.acquire() as conn:
                    async with conn.transaction():
                        yield conn
        except RepositoryError as exc:
            logger.warning("transaction rolled back operation=%s kind=%s: %s", operation, exc.kind, exc)
            raise

    @asynccontextmanager
    async def _storage_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except RepositoryError:
            raise
        except STORAGE_FAILURES as exc:
            raise self._translate_storage_error(exc, operation=operation) from exc

    @staticmethod
    def _translate_storage_error(exc: BaseException, *, operation: str) -> RepositoryError:
        if isinstance(exc, pg_exc.UniqueViolationError):
            return RepositoryConflictError("job already exists")
        if isinstance(exc, pg_exc.ForeignKeyViolationError):
            table = getattr(exc, "table_name", None) or "a referenced table"
            return RepositoryValidationError(f"unknown id referenced in {table}")
        if isinstance(exc, (pg_exc.CheckViolationError, pg_exc.NotNullViolationError)):
            constraint = getattr(exc, "constraint_name", None) or getattr(exc, "column_name", None)
            return RepositoryValidationError(f"job violates constraint {constraint or 'check'}")
        if isinstance(exc, (pg_exc.InvalidTextRepresentationError, asyncpg.DataError)):
            return RepositoryValidationError("invalid value for a job field")
        logger.error("storage failure during %s", operation, exc_info=exc)
        return RepositoryStorageError("storage failure; the operation was not applied")

    async def _replace_job_associations(
        self,
        conn: asyncpg.Connection,
        *,
        job_id: int,
        associations: Mapping[str, list[int]],
    ) -> None:
        await replace_associations(conn, owner_id=job_id, tag_ids=associations["skills"], table=JOB_SKILLS)
        await replace_associations(conn, owner_id=job_id, tag_ids=associations["categories"], table=JOB_CATEGORIES)
        await replace_associations(conn, owner_id=job_id, tag_ids=associations["facilities"], table=JOB_FACILITIES)

    async def _delete_job_dependents(self, conn: asyncpg.Connection, *, job_id: int | None) -> None:
        if job_id is None:
            await conn.execute("delete from applications")
        else:
            await conn.execute("delete from applications where job_id = $1", job_id)
        for table in JOB_ASSOCIATION_TABLES:
            await delete_associations(conn, table=table, owner_id=job_id)

    async def _fetch_job_aggregate_row(
        self,
        *,
        conn: asyncpg.Connection | asyncpg.Pool,
        job_id: int,
    ) -> asyncpg.Record | None:
        return await conn.fetchrow(
            f"""
            select
            {JOB_AGGREGATE_COLUMNS_SQL}
            {JOB_AGGREGATE_FROM_SQL}
            where j.id = $1
            """,
            job_id,
        )

    async def _get_pool(self) -> asyncpg.Pool:
        if not self.database_url:
            raise RepositoryUnavailableError("JB_DATABASE_URL is required")

        if self._pool is not None:
            return self._pool

        try:
            self._pool = await asyncpg.create_pool(
                dsn=self.database_url,
                min_size=self.min_pool_size,
                max_size=self.max_pool_size,
                command_timeout=self.command_timeout_seconds,
                server_settings={"timezone": STORE_TIMEZONE},
            )
            return self._pool
        except Exception as exc:  # pragma: no cover - depends on environment
            logger.exception("database pool creation failed")
            raise RepositoryUnavailableError("database unavailable") from exc

    def _resolve_association_sets(
        self,
        payload: Mapping[str, Any],
        *,
        current: Mapping[str, Any] | None,
    ) -> dict[str, list[int]]:
        skills = coerce_tag_ids(payload.get("skills"))
        if not skills:
            raise RepositoryValidationError("at least one skill must be selected")

        facilities = coerce_tag_ids(payload.get("facilities"))
        if not facilities:
            raise RepositoryValidationError("at least one facility must be selected")

        if payload.get("categories") is not None:
            categories = coerce_tag_ids(payload.get("categories"))
        elif current is not None:
            categories = list(current["categories"] or [])
        else:
            categories = []
        if len(categories) > self.max_job_categories:
            raise RepositoryValidationError(f"a job can have at most {self.max_job_categories} categories")

        return {"skills": skills, "categories": categories, "facilities": facilities}

    def _normalize_posting_fields(
        self,
        payload: Mapping[str, Any],
        *,
        current: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        def pick(field_name: str) -> Any:
            return self._pick(payload, current, field_name)

        fields: dict[str, Any] = {
            "company": self._require_text(pick("company"), field_name="company", bounds=COMPANY_LENGTH),
            "position": self._require_text(pick("position"), field_name="position", bounds=POSITION_LENGTH),
            "job_status": self._coerce_choice(pick("job_status"), JOB_STATUSES, field_name="job_status", default="pending"),
            "job_type": self._coerce_choice(pick("job_type"), JOB_TYPES, field_name="job_type", default="full-time"),
            "job_vacancy": self._require_text(pick("job_vacancy"), field_name="job_vacancy"),
            "job_description": self._require_text(
                pick("job_description"),
                field_name="job_description",
                bounds=(MIN_DESCRIPTION_LENGTH, None),
            ),
        }
        fields.update(normalize_workplace(pick("workplace_type"), pick("job_location")))

        contact = self._require_text(pick("job_contact"), field_name="job_contact")
        if not CONTACT_EMAIL_RE.match(contact):
            raise RepositoryValidationError("job_contact must be a valid email address")
        fields["job_contact"] = contact

        deadline = self._coerce_date(pick("job_deadline"), field_name="job_deadline")
        created_on = self._coerce_date(current["created_at"], field_name="created_at") if current else _utc_today()
        if deadline < created_on:
            raise RepositoryValidationError("job_deadline must not be before the job was created")
        fields["job_deadline"] = deadline
        return fields

    def _resolve_salary(self, payload: Mapping[str, Any], *, current: Mapping[str, Any] | None) -> SalaryDetail:
        salary_payload = payload.get("salary")
        if salary_payload is not None:
            return parse_salary_detail(
                salary_payload,
                default_currency=self.default_currency,
                default_salary_period=self.default_salary_period,
            )
        if current is not None:
            stored = salary_from_row(current)
            if stored is not None:
                return stored
        raise RepositoryValidationError("salary is required")

    def _job_row_to_dict(self, row: Mapping[str, Any]) -> dict[str, Any]:
        year_selection = row["year_selection"]
        return {
            "id": row["id"],
            "company": row["company"],
            "position": row["position"],
            "job_status": row["job_status"],
            "job_type": row["job_type"],
            "job_location": row["job_location"],
            "workplace_type": row["workplace_type"],
            "created_by": row["created_by"],
            "job_vacancy": row["job_vacancy"],
            "job_deadline": row["job_deadline"],
            "job_description": row["job_description"],
            "job_contact": row["job_contact"],
            "visibility_status": row["visibility_status"],
            "admin_comment": row["admin_comment"],
            "eligibility": row["eligibility"],
            "student_currently_studying": row["student_currently_studying"],
            "year_selection": list(year_selection) if year_selection is not None else None,
            "experience_min": row["experience_min"],
            "experience_max": row["experience_max"],
            "salary": salary_row_to_dict(row),
            "skills": list(row["skills"] or []),
            "categories": list(row["categories"] or []),
            "facilities": list(row["facilities"] or []),
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }

    def _creator_job_row_to_dict(self, row: Mapping[str, Any]) -> dict[str, Any]:
        job = self._job_row_to_dict(row)
        job["creator"] = {
            "id": row["created_by"],
            "username": row["creator_username"],
            "email": row["creator_email"],
        }
        return job

    @staticmethod
    def _pick(payload: Mapping[str, Any], current: Mapping[str, Any] | None, field_name: str) -> Any:
        value = payload.get(field_name)
        if value is None and current is not None:
            return current[field_name]
        return value

    @staticmethod
    def _affected_rows(status: Any) -> int:
        if not isinstance(status, str):
            return 0
        try:
            return int(status.rsplit(" ", 1)[-1])
        except ValueError:
            return 0

    @staticmethod
    def _coerce_visibility_filter(value: Any) -> str:
        normalized = value.value if isinstance(value, VisibilityStatus) else value
        if isinstance(normalized, str):
            normalized = normalized.strip().upper()
        try:
            return VisibilityStatus(normalized).value
        except ValueError as exc:
            allowed = ", ".join(status.value for status in VisibilityStatus)
            raise RepositoryValidationError(f"visibility_status must be one of: {allowed}") from exc

    @staticmethod
    def _coerce_text(value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return str(value)

    def _require_text(
        self,
        value: Any,
        *,
        field_name: str,
        bounds: tuple[int, int | None] = (1, None),
    ) -> str:
        text = self._coerce_text(value)
        if text is None:
            raise RepositoryValidationError(f"{field_name} is required")
        min_length, max_length = bounds
        if len(text) < min_length:
            raise RepositoryValidationError(f"{field_name} must be at least {min_length} characters")
        if max_length is not None and len(text) > max_length:
            raise RepositoryValidationError(f"{field_name} must be at most {max_length} characters")
        return text

    def _coerce_choice(self, value: Any, allowed: set[str], *, field_name: str, default: str) -> str:
        text = self._coerce_text(value)
        if text is None:
            return default
        normalized = text.lower()
        if normalized not in allowed:
            raise RepositoryValidationError(f"{field_name} must be one of: {', '.join(sorted(allowed))}")
        return normalized

    @staticmethod
    def _coerce_date(value: Any, *, field_name: str) -> date:
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str) and value.strip():
            candidate = value.strip()
            try:
                return date.fromisoformat(candidate[:10])
            except ValueError as exc:
                raise RepositoryValidationError(f"{field_name} must be an ISO date") from exc
        raise RepositoryValidationError(f"{field_name} is required")


@lru_cache
def get_repository() -> PostgresRepository:
    settings = get_settings()
    return PostgresRepository(
        database_url=settings.database_url,
        min_pool_size=settings.database_pool_min_size,
        max_pool_size=settings.database_pool_max_size,
        command_timeout_seconds=settings.database_command_timeout_seconds,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
        max_job_categories=settings.max_job_categories,
        default_currency=settings.default_currency,
        default_salary_period=settings.default_salary_period,
    )
