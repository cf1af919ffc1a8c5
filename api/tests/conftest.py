from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import pytest

from jobboard.services.repository import PostgresRepository


class FakeTransaction:
    def __init__(self, conn: FakeConnection) -> None:
        self._conn = conn

    async def __aenter__(self) -> FakeTransaction:
        self._conn.events.append("begin")
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        self._conn.events.append("rollback" if exc_type else "commit")
        return False


class FakeConnection:
    """Records statements and transaction boundaries like an asyncpg connection would see them."""

    def __init__(self) -> None:
        self.events: list[str] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._responses: list[tuple[str, Any]] = []
        self._failures: list[tuple[str, BaseException]] = []

    def respond(self, fragment: str, value: Any) -> None:
        self._responses.append((fragment, value))

    def fail_on(self, fragment: str, exc: BaseException) -> None:
        self._failures.append((fragment, exc))

    def transaction(self) -> FakeTransaction:
        return FakeTransaction(self)

    def statements(self) -> list[str]:
        return [event for event in self.events if event not in {"begin", "commit", "rollback"}]

    async def execute(self, query: str, *args: Any) -> str:
        normalized = self._record(query, args)
        response = self._response(normalized, args)
        if response is not None:
            return response
        return f"{normalized.split(' ', 1)[0].upper()} 1"

    async def fetch(self, query: str, *args: Any) -> list[Any]:
        normalized = self._record(query, args)
        response = self._response(normalized, args)
        return response if response is not None else []

    async def fetchrow(self, query: str, *args: Any) -> Any:
        normalized = self._record(query, args)
        return self._response(normalized, args)

    async def fetchval(self, query: str, *args: Any) -> Any:
        normalized = self._record(query, args)
        return self._response(normalized, args)

    def _record(self, query: str, args: tuple[Any, ...]) -> str:
        normalized = " ".join(query.split())
        self.events.append(normalized)
        self.calls.append((normalized, args))
        for fragment, exc in self._failures:
            if fragment in normalized:
                raise exc
        return normalized

    def _response(self, normalized: str, args: tuple[Any, ...]) -> Any:
        for fragment, value in self._responses:
            if fragment in normalized:
                return value(*args) if callable(value) else value
        return None


class _Acquire:
    def __init__(self, conn: FakeConnection) -> None:
        self._conn = conn

    async def __aenter__(self) -> FakeConnection:
        return self._conn

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> bool:
        return False


class FakePool:
    def __init__(self, conn: FakeConnection) -> None:
        self.conn = conn

    def acquire(self) -> _Acquire:
        return _Acquire(self.conn)

    async def execute(self, query: str, *args: Any) -> str:
        return await self.conn.execute(query, *args)

    async def fetch(self, query: str, *args: Any) -> list[Any]:
        return await self.conn.fetch(query, *args)

    async def fetchrow(self, query: str, *args: Any) -> Any:
        return await self.conn.fetchrow(query, *args)

    async def fetchval(self, query: str, *args: Any) -> Any:
        return await self.conn.fetchval(query, *args)

    async def close(self) -> None:
        return None


def build_job_row(**overrides: Any) -> dict[str, Any]:
    now = datetime.now(timezone.utc)
    row: dict[str, Any] = {
        "id": 1,
        "company": "Example Labs",
        "position": "Backend Engineer",
        "job_status": "pending",
        "job_type": "full-time",
        "job_location": "Pune",
        "workplace_type": 2,
        "created_by": 7,
        "job_vacancy": "3",
        "job_deadline": date.today() + timedelta(days=30),
        "job_description": "Build and operate the hiring platform.",
        "job_contact": "jobs@example.com",
        "visibility_status": "UNDER_REVIEW",
        "admin_comment": None,
        "eligibility": 1,
        "student_currently_studying": True,
        "year_selection": None,
        "experience_min": None,
        "experience_max": None,
        "created_at": now,
        "updated_at": now,
        "salary_type": "FIXED",
        "fixed_amount": Decimal("50000.00"),
        "min_amount": None,
        "max_amount": None,
        "incentive_details": None,
        "is_salary_hidden": False,
        "is_negotiable": False,
        "currency": "INR",
        "salary_period": "MONTH",
        "skills": [1, 2],
        "categories": [3],
        "facilities": [1],
    }
    row.update(overrides)
    return row


def build_job_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "company": "Example Labs",
        "position": "Backend Engineer",
        "job_status": "pending",
        "job_type": "full-time",
        "job_location": "Pune",
        "workplace_type": 2,
        "job_vacancy": "3",
        "job_deadline": (date.today() + timedelta(days=30)).isoformat(),
        "job_description": "Build and operate the hiring platform.",
        "job_contact": "jobs@example.com",
        "eligibility": 1,
        "student_currently_studying": True,
        "salary": {"salary_type": "FIXED", "fixed_amount": "50000"},
        "skills": [1, 2],
        "categories": [3],
        "facilities": [1],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def fake_repository(fake_conn: FakeConnection) -> PostgresRepository:
    repository = PostgresRepository(
        database_url="postgresql://fake/jobboard",
        min_pool_size=1,
        max_pool_size=1,
    )
    repository._pool = FakePool(fake_conn)
    return repository


@pytest.fixture
def job_row() -> Callable[..., dict[str, Any]]:
    return build_job_row


@pytest.fixture
def job_payload() -> Callable[..., dict[str, Any]]:
    return build_job_payload
