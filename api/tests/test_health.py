from fastapi.testclient import TestClient

from jobboard.main import app
from jobboard.services.repository import RepositoryUnavailableError, get_repository


class _PingRepository:
    def __init__(self, error: Exception | None = None) -> None:
        self._error = error

    async def ping(self) -> None:
        if self._error is not None:
            raise self._error


def test_healthz() -> None:
    client = TestClient(app)
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_readyz_reports_database_ok() -> None:
    app.dependency_overrides[get_repository] = lambda: _PingRepository()
    try:
        response = TestClient(app).get("/readyz")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


def test_readyz_reports_unavailable_database() -> None:
    app.dependency_overrides[get_repository] = lambda: _PingRepository(RepositoryUnavailableError("JB_DATABASE_URL is required"))
    try:
        response = TestClient(app).get("/readyz")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["detail"]["error"] == "unavailable"
