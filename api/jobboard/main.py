from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI
from starlette.requests import Request

from jobboard.api.router import api_router
from jobboard.core.config import Settings, get_settings
from jobboard.core.telemetry import configure_api_logging, setup_api_telemetry, shutdown_api_telemetry
from jobboard.services.repository import get_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("job board api starting environment=%s", app.state.settings.environment)
    try:
        yield
    finally:
        shutdown_api_telemetry(app, app.state.telemetry)
        await get_repository().close()
        get_repository.cache_clear()


def create_app(settings: Settings) -> FastAPI:
    configure_api_logging(settings)
    application = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
    application.state.settings = settings
    application.state.telemetry = setup_api_telemetry(application, settings)

    @application.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        started_at = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http request method=%s path=%s status=%s user_id=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            request.headers.get("X-User-Id", "-"),
            (time.perf_counter() - started_at) * 1000.0,
        )
        return response

    application.include_router(api_router)
    return application


app = create_app(get_settings())
