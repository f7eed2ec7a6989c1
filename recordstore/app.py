import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from recordstore.core.config import Settings, get_settings
from recordstore.core.logging_config import configure_logging
from recordstore.domain.records import RecordStoreError
from recordstore.repositories.json_storage import load_file
from recordstore.repositories.memory_repository import InMemoryRepository
from recordstore.routers import health as health_router
from recordstore.routers import records as records_router
from recordstore.services.record_service import RecordService

logger = logging.getLogger(__name__)

DEV_ORIGINS = {
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, status and latency."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "%s %s -> %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": latency_ms,
            },
        )
        return response


async def _record_store_error_handler(request: Request, exc: RecordStoreError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        {"ok": False, "error": exc.code, "message": exc.message},
        status_code=exc.status_code,
    )


def _allowed_origins(settings: Settings) -> list[str]:
    allowed = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed.update(DEV_ORIGINS)
    return sorted(origin for origin in allowed if origin)


def create_app(
    settings: Settings | None = None,
    repository: InMemoryRepository | None = None,
) -> FastAPI:
    """
    Build the API. Without an explicit repository the data file is loaded
    here, before the app exists, so a missing or malformed file aborts
    startup. Usable as ``uvicorn recordstore.app:create_app --factory``.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    if repository is None:
        repository = InMemoryRepository.from_records(load_file(settings.data_file))

    app = FastAPI(title="Record Store API")
    app.state.settings = settings
    app.state.repository = repository
    app.state.record_service = RecordService(repository, strict_create=settings.strict_create)

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(RecordStoreError, _record_store_error_handler)

    app.include_router(health_router.router)
    app.include_router(records_router.router)

    logger.info("Record store ready with %d records (env=%s)", repository.count(), settings.app_env)
    return app
