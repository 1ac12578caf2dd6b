"""
Main FastAPI application entry point.
"""

import json
import logging
import time
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app import __version__
from app.config import get_settings
from app.database import close_db, get_db_context, init_db

logger = logging.getLogger(__name__)

SLOW_REQUEST_MS = 100


def format_datetime_js(dt: datetime) -> str:
    """
    Format datetime like JavaScript's toISOString().

    e.g. "2025-12-08T09:01:16.715Z"; naive datetimes are taken as UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    ms = dt.microsecond // 1000
    return f"{dt.strftime('%Y-%m-%dT%H:%M:%S')}.{ms:03d}Z"


def custom_json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    if isinstance(obj, datetime):
        return format_datetime_js(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def convert_floats_to_ints(obj: Any) -> Any:
    """
    Recursively convert float values that are whole numbers to ints.

    Money and day counts are floats in the database; 15000.0 renders as 15000.
    """
    if isinstance(obj, dict):
        return {k: convert_floats_to_ints(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_floats_to_ints(item) for item in obj]
    elif isinstance(obj, float):
        if obj.is_integer():
            return int(obj)
        return obj
    return obj


class CustomJSONResponse(JSONResponse):
    """Compact JSON with whole-number floats rendered as ints."""

    def render(self, content: Any) -> bytes:
        content = convert_floats_to_ints(content)
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
            default=custom_json_serializer,
        ).encode("utf-8")


class TimingMiddleware(BaseHTTPMiddleware):
    """Log requests slower than SLOW_REQUEST_MS."""

    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration = (time.perf_counter() - start) * 1000
        if duration > SLOW_REQUEST_MS:
            logger.warning(
                "Slow request: %s %s took %.0fms", request.method, request.url.path, duration
            )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Initializes database on startup and closes connections on shutdown.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting %s v%s (debug=%s)", settings.app_name, __version__, settings.debug)

    await init_db()

    if settings.seed_demo_data:
        from app.scripts.seed_demo_data import seed_demo_data

        async with get_db_context() as session:
            await seed_demo_data(session, settings)

    yield

    await close_db()
    logger.info("%s shutdown complete", settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Engagements, days off and monthly invoicing for contract developers",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
        openapi_url="/api/openapi.json" if settings.debug else None,
        default_response_class=CustomJSONResponse,
    )

    # Credentials require explicit origins rather than "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1|192\.168\.\d+\.\d+)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TimingMiddleware)

    from app.routers import (
        auth,
        clients,
        day_off_requests,
        developers,
        engagements,
        health,
        holiday_credits,
        holidays,
        invoices,
        users,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, prefix="/api", tags=["Authentication"])
    app.include_router(users.router, prefix="/api", tags=["Users"])
    app.include_router(developers.router, prefix="/api", tags=["Developers"])
    app.include_router(clients.router, prefix="/api", tags=["Clients"])
    app.include_router(engagements.router, prefix="/api", tags=["Engagements"])
    app.include_router(day_off_requests.router, prefix="/api", tags=["Day Off Requests"])
    app.include_router(holidays.router, prefix="/api", tags=["Holidays"])
    app.include_router(holiday_credits.router, prefix="/api", tags=["Holiday Credits"])
    app.include_router(invoices.router, prefix="/api", tags=["Invoices"])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": str(exc)},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
