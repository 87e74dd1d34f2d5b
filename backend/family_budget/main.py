from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from family_budget.api.middleware import add_cors
from family_budget.api.routers import api_router
from family_budget.core.config import Settings, settings as default_settings
from family_budget.core.errors import ApiError, InvalidPayload, StartupError
from family_budget.core.logging_config import configure_logging
from family_budget.db.session import Database

logger = logging.getLogger(__name__)


def bootstrap(database: Database) -> None:
    """Connect, migrate and seed, in that order. Any failure is fatal."""

    try:
        database.connect()
        database.migrate()
        database.seed()
    except StartupError:
        logger.critical("Start-up failed, refusing to serve requests", exc_info=True)
        raise


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        bootstrap(app.state.database)
        try:
            yield
        finally:
            app.state.database.dispose()

    app = FastAPI(
        lifespan=lifespan,
        title="Family Budget API",
        version=settings.app_version,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    add_cors(app)
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error("%s %s -> %s", request.method, request.url.path, exc.message)
        else:
            logger.debug("%s %s -> %s", request.method, request.url.path, exc.message)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
        err = InvalidPayload()
        return JSONResponse({"error": err.message}, status_code=err.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level="info" if default_settings.is_production else "debug",
    )


if __name__ == "__main__":
    run()
