import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from .core.config import Settings, get_settings
from .core.errors import register_error_handlers
from .integrations.solar_api import SolarApiClient
from .api.routes_health import router as health_router
from .api.routes_forecast import router as forecast_router
from .api.routes_environment import router as environment_router
from .api.routes_sessions import router as sessions_router


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    upstream: Optional[SolarApiClient] = None,
) -> FastAPI:
    """Builds the gateway application.

    ``upstream`` defaults to a client for ``settings.upstream_url``; tests
    pass one wrapping a stub session instead.
    """
    settings = settings or get_settings()
    if upstream is None:
        upstream = SolarApiClient(settings.upstream_url, timeout=settings.upstream_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):  # noqa: ANN202
        logger.info("Forwarding requests to %s", upstream.base_url)
        try:
            yield
        finally:
            upstream.close()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="REST gateway for the solar power forecasting service.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.upstream = upstream

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(forecast_router)
    app.include_router(environment_router)
    app.include_router(sessions_router)

    @app.get("/swagger.json", include_in_schema=False)
    async def swagger_json() -> JSONResponse:
        return JSONResponse(app.openapi())

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/docs", status_code=301)

    return app


def serve() -> None:
    settings = app.state.settings

    logger.info("Starting %s on http://%s:%s", settings.app_name, settings.host, settings.port)
    logger.info("API documentation: http://localhost:%s/docs", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


configure_logging(get_settings().log_level)

app = create_app()
