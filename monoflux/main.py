"""MonoFlux API - FastAPI application and composition root.

Invariants:
    - create_app() is the only place providers are constructed
    - Providers reach handlers through constructor parameters (no global lookups)
    - Routes registered explicitly from each handler's route table
    - Global error handlers map MonoFluxError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Module-level `app` built from get_settings() for `uvicorn monoflux.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from monoflux import __version__
from monoflux.api.error_handlers import register_error_handlers
from monoflux.api.routes.flux import FluxRoutes
from monoflux.api.routes.info import InfoRoutes
from monoflux.api.routes.mono import MonoRoutes
from monoflux.config import Settings, get_settings
from monoflux.infrastructure.observability import setup_logging
from monoflux.services.product_service import ProductService
from monoflux.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    user_service: UserService | None = None,
    product_service: ProductService | None = None,
) -> FastAPI:
    """Build the application: settings → providers → handlers → routes."""
    settings = settings or get_settings()
    user_service = user_service or UserService(
        fetch_delay_seconds=settings.user_fetch_delay_ms / 1000,
    )
    product_service = product_service or ProductService()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("%s API started", settings.app_name)
        yield
        logger.info("%s API shutting down", settings.app_name)

    app = FastAPI(
        title=f"{settings.app_name} API", version=__version__, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    handlers = (
        MonoRoutes(user_service),
        FluxRoutes(
            product_service,
            default_max_price=settings.default_max_price,
            default_low_stock_threshold=settings.default_low_stock_threshold,
        ),
        InfoRoutes(settings.app_name, settings.app_description),
    )
    for handler in handlers:
        app.include_router(handler.build_router())

    register_error_handlers(app)
    return app


app = create_app()
