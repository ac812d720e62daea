"""
Entry point de la API
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.services.analytics_service import PaymentAnalyticsTracker
from app.services.entrypoint_registry import EntrypointRegistry
from app.services.entrypoints import build_registry
from app.services.espn_client import EspnClient
from app.services.payment_service import LedgerPaymentProcessor

from app.controllers.entrypoints_controller import router as entrypoints_router
from app.controllers.health_controller import router as health_router
from app.controllers.wellknown_controller import router as wellknown_router

logger = logging.getLogger(__name__)
settings = get_settings()


def create_app(registry: Optional[EntrypointRegistry] = None) -> FastAPI:
    """
    Crea la app de FastAPI

    Si no se pasa un registry, el lifespan arma uno nuevo: cliente de ESPN,
    ledger de pagos vacío y procesador de pagos (si está habilitado).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)

        if registry is not None:
            yield
            return

        client = EspnClient()
        tracker = PaymentAnalyticsTracker()
        payments = LedgerPaymentProcessor(tracker) if settings.payments_enabled else None

        app.state.registry = build_registry(client, tracker=tracker, payments=payments)
        logger.info(
            "🥊 %s running with %d entrypoints (payments %s)",
            settings.agent_name,
            len(app.state.registry),
            "enabled" if payments else "disabled",
        )
        try:
            yield
        finally:
            await client.close()

    # Creo la app
    app = FastAPI(
        title="UFC Intel API",
        description=settings.agent_description,
        version=settings.agent_version,
        lifespan=lifespan
    )

    if registry is not None:
        app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Agrego todos los routers de los controllers al app
    app.include_router(health_router)
    app.include_router(entrypoints_router)
    app.include_router(wellknown_router)

    @app.get("/")
    async def root():
        # Endpoint raíz, sirve para verificar que la API está levantada
        return {
            "name": settings.agent_name,
            "version": settings.agent_version,
            "docs": "/docs"  # Link a la documentación interactiva de Swagger
        }

    return app


app = create_app()


def run():
    """Levanta el server con uvicorn en el puerto configurado (PORT)"""
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)
