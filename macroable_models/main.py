#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
MacroableModels — FastAPI application
=====================================
Each application owns exactly one MacroRegistry (``app.state.macro_registry``)
which is bound to the declarative ``Base`` for the lifetime of the app.
Routes receive it through the ``get_macro_registry`` dependency.

Start with:
    uvicorn macroable_models.main:create_app --factory --reload
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from macroable_models.core.config import get_settings
from macroable_models.core.database import Base, init_db
from macroable_models.core.deps import get_macro_registry
from macroable_models.core.log import configure_logging
from macroable_models.routes import macros
from macroable_models.services.macros import MacroRegistry

logger = logging.getLogger(__name__)

__all__ = ["create_app", "get_macro_registry"]


# -----------------------------------------------------------------------------

def create_app(macro_registry: Optional[MacroRegistry] = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    owns_registry = macro_registry is None
    registry = macro_registry if macro_registry is not None else MacroRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Bind the app's registry to every model for the app's lifetime."""
        # Dev only; tests build their own schema.
        if settings.debug and not settings.is_testing:
            await init_db()
        Base.use_macro_registry(registry)
        logger.info("Macro registry bound (%d macros)", len(registry))
        try:
            yield
        finally:
            if Base.__macro_registry__ is registry:
                Base.use_macro_registry(None)
            if owns_registry:
                registry.clear()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Runtime macros for SQLAlchemy models",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.macro_registry = registry

    # ── Routers ───────────────────────────────────────────────────────────
    API = "/api/v1"
    app.include_router(macros.router, prefix=API)

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/api/docs",
        }

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


# -----------------------------------------------------------------------------
