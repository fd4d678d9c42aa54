#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------

"""
Database engine and the macroable declarative base.
Uses SQLAlchemy 2.x async API with aiosqlite.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from macroable_models.core.config import get_settings
from macroable_models.services.macros import MacroableMixin


class Base(MacroableMixin, DeclarativeBase):
    """Shared declarative base; every model it maps accepts macros."""
    pass


def build_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    settings = get_settings()
    kwargs.setdefault("echo", settings.db_echo)
    return create_async_engine(url or settings.database_url, **kwargs)


_engine = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create all mapped tables (dev / tests)."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db(engine: AsyncEngine | None = None) -> None:
    """Drop all mapped tables (tests only)."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
