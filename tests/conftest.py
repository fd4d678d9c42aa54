#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Every test gets a fresh MacroRegistry bound to the declarative Base and,
when it asks for one, an in-memory SQLite database with the fixture tables
(dummies, anothers) created from scratch.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# ── Env vars must be set before importing app modules ────────────────────────
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT",  "testing")

from macroable_models.core.database import Base, build_engine, drop_db, init_db
from macroable_models.main import create_app
from macroable_models.services.macros import MacroRegistry

from tests.models import AnotherDummy, DummyModel

_TEST_URL = "sqlite+aiosqlite:///:memory:"


# ── Registry + model instances ────────────────────────────────────────────────
@pytest.fixture
def registry():
    """Fresh registry bound to every model for the duration of one test."""
    reg = MacroRegistry()
    Base.use_macro_registry(reg)
    yield reg
    Base.use_macro_registry(None)


@pytest.fixture
def model(registry) -> DummyModel:
    return DummyModel()


@pytest.fixture
def another_model(registry) -> AnotherDummy:
    return AnotherDummy()


# ── Schema recreated per test ─────────────────────────────────────────────────
@pytest_asyncio.fixture
async def engine():
    eng = build_engine(_TEST_URL, echo=False, poolclass=StaticPool)
    await init_db(eng)
    yield eng
    await drop_db(eng)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


# ── HTTP client over the app that owns the test's registry ───────────────────
@pytest_asyncio.fixture
async def client(registry) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(macro_registry=registry)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
