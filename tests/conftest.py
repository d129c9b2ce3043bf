# tests/conftest.py

from decimal import Decimal
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from beer_catalog.db.base import Base, get_db
from beer_catalog.domain.beer import BeerStyle
from beer_catalog.main import app
from beer_catalog.repositories.beer import BeerRepository
from beer_catalog.schemas.beer import BeerCreate, BeerOut
from beer_catalog.services.beer import BeerService

# ==============================================================================
# 1. Database fixtures
# ==============================================================================

@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory SQLite database per test; StaticPool keeps it on one connection."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def beer_service(db_session: AsyncSession) -> BeerService:
    return BeerService(BeerRepository(db_session))


# ==============================================================================
# 2. Sample data
# ==============================================================================

CATALOG = [
    ("Ninja Porter", BeerStyle.PORTER, "123", "12.00", 140),
    ("Hop Slam IPA", BeerStyle.IPA, "124", "10.50", 57),
    ("Sunshine City", BeerStyle.IPA, "125", "13.99", 144),
    ("Session IPA Light", BeerStyle.PALE_ALE, "126", "8.25", 12),
    ("Galaxy Cat", BeerStyle.PALE_ALE, "127", "12.99", 122),
    ("Salty Sea Gose", BeerStyle.GOSE, "128", "9.25", None),
]


def make_beer(
    name: str = "Ninja Porter",
    style: BeerStyle = BeerStyle.PORTER,
    upc: str = "123",
    price: str = "12.00",
    quantity: int | None = 140,
) -> BeerCreate:
    return BeerCreate(
        beer_name=name,
        beer_style=style,
        upc=upc,
        price=Decimal(price),
        quantity_on_hand=quantity,
    )


@pytest.fixture
async def catalog(beer_service: BeerService, db_session: AsyncSession) -> list[BeerOut]:
    """Persist CATALOG through the service and commit it."""
    created = [await beer_service.create_beer(make_beer(*row)) for row in CATALOG]
    await db_session.commit()
    return created


# ==============================================================================
# 3. HTTP client
# ==============================================================================

@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """ASGI client whose requests each get their own session on the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def new_beer():
    """Factory for BeerCreate bodies; defaults describe Ninja Porter."""
    return make_beer
