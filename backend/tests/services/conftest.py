"""Service test fixtures - async DB, fixed clock, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_clock dependencies overridden for route tests
    - db_manager patched so the readiness check sees the test engine
    - The clock starts at 2024-01-01T00:00:00Z and only moves when a test moves it
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import smoketrack.infrastructure.database as db_module
import smoketrack.models  # noqa: F401
from smoketrack.api.dependencies import USER_ID_HEADER, get_clock
from smoketrack.db.base import Base
from smoketrack.infrastructure.clock import FixedClock
from smoketrack.infrastructure.database import DatabaseSessionManager, get_db
from smoketrack.main import app
from smoketrack.models.event import Event
from smoketrack.models.profile import Profile
from smoketrack.models.supply import Supply


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FixedClock(T0)


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def auth_headers(user_id):
    return {USER_ID_HEADER: str(user_id)}


@pytest.fixture
async def client(test_engine, test_session_factory, clock):
    """FastAPI test client with DB and clock dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def make_supply(test_db, user_id):
    """Insert a supply for the test user (or another owner)."""
    async def _make(
        total: int = 20,
        remaining: int | None = None,
        price: str = "25.00",
        owner: uuid.UUID | None = None,
    ) -> Supply:
        supply = Supply(
            user_id=owner or user_id,
            name="Test pack",
            total_units=total,
            remaining_units=total if remaining is None else remaining,
            unit_price=Decimal(price),
        )
        test_db.add(supply)
        await test_db.commit()
        return supply
    return _make


@pytest.fixture
def set_interval(test_db, user_id):
    """Store interval lock settings for the test user."""
    async def _set(enabled: bool = True, minutes: int | None = 30) -> Profile:
        profile = Profile(
            id=user_id, interval_enabled=enabled,
            interval_minutes=minutes if enabled else None,
        )
        test_db.add(profile)
        await test_db.commit()
        return profile
    return _set


@pytest.fixture
def make_event(test_db, user_id):
    """Insert an event directly, bypassing the commit engine."""
    async def _make(supply: Supply, occurred_at: datetime, **fields) -> Event:
        event = Event(
            user_id=fields.pop("owner", user_id),
            supply_id=supply.id,
            occurred_at=occurred_at,
            unit_cost=Decimal("1.25"),
            created_at=occurred_at,
            **fields,
        )
        test_db.add(event)
        await test_db.commit()
        return event
    return _make


@pytest.fixture
def fetch(test_session_factory):
    """Read a row through a fresh session (never a stale identity map)."""
    async def _fetch(model, pk):
        async with test_session_factory() as session:
            return await session.get(model, pk)
    return _fetch
