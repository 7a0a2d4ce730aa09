"""Root conftest: shared test configuration and in-memory store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - seed_exhibits stores items and quizzes out of order, with null columns
"""

import os

# Tests never reach a real MySQL or AWS
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SKIP_DB_CHECK", "true")
os.environ.setdefault("USE_SECRETS_MANAGER", "false")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from museum_api.db.base import Base  # noqa: E402
from museum_api.models import Item, Quiz, Theme  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def seed_exhibits(test_db):
    """Two themes; T1 has items stored out of order and two quizzes."""
    test_db.add_all([
        Theme(theme_id="T1", theme_name="조선 왕실", theme_desc=None),
        Theme(theme_id="T2", theme_name="Bronze Age", theme_desc="Tools and weapons"),
    ])
    await test_db.flush()
    test_db.add_all([
        Item(
            theme_id="T1", item_seq=3, item_name="Third",
            item_desc="third stop", script_child="c3", script_general="g3",
            latitude=37.5796, longitude=126.977,
        ),
        Item(theme_id="T1", item_seq=1, item_name="First"),
        Item(
            theme_id="T1", item_seq=2, item_name="Second",
            item_desc="두 번째", latitude=37.1, longitude=None,
        ),
        Item(theme_id="T2", item_seq=1, item_name="Axe"),
        Quiz(
            theme_id="T1", quiz_no=2, question="Q2", answer="A2",
            options='["A2","B2"]', quiz_desc=None,
        ),
        Quiz(theme_id="T1", quiz_no=1, question="Q1", answer="A1"),
    ])
    await test_db.commit()
