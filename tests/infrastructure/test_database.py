"""DatabaseSessionManager: health checks, startup verification, error translation."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError

from museum_api.core.errors import StoreError
from museum_api.infrastructure.database import DatabaseSessionManager, store_errors


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


async def test_health_check_succeeds(manager):
    assert await manager.health_check() is True


async def test_verify_succeeds(manager):
    await manager.verify(timeout=5)


async def test_session_maps_sqlalchemy_errors(manager):
    with pytest.raises(StoreError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.operation == "session"


async def test_health_check_false_on_unreachable_store():
    m = DatabaseSessionManager("sqlite+aiosqlite:////nonexistent-dir/museum.db")
    try:
        assert await m.health_check() is False
    finally:
        await m.dispose()


def test_store_errors_maps_integrity_error():
    with pytest.raises(StoreError) as exc_info:
        with store_errors("add_recipient"):
            raise IntegrityError("INSERT", {}, Exception("duplicate key"))
    assert "integrity constraint violated" in exc_info.value.message
    assert "duplicate key" in exc_info.value.message


def test_store_errors_maps_operational_error():
    with pytest.raises(StoreError) as exc_info:
        with store_errors("get_all_themes"):
            raise OperationalError("SELECT", {}, Exception("gone away"))
    assert exc_info.value.operation == "get_all_themes"
    assert "gone away" in exc_info.value.message


def test_store_errors_passes_other_exceptions():
    with pytest.raises(ValueError):
        with store_errors("noop"):
            raise ValueError("not a store failure")
