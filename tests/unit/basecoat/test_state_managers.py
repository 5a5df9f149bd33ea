"""Unit tests for state managers."""

import time

import pytest

from basecoat.state_managers import SessionManager, SessionState


@pytest.mark.asyncio
async def test_session_manager_creates_session():
    """Test a session is created when no id is given."""
    manager = SessionManager()
    await manager.initialize()

    session_id, session = await manager.get_or_create(None)

    assert session_id
    assert isinstance(session, SessionState)
    assert session.is_logged_in is False
    assert session.last_run_route is None
    assert await manager.count() == 1


@pytest.mark.asyncio
async def test_session_manager_returns_existing_session():
    """Test a known id returns the same session object."""
    manager = SessionManager()
    session_id, session = await manager.get_or_create(None)
    session.is_logged_in = True

    same_id, same_session = await manager.get_or_create(session_id)

    assert same_id == session_id
    assert same_session is session
    assert same_session.is_logged_in is True


@pytest.mark.asyncio
async def test_session_manager_unknown_id_gets_new_session():
    """Test an unknown id is replaced with a fresh session."""
    manager = SessionManager()

    session_id, _ = await manager.get_or_create("forged-id")

    assert session_id != "forged-id"
    assert await manager.count() == 1


@pytest.mark.asyncio
async def test_session_manager_expired_session_is_replaced():
    """Test an idle session is discarded on lookup."""
    manager = SessionManager(ttl_seconds=60)
    session_id, session = await manager.get_or_create(None)
    session.is_logged_in = True
    session.last_seen = time.time() - 120

    new_id, new_session = await manager.get_or_create(session_id)

    assert new_id != session_id
    assert new_session.is_logged_in is False
    assert await manager.count() == 1


@pytest.mark.asyncio
async def test_session_manager_purge_expired():
    """Test purge removes only idle sessions."""
    manager = SessionManager(ttl_seconds=60)
    _, idle = await manager.get_or_create(None)
    await manager.get_or_create(None)
    idle.last_seen = time.time() - 120

    assert await manager.purge_expired() == 1
    assert await manager.count() == 1


@pytest.mark.asyncio
async def test_session_manager_sweeps_idle_sessions_on_lookup():
    """Test creating a session also discards other idle sessions."""
    manager = SessionManager(ttl_seconds=60)
    for _ in range(50):
        _, idle = await manager.get_or_create(None)
        idle.last_seen = time.time() - 120

    await manager.get_or_create(None)

    assert await manager.count() == 1


@pytest.mark.asyncio
async def test_session_manager_drop():
    """Test dropping a session."""
    manager = SessionManager()
    session_id, _ = await manager.get_or_create(None)

    await manager.drop(session_id)
    await manager.drop("unknown")

    assert await manager.count() == 0


@pytest.mark.asyncio
async def test_session_manager_cleanup():
    """Test cleanup clears all sessions."""
    manager = SessionManager()
    await manager.get_or_create(None)
    await manager.get_or_create(None)

    await manager.cleanup()

    assert await manager.count() == 0
