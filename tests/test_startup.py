import logging

import pytest

import app.main as main_module
from app.database import check_connection

pytestmark = pytest.mark.anyio


async def test_check_connection_returns_store_time(engine_test):
    now = await check_connection(engine_test)
    assert now is not None


async def test_lifespan_runs_liveness_check(monkeypatch, caplog):
    calls = []

    async def fake_check():
        calls.append(True)

    monkeypatch.setattr(main_module, "check_connection", fake_check)
    with caplog.at_level(logging.INFO, logger="app.main"):
        async with main_module.lifespan(main_module.app):
            assert calls == [True]
    assert "Server running on http://" in caplog.text


async def test_lifespan_fails_when_store_unreachable(monkeypatch, caplog):
    async def failing_check():
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(main_module, "check_connection", failing_check)
    with caplog.at_level(logging.INFO, logger="app.main"), pytest.raises(ConnectionRefusedError):
        async with main_module.lifespan(main_module.app):
            pass
    assert "Database connection failed" in caplog.text
    assert "Server running on" not in caplog.text
