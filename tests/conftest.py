# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Provides an in-memory stand-in for the asyncpg pool so the HTTP surface can
# be exercised without a running PostgreSQL.
# =============================================================================

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from main import create_app
from motors.schemas import MOTOR_FIELDS


class FakePool:
    """
    Interprets the handful of statements the motors repository issues.
    """

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.statements: list[tuple[str, tuple]] = []
        self.fail_with: BaseException | None = None

    def _check(self, sql: str, args: tuple) -> None:
        self.statements.append((" ".join(sql.split()), args))
        if self.fail_with is not None:
            raise self.fail_with

    async def execute(self, sql: str, *args: Any) -> str:
        self._check(sql, args)
        self.rows.append(dict(zip(MOTOR_FIELDS, args)))
        return "INSERT 0 1"

    async def fetch(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self._check(sql, args)
        if "serial_no = $1 AND party_name = $2" in sql:
            serial, party = args
            return [r for r in self.rows if r["serial_no"] == serial and r["party_name"] == party]
        if "WHERE serial_no = $1" in sql:
            return [r for r in self.rows if r["serial_no"] == args[0]]
        if "WHERE party_name = $1" in sql:
            return [r for r in self.rows if r["party_name"] == args[0]]
        raise AssertionError(f"unexpected statement: {sql}")


@pytest.fixture
def sample_motor() -> dict[str, Any]:
    return {
        "serial_no": "S1",
        "motor_model": "M1",
        "rpm": 1500,
        "phase": "3",
        "party_name": "Acme",
        "dispatch_date": "2024-01-01",
        "transport_agency": "T1",
        "lr_eway_bill": "LR1",
        "test_certificate": "C1",
        "party_address": "Addr",
        "hp_kw": "5HP",
        "remarks": "",
    }


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def client(fake_pool: FakePool) -> TestClient:
    app = create_app()
    app.dependency_overrides[db.get_pool] = lambda: fake_pool
    # Not entered as a context manager: the lifespan would dial PostgreSQL.
    return TestClient(app)
