"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created once per process in the FastAPI lifespan (see
`api/main.py`) and stored on `app.state.pool`. Routes receive it through the
`get_pool` dependency and hand it to repository functions explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import Request

from .config import DatabaseSettings

logger = logging.getLogger(__name__)

# Errors the driver raises for failed statements or a dead connection.
STORAGE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
)


async def init_pool(settings: DatabaseSettings) -> asyncpg.Pool:
    """
    Open the pool and verify the database answers. Any failure propagates.
    """
    pool = await asyncpg.create_pool(
        host=settings.host,
        port=settings.port,
        user=settings.user,
        password=settings.password,
        database=settings.name,
        ssl=False,
    )
    try:
        await pool.fetchval("SELECT 1")
    except BaseException:
        await pool.close()
        raise
    logger.info("Connected to PostgreSQL at %s:%s/%s", settings.host, settings.port, settings.name)
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
    """
    await pool.execute(sql, *args)
