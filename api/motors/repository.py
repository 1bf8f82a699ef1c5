"""
Motor persistence (raw SQL).

The table stores the LR / e-way bill reference as `lr_or_eway_bill`; selects
alias it back to the `lr_eway_bill` key used on the wire.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

_SELECT_MOTORS = """
    SELECT serial_no, motor_model, rpm, phase, party_name, dispatch_date,
           transport_agency, lr_or_eway_bill AS lr_eway_bill, test_certificate,
           party_address, hp_kw, remarks
    FROM motors
"""


async def insert_motor(pool: asyncpg.Pool, values: tuple) -> None:
    await db.execute(
        pool,
        """
        INSERT INTO motors (serial_no, motor_model, rpm, phase, party_name, dispatch_date,
                            transport_agency, lr_or_eway_bill, test_certificate,
                            party_address, hp_kw, remarks)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12)
        """,
        *values,
    )


async def find_by_serial_and_party(
    pool: asyncpg.Pool,
    serial_no: str,
    party_name: str,
) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        _SELECT_MOTORS + "WHERE serial_no = $1 AND party_name = $2",
        serial_no,
        party_name,
    )


async def find_by_serial(pool: asyncpg.Pool, serial_no: str) -> list[dict[str, Any]]:
    return await db.fetch_all(pool, _SELECT_MOTORS + "WHERE serial_no = $1", serial_no)


async def find_by_party(pool: asyncpg.Pool, party_name: str) -> list[dict[str, Any]]:
    return await db.fetch_all(pool, _SELECT_MOTORS + "WHERE party_name = $1", party_name)
