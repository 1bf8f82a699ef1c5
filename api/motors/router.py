"""
Motor registry API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query, status

from core import db

from . import schemas, service

router = APIRouter()


def _first(values: list[str]) -> str:
    # Repeated parameters resolve to the first occurrence.
    return values[0] if values else ""


@router.get("/fetch")
async def fetch_motors(
    serial_no: list[str] = Query(default=[]),
    party_name: list[str] = Query(default=[]),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[schemas.Motor]:
    return await service.fetch_motors(
        pool,
        serial_no=_first(serial_no),
        party_name=_first(party_name),
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register_motor(
    motor: schemas.Motor,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.RegisterResponse:
    return await service.register_motor(pool, motor)
