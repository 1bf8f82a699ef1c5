"""
Motor registry business logic.

Maps storage outcomes onto HTTP statuses. Driver errors are logged here and
replaced with a generic client-facing message.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status
from pydantic import ValidationError

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "Motor registered successfully"


async def register_motor(pool: asyncpg.Pool, motor: schemas.Motor) -> schemas.RegisterResponse:
    try:
        await repository.insert_motor(pool, motor.bind_values())
    except db.STORAGE_ERRORS as exc:
        logger.exception("Insert failed for serial_no=%r", motor.serial_no)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error inserting data",
        ) from exc
    return schemas.RegisterResponse(message=REGISTERED_MESSAGE)


async def fetch_motors(
    pool: asyncpg.Pool,
    *,
    serial_no: str = "",
    party_name: str = "",
) -> list[schemas.Motor]:
    serial = (serial_no or "").strip()
    party = (party_name or "").strip()

    # One outcome per (serial present, party present) pair.
    has_serial, has_party = bool(serial), bool(party)
    if has_serial and has_party:
        pending = repository.find_by_serial_and_party(pool, serial, party)
    elif has_serial:
        pending = repository.find_by_serial(pool, serial)
    elif has_party:
        pending = repository.find_by_party(pool, party)
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid query parameters provided",
        )

    try:
        rows = await pending
        motors = [schemas.Motor.model_validate(row) for row in rows]
    except (*db.STORAGE_ERRORS, ValidationError) as exc:
        logger.exception("Fetch failed for serial_no=%r party_name=%r", serial, party)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching motors",
        ) from exc

    if not motors:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No motors found")
    return motors
