"""Tests for the motor repository SQL and the db helpers."""

from __future__ import annotations

import pytest

from motors import repository


@pytest.mark.asyncio
async def test_select_aliases_bill_column(fake_pool, sample_motor):
    fake_pool.rows.append(sample_motor)

    rows = await repository.find_by_serial(fake_pool, "S1")

    sql, args = fake_pool.statements[-1]
    assert "lr_or_eway_bill AS lr_eway_bill" in sql
    assert "ORDER BY" not in sql
    assert args == ("S1",)
    assert rows == [sample_motor]


@pytest.mark.asyncio
async def test_rows_are_returned_as_plain_dicts(fake_pool, sample_motor):
    fake_pool.rows.append(sample_motor)

    rows = await repository.find_by_party(fake_pool, "Acme")

    assert rows[0] is not sample_motor
    assert isinstance(rows[0], dict)


@pytest.mark.asyncio
async def test_serial_and_party_binds_both(fake_pool):
    rows = await repository.find_by_serial_and_party(fake_pool, "S1", "Acme")

    sql, args = fake_pool.statements[-1]
    assert sql.endswith("WHERE serial_no = $1 AND party_name = $2")
    assert args == ("S1", "Acme")
    assert rows == []


@pytest.mark.asyncio
async def test_driver_errors_propagate(fake_pool):
    fake_pool.fail_with = OSError("gone")

    with pytest.raises(OSError):
        await repository.find_by_party(fake_pool, "Acme")
