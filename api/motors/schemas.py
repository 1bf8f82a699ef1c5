"""
Pydantic schemas for the motor registry.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

# JSON key order; also the positional bind order for inserts.
MOTOR_FIELDS: tuple[str, ...] = (
    "serial_no",
    "motor_model",
    "rpm",
    "phase",
    "party_name",
    "dispatch_date",
    "transport_agency",
    "lr_eway_bill",
    "test_certificate",
    "party_address",
    "hp_kw",
    "remarks",
)


class Motor(BaseModel):
    # Strict: "1500" is not an rpm, 42 is not a phase. Missing keys fall back to zero values.
    model_config = ConfigDict(strict=True)

    serial_no: str = ""
    motor_model: str = ""
    rpm: int = 0
    phase: str = ""
    party_name: str = ""
    dispatch_date: str = ""
    transport_agency: str = ""
    lr_eway_bill: str = ""
    test_certificate: str = ""
    party_address: str = ""
    hp_kw: str = ""
    remarks: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        # A JSON null leaves the field at its zero value, like an absent key.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def bind_values(self) -> tuple:
        return tuple(getattr(self, name) for name in MOTOR_FIELDS)


class RegisterResponse(BaseModel):
    message: str
