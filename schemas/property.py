"""
Pydantic schemas for Property API request/response validation.
"""
from datetime import date
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from .base import CamelModel, UtcDateTime


class TenantSchema(CamelModel):
     """Tenant embedded in a lease."""
     full_name: str = Field(..., min_length=1, max_length=200)
     phone: str = Field(default="", max_length=50)
     email: str = Field(default="", max_length=255)


class LeaseSchema(CamelModel):
     """
     Current lease of a property. Money is integer cents.

     lateFeePercent is a fraction (0.05); values above 1 are whole
     percent (5 -> 5%). It wins over lateFeeAmountCents when both are set.
     """
     start_date: date
     end_date: date
     due_day: int = Field(default=1, ge=1, le=31, description="Day of month rent is due (clamped per month)")
     rent_cents: int = Field(..., ge=0, description="Monthly rent in cents")
     deposit_cents: int = Field(default=0, ge=0)
     tenant: Optional[TenantSchema] = None
     late_fee_percent: float = Field(default=0, ge=0)
     late_fee_amount_cents: int = Field(default=0, ge=0)
     grace_days: int = Field(default=0, ge=0)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "startDate": "2025-10-01",
                    "endDate": "2026-09-30",
                    "dueDay": 1,
                    "rentCents": 135000,
                    "depositCents": 135000,
                    "tenant": {
                         "fullName": "John Smith",
                         "phone": "(402) 555-0188",
                         "email": "john.smith@email.com"
                    },
                    "lateFeePercent": 5,
                    "lateFeeAmountCents": 0,
                    "graceDays": 0
               }
          }
     )

     @model_validator(mode="after")
     def _check_dates(self):
          if self.end_date < self.start_date:
               raise ValueError("endDate must not be before startDate")
          return self


class PropertyCreate(CamelModel):
     """Schema for creating a property, vacant or already leased."""
     address: str = Field(..., max_length=255, description="Mailing address (unique)")
     current_lease: Optional[LeaseSchema] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "address": "1001 Dodge St #3B, Omaha, NE 68102",
                    "currentLease": None
               }
          }
     )


class PropertyResponse(CamelModel):
     id: int
     address: str
     current_lease: Optional[LeaseSchema] = None
     created_at: UtcDateTime


class PropertyDeleteResponse(CamelModel):
     ok: bool = True
     deleted_entries: int = 0
