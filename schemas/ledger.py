"""
Pydantic schemas for the rent ledger API.

Ledger amounts are integer cents. Only payment/adjustment requests take
dollars (amountDollars), converted server-side.
"""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from models import EntrySubType, EntryType
from .base import CamelModel, UtcDateTime

# Strict so a JSON boolean is rejected instead of coerced to 1.0
DollarAmount = Union[StrictStr, StrictInt, StrictFloat]


class LedgerEntryResponse(CamelModel):
     id: int
     period: str = Field(..., description="YYYY-MM")
     property_id: int
     type: EntryType
     sub_type: EntrySubType
     amount_cents: int = Field(..., description="Positive increases balance owed")
     posted_at: UtcDateTime
     created_at: Optional[UtcDateTime] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "id": 1,
                    "period": "2026-03",
                    "propertyId": 1,
                    "type": "CHARGE",
                    "subType": "RENT",
                    "amountCents": 135000,
                    "postedAt": "2026-03-01T09:00:00Z",
                    "createdAt": "2026-03-01T09:00:02Z"
               }
          }
     )


class PeriodRequest(CamelModel):
     """Request body for the charge / late fee generators."""
     period: Optional[str] = Field(None, description="YYYY-MM")

     model_config = ConfigDict(json_schema_extra={"example": {"period": "2026-03"}})


class PaymentCreate(CamelModel):
     """Request body for POST /rent/payments."""
     property_id: Optional[int] = None
     amount_dollars: Optional[DollarAmount] = Field(None, description="Positive dollar amount")
     posted_at: Optional[datetime] = Field(None, description="Defaults to now")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "propertyId": 1,
                    "amountDollars": "800.00",
                    "postedAt": "2026-03-10T18:00:00Z"
               }
          }
     )


class AdjustmentCreate(CamelModel):
     """Request body for POST /rent/adjustments. Amount is signed."""
     property_id: Optional[int] = None
     amount_dollars: Optional[DollarAmount] = None
     period: Optional[str] = Field(None, description="Defaults to the period of postedAt")
     posted_at: Optional[datetime] = None
     sub_type: Optional[str] = Field(None, description="RENT (default) or LATE_FEE")


class SkippedPropertyResponse(CamelModel):
     property_id: int
     reason: str


class ChargeGenerationResponse(CamelModel):
     period: str
     created_count: int
     skipped_count: int = 0
     created: List[LedgerEntryResponse] = []
     skipped: List[SkippedPropertyResponse] = []


class LateFeeGenerationResponse(CamelModel):
     period: str
     created_count: int
     created: List[LedgerEntryResponse] = []
     skipped: List[SkippedPropertyResponse] = []


class PropertyBalanceResponse(CamelModel):
     property_id: int
     address: Optional[str] = None
     due_cents: int
     paid_cents: int
     outstanding_cents: int


class RentSummaryResponse(CamelModel):
     """Response for GET /rent/summary. Totals are in cents."""
     period: str
     total_due: int
     total_paid: int
     outstanding: int
     properties: List[PropertyBalanceResponse] = []

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "period": "2026-03",
                    "totalDue": 135000,
                    "totalPaid": 80000,
                    "outstanding": 55000,
                    "properties": [
                         {
                              "propertyId": 1,
                              "address": "1001 Dodge St #3B, Omaha, NE 68102",
                              "dueCents": 135000,
                              "paidCents": 80000,
                              "outstandingCents": 55000
                         }
                    ]
               }
          }
     )


class PropertyLedgerResponse(CamelModel):
     property_id: int
     period: str
     due_cents: int
     paid_cents: int
     outstanding_cents: int
     entries: List[LedgerEntryResponse] = []
