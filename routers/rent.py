"""
Rent ledger API routes.

- GET    /api/rent/activities          entries, newest first
- GET    /api/rent/summary             due / paid / outstanding for a period
- POST   /api/rent/generate-charges    monthly rent charges (idempotent)
- POST   /api/rent/generate-late-fees  late fees on outstanding rent
- POST   /api/rent/payments            record a payment
- POST   /api/rent/adjustments         record a signed adjustment
- DELETE /api/rent/activities/{id}     delete one entry
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from repositories import LedgerRepository, PropertyRepository
from schemas.base import OkResponse
from schemas.ledger import (
     AdjustmentCreate,
     ChargeGenerationResponse,
     LateFeeGenerationResponse,
     LedgerEntryResponse,
     PaymentCreate,
     PeriodRequest,
     PropertyBalanceResponse,
     RentSummaryResponse,
     SkippedPropertyResponse,
)
from services.charge_service import generate_rent_charges
from services.late_fee_service import generate_late_fees
from services.ledger_service import delete_entry, list_activities, summarize_period
from services.payment_service import record_adjustment, record_payment
from .dependencies import get_ledger_repository, get_property_repository

router = APIRouter(prefix="/api/rent", tags=["rent"])


def _skipped(items) -> List[SkippedPropertyResponse]:
     return [SkippedPropertyResponse(property_id=s.property_id, reason=s.reason) for s in items]


@router.get("/activities", response_model=List[LedgerEntryResponse], summary="List ledger entries")
def get_activities(
     period: Optional[str] = Query(None, description="YYYY-MM; all periods when omitted"),
     property_id: Optional[int] = Query(None, alias="propertyId"),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     return list_activities(ledger, period=period, property_id=property_id)


@router.get("/summary", response_model=RentSummaryResponse, summary="Rent totals for a period")
def get_summary(
     period: Optional[str] = Query(None, description="YYYY-MM"),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     """
     Rent-only totals for the period across occupied properties.
     Outstanding is clamped at zero per property before summing.
     `period` is required; a missing or malformed period is a 400.
     """
     summary, occupied = summarize_period(properties, ledger, period)
     addresses = {p.id: p.address for p in occupied}
     return RentSummaryResponse(
          period=summary.period,
          total_due=summary.total_due,
          total_paid=summary.total_paid,
          outstanding=summary.outstanding,
          properties=[
               PropertyBalanceResponse(
                    property_id=row.property_id,
                    address=addresses.get(row.property_id),
                    due_cents=row.due_cents,
                    paid_cents=row.paid_cents,
                    outstanding_cents=row.outstanding_cents,
               )
               for row in summary.ordered_rows()
          ],
     )


@router.post(
     "/generate-charges",
     response_model=ChargeGenerationResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Generate monthly rent charges"
)
def post_generate_charges(
     body: PeriodRequest,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     """
     Create one rent charge per occupied property for the period.
     Properties that already have one are reported under **skipped**.
     """
     result = generate_rent_charges(properties, ledger, body.period)
     db.commit()
     return ChargeGenerationResponse(
          period=result.period,
          created_count=result.created_count,
          skipped_count=result.skipped_count,
          created=[LedgerEntryResponse.model_validate(e) for e in result.created],
          skipped=_skipped(result.skipped),
     )


@router.post(
     "/generate-late-fees",
     response_model=LateFeeGenerationResponse,
     summary="Generate late fees"
)
def post_generate_late_fees(
     body: PeriodRequest,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     result = generate_late_fees(properties, ledger, body.period)
     db.commit()
     return LateFeeGenerationResponse(
          period=result.period,
          created_count=result.created_count,
          created=[LedgerEntryResponse.model_validate(e) for e in result.created],
          skipped=_skipped(result.skipped),
     )


@router.post(
     "/payments",
     response_model=LedgerEntryResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a rent payment"
)
def post_payment(
     body: PaymentCreate,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     """
     - **propertyId**: property paying rent
     - **amountDollars**: positive amount, e.g. "800.00"
     - **postedAt**: optional timestamp; its month is the payment's period
     """
     entry = record_payment(properties, ledger, body.property_id, body.amount_dollars, body.posted_at)
     db.commit()
     return entry


@router.post(
     "/adjustments",
     response_model=LedgerEntryResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a ledger adjustment"
)
def post_adjustment(
     body: AdjustmentCreate,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     entry = record_adjustment(
          properties,
          ledger,
          body.property_id,
          body.amount_dollars,
          period=body.period,
          posted_at=body.posted_at,
          sub_type=body.sub_type,
     )
     db.commit()
     return entry


@router.delete("/activities/{entry_id}", response_model=OkResponse, summary="Delete a ledger entry")
def delete_activity(
     entry_id: int,
     db: Session = Depends(get_session),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     delete_entry(ledger, entry_id)
     db.commit()
     return OkResponse(ok=True)
