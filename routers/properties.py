"""
Property API routes.

Properties carry at most one current lease. Deleting a property removes
its ledger entries in the same transaction.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from repositories import LedgerRepository, PropertyRepository
from schemas.ledger import LedgerEntryResponse, PropertyLedgerResponse
from schemas.property import LeaseSchema, PropertyCreate, PropertyDeleteResponse, PropertyResponse
from services.ledger_service import property_ledger
from services.property_service import PropertyService
from .dependencies import get_ledger_repository, get_property_repository

router = APIRouter(prefix="/api/properties", tags=["properties"])


def _lease_dict(lease: LeaseSchema) -> dict:
     return lease.model_dump(by_alias=False)


@router.get("", response_model=List[PropertyResponse], summary="List properties")
def list_properties(properties: PropertyRepository = Depends(get_property_repository)):
     return PropertyService.list_properties(properties)


@router.get("/{property_id}", response_model=PropertyResponse, summary="Get a property")
def get_property(
     property_id: int,
     properties: PropertyRepository = Depends(get_property_repository)
):
     return PropertyService.get_property(properties, property_id)


@router.post(
     "",
     response_model=PropertyResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property"
)
def create_property(
     body: PropertyCreate,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository)
):
     """
     Create a property.

     - **address**: mailing address, must be unique (409 otherwise)
     - **currentLease**: optional lease; omit for a vacant property
     """
     lease = _lease_dict(body.current_lease) if body.current_lease else None
     prop = PropertyService.create_property(properties, body.address, lease)
     db.commit()
     return prop


@router.delete("/{property_id}", response_model=PropertyDeleteResponse, summary="Delete a property")
def delete_property(
     property_id: int,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository)
):
     removed = PropertyService.delete_property(properties, property_id)
     db.commit()
     return PropertyDeleteResponse(ok=True, deleted_entries=removed)


@router.put("/{property_id}/lease", response_model=PropertyResponse, summary="Set the current lease")
def set_lease(
     property_id: int,
     body: LeaseSchema,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository)
):
     prop = PropertyService.set_lease(properties, property_id, _lease_dict(body))
     db.commit()
     return prop


@router.delete("/{property_id}/lease", response_model=PropertyResponse, summary="End the current lease")
def end_lease(
     property_id: int,
     db: Session = Depends(get_session),
     properties: PropertyRepository = Depends(get_property_repository)
):
     prop = PropertyService.end_lease(properties, property_id)
     db.commit()
     return prop


@router.get(
     "/{property_id}/ledger",
     response_model=PropertyLedgerResponse,
     summary="Rent balance and entries of one property for a period"
)
def get_property_ledger(
     property_id: int,
     period: str = Query(..., description="YYYY-MM"),
     properties: PropertyRepository = Depends(get_property_repository),
     ledger: LedgerRepository = Depends(get_ledger_repository)
):
     balance, entries = property_ledger(properties, ledger, property_id, period)
     return PropertyLedgerResponse(
          property_id=property_id,
          period=period.strip(),
          due_cents=balance.due_cents,
          paid_cents=balance.paid_cents,
          outstanding_cents=balance.outstanding_cents,
          entries=[LedgerEntryResponse.model_validate(e) for e in entries],
     )
