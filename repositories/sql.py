"""
SQLAlchemy-backed stores.

Repositories flush but never commit; the request's session (see
database.get_session) owns the transaction. Every insert runs inside a
SAVEPOINT so that a constraint violation only discards that one row.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import ConflictError, DuplicateEntryError, StoreError
from models import EntrySubType, EntryType, Lease, LedgerEntry, Property
from .interface import LedgerRepository, PropertyRepository

logger = logging.getLogger(__name__)

_LEASE_FIELDS = (
     "start_date",
     "end_date",
     "due_day",
     "rent_cents",
     "deposit_cents",
     "late_fee_percent",
     "late_fee_amount_cents",
     "grace_days",
)


@contextmanager
def _store_errors(action: str):
     """Re-raise SQLAlchemy failures as StoreError."""
     try:
          yield
     except SQLAlchemyError as exc:
          logger.error("Store failure while trying to %s: %s", action, exc)
          raise StoreError(f"Failed to {action}") from exc


def _lease_columns(lease: Mapping[str, Any]) -> dict:
     values = {name: lease[name] for name in _LEASE_FIELDS if lease.get(name) is not None}
     tenant = lease.get("tenant") or {}
     values["tenant_full_name"] = tenant.get("full_name")
     values["tenant_phone"] = tenant.get("phone")
     values["tenant_email"] = tenant.get("email")
     return values


class SqlPropertyRepository(PropertyRepository):

     def __init__(self, db: Session):
          self.db = db

     def list_properties(self) -> List[Property]:
          with _store_errors("list properties"):
               return self.db.query(Property).order_by(Property.id).all()

     def list_occupied(self) -> List[Property]:
          with _store_errors("list occupied properties"):
               return (
                    self.db.query(Property)
                    .filter(Property.current_lease.has())
                    .order_by(Property.id)
                    .all()
               )

     def get(self, property_id: int) -> Optional[Property]:
          with _store_errors("load property"):
               return self.db.get(Property, property_id)

     def create(self, address: str, lease: Optional[Mapping[str, Any]] = None) -> Property:
          prop = Property(address=address)
          if lease is not None:
               prop.current_lease = Lease(**_lease_columns(lease))
          try:
               with self.db.begin_nested():
                    self.db.add(prop)
          except IntegrityError as exc:
               raise ConflictError(f"A property with address '{address}' already exists") from exc
          except SQLAlchemyError as exc:
               logger.error("Store failure while trying to create property: %s", exc)
               raise StoreError("Failed to create property") from exc
          return prop

     def set_lease(self, property_id: int, lease: Mapping[str, Any]) -> Optional[Property]:
          prop = self.get(property_id)
          if prop is None:
               return None
          with _store_errors("update lease"):
               if prop.current_lease is None:
                    prop.current_lease = Lease(**_lease_columns(lease))
               else:
                    for name, value in _lease_columns(lease).items():
                         setattr(prop.current_lease, name, value)
               self.db.flush()
          return prop

     def clear_lease(self, property_id: int) -> Optional[Property]:
          prop = self.get(property_id)
          if prop is None:
               return None
          with _store_errors("end lease"):
               prop.current_lease = None
               self.db.flush()
          return prop

     def delete(self, property_id: int) -> Optional[int]:
          prop = self.get(property_id)
          if prop is None:
               return None
          with _store_errors("delete property"):
               removed = (
                    self.db.query(LedgerEntry)
                    .filter(LedgerEntry.property_id == property_id)
                    .delete(synchronize_session=False)
               )
               self.db.delete(prop)
               self.db.flush()
          return removed


class SqlLedgerRepository(LedgerRepository):

     def __init__(self, db: Session):
          self.db = db

     def list_entries(
          self,
          period: Optional[str] = None,
          property_id: Optional[int] = None
     ) -> List[LedgerEntry]:
          with _store_errors("list ledger entries"):
               query = self.db.query(LedgerEntry)
               if period is not None:
                    query = query.filter(LedgerEntry.period == period)
               if property_id is not None:
                    query = query.filter(LedgerEntry.property_id == property_id)
               return query.order_by(LedgerEntry.posted_at.desc(), LedgerEntry.id.desc()).all()

     def get(self, entry_id: int) -> Optional[LedgerEntry]:
          with _store_errors("load ledger entry"):
               return self.db.get(LedgerEntry, entry_id)

     def exists(
          self,
          period: str,
          property_id: int,
          entry_type: EntryType,
          sub_type: Optional[EntrySubType] = None
     ) -> bool:
          with _store_errors("look up ledger entry"):
               query = self.db.query(LedgerEntry.id).filter(
                    LedgerEntry.period == period,
                    LedgerEntry.property_id == property_id,
                    LedgerEntry.type == entry_type,
               )
               if sub_type is not None:
                    query = query.filter(LedgerEntry.sub_type == sub_type)
               return query.first() is not None

     def create(
          self,
          period: str,
          property_id: int,
          entry_type: EntryType,
          sub_type: EntrySubType,
          amount_cents: int,
          posted_at: datetime
     ) -> LedgerEntry:
          entry = LedgerEntry(
               period=period,
               property_id=property_id,
               type=entry_type,
               sub_type=sub_type,
               amount_cents=amount_cents,
               posted_at=posted_at,
          )
          try:
               with self.db.begin_nested():
                    self.db.add(entry)
          except IntegrityError as exc:
               raise DuplicateEntryError(
                    f"{entry_type.value}/{sub_type.value} entry already exists "
                    f"for property {property_id} in {period}"
               ) from exc
          except SQLAlchemyError as exc:
               logger.error("Store failure while trying to create ledger entry: %s", exc)
               raise StoreError("Failed to create ledger entry") from exc
          return entry

     def delete(self, entry_id: int) -> bool:
          entry = self.get(entry_id)
          if entry is None:
               return False
          with _store_errors("delete ledger entry"):
               self.db.delete(entry)
               self.db.flush()
          return True
