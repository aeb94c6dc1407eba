"""
Abstract store interface for properties and ledger entries.

The rent generators, the aggregator callers and the payment recorder are
written against these interfaces only. The SQLAlchemy implementation lives
in repositories.sql; another backend only has to honour the same contract,
in particular the atomic uniqueness rules on ledger inserts.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, List, Mapping, Optional

from models import EntrySubType, EntryType, LedgerEntry, Property


class PropertyRepository(ABC):

     @abstractmethod
     def list_properties(self) -> List[Property]:
          """All properties, oldest first."""

     @abstractmethod
     def list_occupied(self) -> List[Property]:
          """Properties that currently have a lease, oldest first."""

     @abstractmethod
     def get(self, property_id: int) -> Optional[Property]:
          """Return the property, or None if it doesn't exist."""

     @abstractmethod
     def create(self, address: str, lease: Optional[Mapping[str, Any]] = None) -> Property:
          """
          Create a property, optionally with its current lease.

          Raises:
               ConflictError: another property already has this address
               StoreError: persistence failure
          """

     @abstractmethod
     def set_lease(self, property_id: int, lease: Mapping[str, Any]) -> Optional[Property]:
          """Replace the current lease. Returns None if the property doesn't exist."""

     @abstractmethod
     def clear_lease(self, property_id: int) -> Optional[Property]:
          """Remove the current lease (property becomes vacant)."""

     @abstractmethod
     def delete(self, property_id: int) -> Optional[int]:
          """
          Delete a property together with every ledger entry referencing it,
          in one transaction.

          Returns:
               Number of ledger entries removed, or None if the property
               doesn't exist.
          """


class LedgerRepository(ABC):

     @abstractmethod
     def list_entries(
          self,
          period: Optional[str] = None,
          property_id: Optional[int] = None
     ) -> List[LedgerEntry]:
          """Entries matching the filters, newest posted_at first."""

     @abstractmethod
     def get(self, entry_id: int) -> Optional[LedgerEntry]:
          pass

     @abstractmethod
     def exists(
          self,
          period: str,
          property_id: int,
          entry_type: EntryType,
          sub_type: Optional[EntrySubType] = None
     ) -> bool:
          pass

     @abstractmethod
     def create(
          self,
          period: str,
          property_id: int,
          entry_type: EntryType,
          sub_type: EntrySubType,
          amount_cents: int,
          posted_at: datetime
     ) -> LedgerEntry:
          """
          Insert one entry atomically.

          Raises:
               DuplicateEntryError: the insert violates a uniqueness rule
                    (second CHARGE/RENT or LATE_FEE for the same period
                    and property). Nothing is written.
               StoreError: persistence failure
          """

     @abstractmethod
     def delete(self, entry_id: int) -> bool:
          """Delete one entry. Returns False if it doesn't exist."""
