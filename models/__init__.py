from .base import Base
from .property import Property
from .lease import Lease
from .ledger_entry import LedgerEntry, EntryType, EntrySubType

__all__ = [
     "Base",
     "Property",
     "Lease",
     "LedgerEntry",
     "EntryType",
     "EntrySubType",
]
