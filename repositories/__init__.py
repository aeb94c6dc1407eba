from .interface import PropertyRepository, LedgerRepository
from .sql import SqlPropertyRepository, SqlLedgerRepository

__all__ = [
     "PropertyRepository",
     "LedgerRepository",
     "SqlPropertyRepository",
     "SqlLedgerRepository",
]
