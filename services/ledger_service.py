"""
Ledger read and delete operations.

Entries are never updated: they are listed, summarized through the
aggregator, or deleted outright (no cascade from a single entry).
"""
import logging
from typing import List, Optional, Tuple

from exceptions import NotFoundError
from models import LedgerEntry, Property
from repositories import LedgerRepository, PropertyRepository
from services.ledger_aggregator import RentBalance, RentSummary, summarize_rent
from utils.money import validate_period

logger = logging.getLogger(__name__)


def list_activities(
     ledger: LedgerRepository,
     period: Optional[str] = None,
     property_id: Optional[int] = None
) -> List[LedgerEntry]:
     """Entries for the period (all periods when None), newest first."""
     if period:
          period = validate_period(period)
     return ledger.list_entries(period=period or None, property_id=property_id)


def summarize_period(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     period: str
) -> Tuple[RentSummary, List[Property]]:
     """
     Rent due / paid / outstanding for every occupied property in `period`.

     Returns:
          (summary, occupied properties) - the properties are returned so
          callers can label rows without another lookup.
     """
     period = validate_period(period)
     occupied = properties.list_occupied()
     entries = ledger.list_entries(period=period)
     summary = summarize_rent(entries, [p.id for p in occupied], period)
     return summary, occupied


def property_ledger(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     property_id: int,
     period: str
) -> Tuple[RentBalance, List[LedgerEntry]]:
     """
     Balance and entries of one property for one period.

     A vacant property reports zero balances: the aggregator only counts
     occupied properties.
     """
     period = validate_period(period)
     prop = properties.get(property_id)
     if prop is None:
          raise NotFoundError("Property not found")

     entries = ledger.list_entries(period=period, property_id=property_id)
     occupied_ids = [prop.id] if prop.is_occupied else []
     balance = summarize_rent(entries, occupied_ids, period).balance_for(prop.id)
     return balance, entries


def delete_entry(ledger: LedgerRepository, entry_id: int) -> None:
     if not ledger.delete(entry_id):
          raise NotFoundError("Ledger entry not found")
     logger.info("Deleted ledger entry %s", entry_id)
