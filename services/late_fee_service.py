"""
Late fee generation.

For each occupied property whose lease carries a late fee rule, post at
most one LATE_FEE entry per period, and only while rent is outstanding
for that period. The fee is either a percentage of the outstanding rent
(rounded half-up to the cent) or a flat amount; the percentage wins when
both are configured.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from exceptions import DuplicateEntryError, StoreError
from models import EntrySubType, EntryType, Lease, LedgerEntry
from repositories import LedgerRepository, PropertyRepository
from services.charge_service import SKIP_ALREADY_EXISTS, SKIP_STORE_ERROR, SkippedProperty
from services.ledger_aggregator import summarize_rent
from utils.money import ensure_utc, is_positive_cents, round_half_up, utc_now, validate_period

logger = logging.getLogger(__name__)

SKIP_NO_OUTSTANDING = "no_outstanding_balance"
SKIP_INVALID_FEE = "invalid_fee_amount"


@dataclass
class LateFeeGenerationResult:
     period: str
     created: List[LedgerEntry] = field(default_factory=list)
     skipped: List[SkippedProperty] = field(default_factory=list)

     @property
     def created_count(self) -> int:
          return len(self.created)


def normalize_percent(value) -> Decimal:
     """0.05 stays 0.05; 5 means 5% and becomes 0.05."""
     if value is None:
          return Decimal("0")
     pct = Decimal(str(value))
     if not pct.is_finite() or pct <= 0:
          return Decimal("0")
     if pct > 1:
          pct = pct / 100
     return pct


def has_late_fee_rule(lease: Lease) -> bool:
     if normalize_percent(lease.late_fee_percent) > 0:
          return True
     return is_positive_cents(lease.late_fee_amount_cents)


def compute_late_fee(outstanding_cents: int, lease: Lease) -> Optional[int]:
     pct = normalize_percent(lease.late_fee_percent)
     if pct > 0:
          return round_half_up(Decimal(outstanding_cents) * pct)
     if is_positive_cents(lease.late_fee_amount_cents):
          return lease.late_fee_amount_cents
     return None


def generate_late_fees(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     period: str,
     now: Optional[datetime] = None
) -> LateFeeGenerationResult:
     """
     Post late fees for `period`.

     Args:
          period: "YYYY-MM"
          now: posting timestamp for the new entries (defaults to current time)

     Raises:
          ValidationError: period is not a valid "YYYY-MM"
     """
     period = validate_period(period)
     posted_at = ensure_utc(now) if now is not None else utc_now()
     result = LateFeeGenerationResult(period=period)

     for prop in properties.list_occupied():
          lease = prop.current_lease
          if not has_late_fee_rule(lease):
               continue

          if ledger.exists(period, prop.id, EntryType.LATE_FEE):
               result.skipped.append(SkippedProperty(prop.id, SKIP_ALREADY_EXISTS))
               continue

          entries = ledger.list_entries(period=period, property_id=prop.id)
          outstanding = summarize_rent(entries, [prop.id], period).balance_for(prop.id).outstanding_cents
          if outstanding <= 0:
               logger.debug("No late fee for property %s in %s: nothing outstanding", prop.id, period)
               result.skipped.append(SkippedProperty(prop.id, SKIP_NO_OUTSTANDING))
               continue

          fee_cents = compute_late_fee(outstanding, lease)
          if not is_positive_cents(fee_cents):
               result.skipped.append(SkippedProperty(prop.id, SKIP_INVALID_FEE))
               continue

          try:
               entry = ledger.create(
                    period=period,
                    property_id=prop.id,
                    entry_type=EntryType.LATE_FEE,
                    sub_type=EntrySubType.LATE_FEE,
                    amount_cents=fee_cents,
                    posted_at=posted_at,
               )
          except DuplicateEntryError:
               result.skipped.append(SkippedProperty(prop.id, SKIP_ALREADY_EXISTS))
               continue
          except StoreError:
               result.skipped.append(SkippedProperty(prop.id, SKIP_STORE_ERROR))
               continue

          result.created.append(entry)

     logger.info("Late fees for %s: %d created, %d skipped", period, result.created_count, len(result.skipped))
     return result
