"""
Monthly rent charge generation.

One CHARGE/RENT entry per occupied property per period, posted at
09:00 UTC on the 1st. Safe to re-run: the ledger store rejects a second
charge for the same (period, property) and that rejection is reported as
a skip, not an error.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from exceptions import DuplicateEntryError, StoreError
from models import EntrySubType, EntryType, LedgerEntry
from repositories import LedgerRepository, PropertyRepository
from utils.money import is_positive_cents, posted_at_from_period, validate_period

logger = logging.getLogger(__name__)

SKIP_INVALID_RENT = "missing_or_invalid_rentCents"
SKIP_ALREADY_EXISTS = "already_exists"
SKIP_STORE_ERROR = "store_error"


@dataclass
class SkippedProperty:
     property_id: int
     reason: str


@dataclass
class ChargeGenerationResult:
     period: str
     created: List[LedgerEntry] = field(default_factory=list)
     skipped: List[SkippedProperty] = field(default_factory=list)

     @property
     def created_count(self) -> int:
          return len(self.created)

     @property
     def skipped_count(self) -> int:
          return len(self.skipped)


def generate_rent_charges(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     period: str
) -> ChargeGenerationResult:
     """
     Post the rent charge for `period` on every occupied property.

     Raises:
          ValidationError: period is not a valid "YYYY-MM"
     """
     period = validate_period(period)
     posted_at = posted_at_from_period(period, 1)
     result = ChargeGenerationResult(period=period)

     for prop in properties.list_occupied():
          rent_cents = prop.current_lease.rent_cents
          if not is_positive_cents(rent_cents):
               logger.debug("Skipping rent charge for property %s: rent_cents=%r", prop.id, rent_cents)
               result.skipped.append(SkippedProperty(prop.id, SKIP_INVALID_RENT))
               continue

          try:
               entry = ledger.create(
                    period=period,
                    property_id=prop.id,
                    entry_type=EntryType.CHARGE,
                    sub_type=EntrySubType.RENT,
                    amount_cents=rent_cents,
                    posted_at=posted_at,
               )
          except DuplicateEntryError:
               logger.debug("Rent charge for property %s in %s already exists", prop.id, period)
               result.skipped.append(SkippedProperty(prop.id, SKIP_ALREADY_EXISTS))
               continue
          except StoreError:
               result.skipped.append(SkippedProperty(prop.id, SKIP_STORE_ERROR))
               continue

          result.created.append(entry)

     logger.info(
          "Rent charges for %s: %d created, %d skipped",
          period, result.created_count, result.skipped_count,
     )
     return result
