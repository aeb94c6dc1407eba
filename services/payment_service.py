"""
Payment and adjustment recording.

Payments are stored as negative PAYMENT/RENT entries. The period comes
from the posting timestamp. There is no upper bound: an overpayment just
drives outstanding to zero in the aggregator.
"""
import logging
from datetime import datetime
from typing import Optional, Union

from exceptions import NotFoundError, ValidationError
from models import EntrySubType, EntryType, LedgerEntry
from repositories import LedgerRepository, PropertyRepository
from utils.money import MAX_CENTS, dollars_to_cents, ensure_utc, period_from_date, utc_now, validate_period

logger = logging.getLogger(__name__)

Amount = Union[str, int, float, None]


def _require_property(properties: PropertyRepository, property_id: Optional[int]):
     if property_id is None or property_id == "":
          raise ValidationError("propertyId is required")
     prop = properties.get(property_id)
     if prop is None:
          raise NotFoundError("Property not found")
     return prop


def record_payment(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     property_id: Optional[int],
     amount_dollars: Amount,
     posted_at: Optional[datetime] = None
) -> LedgerEntry:
     """
     Append a rent payment for a property.

     Raises:
          ValidationError: missing property id, or amount not a positive number
          NotFoundError: property doesn't exist
     """
     if property_id is None or property_id == "":
          raise ValidationError("propertyId is required")

     cents = dollars_to_cents(amount_dollars)
     if cents is None or cents <= 0:
          raise ValidationError("amountDollars must be a positive number")
     if cents > MAX_CENTS:
          raise ValidationError("amountDollars is too large")

     prop = _require_property(properties, property_id)

     effective = ensure_utc(posted_at) if posted_at is not None else utc_now()
     entry = ledger.create(
          period=period_from_date(effective),
          property_id=prop.id,
          entry_type=EntryType.PAYMENT,
          sub_type=EntrySubType.RENT,
          amount_cents=-abs(cents),
          posted_at=effective,
     )
     logger.info("Recorded payment of %d cents for property %s (%s)", cents, prop.id, entry.period)
     return entry


def record_adjustment(
     properties: PropertyRepository,
     ledger: LedgerRepository,
     property_id: Optional[int],
     amount_dollars: Amount,
     period: Optional[str] = None,
     posted_at: Optional[datetime] = None,
     sub_type: Union[EntrySubType, str, None] = EntrySubType.RENT
) -> LedgerEntry:
     """
     Append a signed ADJUSTMENT. Positive raises what is due, negative
     counts as paid. The period defaults to the posting timestamp's month.
     """
     cents = dollars_to_cents(amount_dollars)
     if cents is None or cents == 0:
          raise ValidationError("amountDollars must be a non-zero number")
     if abs(cents) > MAX_CENTS:
          raise ValidationError("amountDollars is too large")

     try:
          sub_type = EntrySubType(sub_type or EntrySubType.RENT)
     except ValueError:
          raise ValidationError("subType must be RENT or LATE_FEE")

     prop = _require_property(properties, property_id)

     effective = ensure_utc(posted_at) if posted_at is not None else utc_now()
     entry_period = validate_period(period) if period else period_from_date(effective)

     entry = ledger.create(
          period=entry_period,
          property_id=prop.id,
          entry_type=EntryType.ADJUSTMENT,
          sub_type=sub_type,
          amount_cents=cents,
          posted_at=effective,
     )
     logger.info("Recorded adjustment of %d cents for property %s (%s)", cents, prop.id, entry_period)
     return entry
