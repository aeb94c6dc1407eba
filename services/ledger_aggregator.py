"""
Rent ledger aggregation.

Turns the ledger entries of one period into due / paid / outstanding
figures per occupied property plus totals. The period summary, the
property detail view and the late-fee generator all go through
summarize_rent() so they can never disagree.

Only RENT sub-type entries count:
- CHARGE adds to due
- PAYMENT adds its magnitude to paid
- ADJUSTMENT adds to due when >= 0, otherwise its magnitude to paid

Outstanding is clamped at zero; an overpayment does not become a credit.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from models import EntrySubType, EntryType


@dataclass
class RentBalance:
     property_id: int
     due_cents: int = 0
     paid_cents: int = 0

     @property
     def outstanding_cents(self) -> int:
          return max(0, self.due_cents - self.paid_cents)


@dataclass
class RentSummary:
     period: Optional[str]
     rows: Dict[int, RentBalance] = field(default_factory=dict)

     @property
     def total_due(self) -> int:
          return sum(row.due_cents for row in self.rows.values())

     @property
     def total_paid(self) -> int:
          return sum(row.paid_cents for row in self.rows.values())

     @property
     def outstanding(self) -> int:
          return sum(row.outstanding_cents for row in self.rows.values())

     def balance_for(self, property_id: int) -> RentBalance:
          return self.rows.get(property_id) or RentBalance(property_id=property_id)

     def ordered_rows(self) -> List[RentBalance]:
          return [self.rows[pid] for pid in sorted(self.rows)]


def apply_entry(row: RentBalance, entry_type: EntryType, amount_cents: int) -> None:
     if entry_type == EntryType.CHARGE:
          row.due_cents += amount_cents
     elif entry_type == EntryType.PAYMENT:
          row.paid_cents += abs(amount_cents)
     elif entry_type == EntryType.ADJUSTMENT:
          if amount_cents >= 0:
               row.due_cents += amount_cents
          else:
               row.paid_cents += abs(amount_cents)


def summarize_rent(
     entries: Iterable,
     occupied_property_ids: Iterable[int],
     period: Optional[str] = None
) -> RentSummary:
     """
     Aggregate rent entries for the given occupied properties.

     Every occupied property gets a row even with no activity. Entries for
     properties outside the occupied set, entries of another period (when
     `period` is given) and non-RENT entries are ignored.

     Args:
          entries: ledger entries (anything with period, property_id, type,
               sub_type and amount_cents attributes)
          occupied_property_ids: properties to report on
          period: optional "YYYY-MM" the entries must belong to
     """
     summary = RentSummary(period=period)
     for property_id in occupied_property_ids:
          summary.rows[property_id] = RentBalance(property_id=property_id)

     for entry in entries:
          if entry.sub_type != EntrySubType.RENT:
               continue
          if period is not None and entry.period != period:
               continue
          row = summary.rows.get(entry.property_id)
          if row is None:
               continue
          apply_entry(row, entry.type, entry.amount_cents)

     return summary
