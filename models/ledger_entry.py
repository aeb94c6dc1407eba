"""
LedgerEntry model - one immutable financial event for a property and period.

Entries are create-only / delete-only. Sign convention:
CHARGE and LATE_FEE are positive, PAYMENT is negative, ADJUSTMENT either.

Two partial unique indexes guard the generators against double posting:
one CHARGE/RENT and one LATE_FEE per (period, property).
"""
import enum
from sqlalchemy import Column, Integer, String, ForeignKey, Enum, Index, text
from sqlalchemy.orm import relationship
from .base import Base, UTCDateTime, utc_now


class EntryType(str, enum.Enum):
     CHARGE = "CHARGE"
     PAYMENT = "PAYMENT"
     LATE_FEE = "LATE_FEE"
     ADJUSTMENT = "ADJUSTMENT"


class EntrySubType(str, enum.Enum):
     RENT = "RENT"
     LATE_FEE = "LATE_FEE"


_RENT_CHARGE_ONLY = text("type = 'CHARGE' AND sub_type = 'RENT'")
_LATE_FEE_ONLY = text("type = 'LATE_FEE'")


class LedgerEntry(Base):
     __tablename__ = "ledger_entries"
     __table_args__ = (
          Index(
               "uq_ledger_entries_rent_charge",
               "period",
               "property_id",
               unique=True,
               sqlite_where=_RENT_CHARGE_ONLY,
               postgresql_where=_RENT_CHARGE_ONLY,
               mssql_where=_RENT_CHARGE_ONLY,
          ),
          Index(
               "uq_ledger_entries_late_fee",
               "period",
               "property_id",
               unique=True,
               sqlite_where=_LATE_FEE_ONLY,
               postgresql_where=_LATE_FEE_ONLY,
               mssql_where=_LATE_FEE_ONLY,
          ),
          Index("ix_ledger_entries_period_property", "period", "property_id"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     period = Column(String(7), nullable=False, index=True)  # YYYY-MM
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     type = Column(
          Enum(EntryType, name="ledger_entry_type", native_enum=False, create_constraint=True),
          nullable=False
     )
     sub_type = Column(
          Enum(EntrySubType, name="ledger_entry_sub_type", native_enum=False, create_constraint=True),
          nullable=False
     )
     amount_cents = Column(Integer, nullable=False)
     posted_at = Column(UTCDateTime, nullable=False, index=True)

     created_at = Column(UTCDateTime, default=utc_now, nullable=False)

     # Relationships
     property = relationship("Property", back_populates="ledger_entries")

     def __repr__(self):
          return (
               f"<LedgerEntry(id={self.id}, period='{self.period}', property_id={self.property_id}, "
               f"type='{self.type.value}', amount_cents={self.amount_cents})>"
          )
