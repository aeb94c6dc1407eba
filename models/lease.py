from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, UTCDateTime, utc_now


class Lease(Base):
     """
     Lease model - the current rental agreement of a property.

     Owned by its property (one row per property, no life of its own).
     The tenant is embedded as plain columns. Money is integer cents.

     Late fee rule: late_fee_percent wins over late_fee_amount_cents when
     both are set; a percent above 1 means whole percent (5 -> 0.05).
     """
     __tablename__ = "leases"

     id = Column(Integer, primary_key=True, autoincrement=True)
     property_id = Column(
          Integer,
          ForeignKey("properties.id", ondelete="CASCADE"),
          nullable=False,
          unique=True,
          index=True
     )

     # Lease period
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)
     due_day = Column(Integer, nullable=False, default=1)  # 1-31, clamped per month

     # Pricing
     rent_cents = Column(Integer, nullable=False)
     deposit_cents = Column(Integer, nullable=False, default=0)

     # Late fee rule
     late_fee_percent = Column(Float, nullable=False, default=0)
     late_fee_amount_cents = Column(Integer, nullable=False, default=0)
     grace_days = Column(Integer, nullable=False, default=0)

     # Tenant
     tenant_full_name = Column(String(200), nullable=True)
     tenant_phone = Column(String(50), nullable=True)
     tenant_email = Column(String(255), nullable=True)

     # Timestamps
     created_at = Column(UTCDateTime, default=utc_now, nullable=False)
     updated_at = Column(UTCDateTime, onupdate=utc_now, nullable=True)

     # Must stay above the `property` relationship, which shadows the builtin
     @property
     def tenant(self):
          if not self.tenant_full_name:
               return None
          return {
               "full_name": self.tenant_full_name,
               "phone": self.tenant_phone or "",
               "email": self.tenant_email or "",
          }

     # Relationships
     property = relationship("Property", back_populates="current_lease")

     def __repr__(self):
          return f"<Lease(id={self.id}, property_id={self.property_id}, rent_cents={self.rent_cents})>"
