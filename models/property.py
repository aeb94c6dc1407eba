from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, UTCDateTime, utc_now


class Property(Base):
     """
     Property model - a rentable address.

     A property is occupied while it has a current lease and vacant
     otherwise. Deleting a property deletes its lease and every ledger
     entry that references it.
     """
     __tablename__ = "properties"

     id = Column(Integer, primary_key=True, autoincrement=True)
     address = Column(String(255), nullable=False, unique=True)

     # Timestamps
     created_at = Column(UTCDateTime, default=utc_now, nullable=False)
     updated_at = Column(UTCDateTime, onupdate=utc_now, nullable=True)

     # Relationships
     current_lease = relationship(
          "Lease",
          back_populates="property",
          uselist=False,
          cascade="all, delete-orphan",
          lazy="joined",
     )
     ledger_entries = relationship(
          "LedgerEntry",
          back_populates="property",
          cascade="all, delete-orphan",
          passive_deletes=True,
     )

     @property
     def is_occupied(self) -> bool:
          return self.current_lease is not None

     def __repr__(self):
          return f"<Property(id={self.id}, address='{self.address}')>"
