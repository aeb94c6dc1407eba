"""
Property Service - business rules for properties and their current lease.

Keeps address and lease checks out of the API layer; persistence goes
through a PropertyRepository.
"""
import logging
from typing import Any, List, Mapping, Optional

from exceptions import NotFoundError, ValidationError
from models import Property
from repositories import PropertyRepository

logger = logging.getLogger(__name__)


class PropertyService:
     """Service class for property-related business logic."""

     @staticmethod
     def list_properties(properties: PropertyRepository) -> List[Property]:
          return properties.list_properties()

     @staticmethod
     def get_property(properties: PropertyRepository, property_id: int) -> Property:
          prop = properties.get(property_id)
          if prop is None:
               raise NotFoundError("Property not found")
          return prop

     @staticmethod
     def create_property(
          properties: PropertyRepository,
          address: Optional[str],
          lease: Optional[Mapping[str, Any]] = None
     ) -> Property:
          """
          Create a property, optionally already leased.

          Args:
               properties: property store
               address: mailing address, required and unique
               lease: lease fields (see schemas.property.LeaseSchema)

          Raises:
               ValidationError: address missing or blank
               ConflictError: address already used by another property
          """
          address = (address or "").strip()
          if not address:
               raise ValidationError("address is required")
          if lease is not None:
               PropertyService.validate_lease(lease)

          prop = properties.create(address, lease)
          logger.info("Created property %s (%s)", prop.id, "occupied" if prop.is_occupied else "vacant")
          return prop

     @staticmethod
     def validate_lease(lease: Mapping[str, Any]) -> None:
          start, end = lease.get("start_date"), lease.get("end_date")
          if start and end and end < start:
               raise ValidationError("endDate must not be before startDate")
          due_day = lease.get("due_day")
          if due_day is not None and not 1 <= due_day <= 31:
               raise ValidationError("dueDay must be between 1 and 31")
          for name in ("rent_cents", "deposit_cents", "late_fee_amount_cents"):
               value = lease.get(name)
               if value is not None and value < 0:
                    raise ValidationError(f"{name} must not be negative")

     @staticmethod
     def set_lease(
          properties: PropertyRepository,
          property_id: int,
          lease: Mapping[str, Any]
     ) -> Property:
          PropertyService.validate_lease(lease)
          prop = properties.set_lease(property_id, lease)
          if prop is None:
               raise NotFoundError("Property not found")
          logger.info("Set lease on property %s", property_id)
          return prop

     @staticmethod
     def end_lease(properties: PropertyRepository, property_id: int) -> Property:
          prop = properties.clear_lease(property_id)
          if prop is None:
               raise NotFoundError("Property not found")
          logger.info("Property %s is now vacant", property_id)
          return prop

     @staticmethod
     def delete_property(properties: PropertyRepository, property_id: int) -> int:
          """
          Delete a property and all of its ledger entries.

          Returns:
               Number of ledger entries removed
          """
          removed = properties.delete(property_id)
          if removed is None:
               raise NotFoundError("Property not found")
          logger.info("Deleted property %s and %d ledger entries", property_id, removed)
          return removed
