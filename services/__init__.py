from .property_service import PropertyService
from .ledger_aggregator import RentBalance, RentSummary, summarize_rent
from .charge_service import ChargeGenerationResult, generate_rent_charges
from .late_fee_service import LateFeeGenerationResult, generate_late_fees
from .payment_service import record_payment, record_adjustment
from .ledger_service import (
     list_activities,
     summarize_period,
     property_ledger,
     delete_entry,
)

__all__ = [
     "PropertyService",
     "RentBalance",
     "RentSummary",
     "summarize_rent",
     "ChargeGenerationResult",
     "generate_rent_charges",
     "LateFeeGenerationResult",
     "generate_late_fees",
     "record_payment",
     "record_adjustment",
     "list_activities",
     "summarize_period",
     "property_ledger",
     "delete_entry",
]
