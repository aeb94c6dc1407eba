from .base import OkResponse
from .property import (
     TenantSchema,
     LeaseSchema,
     PropertyCreate,
     PropertyResponse,
     PropertyDeleteResponse,
)
from .ledger import (
     LedgerEntryResponse,
     PeriodRequest,
     PaymentCreate,
     AdjustmentCreate,
     ChargeGenerationResponse,
     LateFeeGenerationResponse,
     RentSummaryResponse,
     PropertyLedgerResponse,
)

__all__ = [
     "OkResponse",
     "TenantSchema",
     "LeaseSchema",
     "PropertyCreate",
     "PropertyResponse",
     "PropertyDeleteResponse",
     "LedgerEntryResponse",
     "PeriodRequest",
     "PaymentCreate",
     "AdjustmentCreate",
     "ChargeGenerationResponse",
     "LateFeeGenerationResponse",
     "RentSummaryResponse",
     "PropertyLedgerResponse",
]
