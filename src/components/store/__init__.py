"""
Store component - Entity collections and composite mutations.

Owns every collection of the console and the profile singleton.
"""

from ._impl import (
    COLLECTION_NAMES,
    AppStore,
    CollectionHandle,
    ProfileHandle,
)
from .component import (
    run,
    run_add_lead,
    run_record_transaction,
    run_settle_payment,
)
from .models import (
    AddLeadInput,
    AddLeadOutput,
    RecordTransactionInput,
    RecordTransactionOutput,
    SettlePaymentInput,
    SettlePaymentOutput,
    StoreValidationError,
)
from .ports import ClockPort, CollectionPort, ProfilePort, StoreListener

__all__ = [
    # Entry points
    "run",
    "run_add_lead",
    "run_record_transaction",
    "run_settle_payment",
    # Store
    "AppStore",
    "CollectionHandle",
    "ProfileHandle",
    "COLLECTION_NAMES",
    # Models
    "AddLeadInput",
    "AddLeadOutput",
    "RecordTransactionInput",
    "RecordTransactionOutput",
    "SettlePaymentInput",
    "SettlePaymentOutput",
    "StoreValidationError",
    # Ports
    "ClockPort",
    "CollectionPort",
    "ProfilePort",
    "StoreListener",
]
