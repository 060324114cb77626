from .catalog import (
    EventKind,
    EventFieldSchema,
    EVENT_FIELD_SCHEMAS,
    EVENT_SPECIFIC_FIELDS,
    EventType,
    Package,
    PaymentMethod,
    PaymentScheduleItem,
    PackagePaymentMethod,
    ContractTemplate
)
from .contract import Contract, ContractStatus
from .profile import UserProfile, Photographer, BusinessInfo
from .payment import Payment, PaymentStatus

__all__ = [
    "EventKind",
    "EventFieldSchema",
    "EVENT_FIELD_SCHEMAS",
    "EVENT_SPECIFIC_FIELDS",
    "EventType",
    "Package",
    "PaymentMethod",
    "PaymentScheduleItem",
    "PackagePaymentMethod",
    "ContractTemplate",
    "Contract",
    "ContractStatus",
    "UserProfile",
    "Photographer",
    "BusinessInfo",
    "Payment",
    "PaymentStatus"
]
