from .auth import SignUpRequest, LoginRequest, RefreshRequest, SessionUser, SessionResponse
from .config import BackendConfigRequest, ConfigStatusResponse
from .contract import (
    ContractForm,
    ContractStatusUpdate,
    ContractListResponse,
    RenderedContractResponse,
    ClientLinkResponse
)
from .quote import QuoteRequest, QuoteResponse, EventFieldsResponse
from .profile import ProfileUpdate
from .settings import (
    EventTypeCreate,
    EventTypeUpdate,
    PackageCreate,
    PackageUpdate,
    PaymentMethodCreate,
    PaymentMethodUpdate,
    ContractTemplateCreate,
    ContractTemplateUpdate,
    BusinessInfoUpdate
)

__all__ = [
    "SignUpRequest",
    "LoginRequest",
    "RefreshRequest",
    "SessionUser",
    "SessionResponse",
    "BackendConfigRequest",
    "ConfigStatusResponse",
    "ContractForm",
    "ContractStatusUpdate",
    "ContractListResponse",
    "RenderedContractResponse",
    "ClientLinkResponse",
    "QuoteRequest",
    "QuoteResponse",
    "EventFieldsResponse",
    "ProfileUpdate",
    "EventTypeCreate",
    "EventTypeUpdate",
    "PackageCreate",
    "PackageUpdate",
    "PaymentMethodCreate",
    "PaymentMethodUpdate",
    "ContractTemplateCreate",
    "ContractTemplateUpdate",
    "BusinessInfoUpdate"
]
