from .config import (
    settings,
    get_settings,
    Settings,
    BackendCredentials,
    CredentialStore,
    resolve_backend_credentials,
    validate_credentials
)
from .exceptions import (
    AppError,
    ConfigurationError,
    BackendError,
    AuthError,
    NotFoundError,
    TemplateNotFoundError,
    SelectionError,
    CatalogLoadError,
    FormValidationError
)
from .rate_limit import limiter

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "BackendCredentials",
    "CredentialStore",
    "resolve_backend_credentials",
    "validate_credentials",
    "AppError",
    "ConfigurationError",
    "BackendError",
    "AuthError",
    "NotFoundError",
    "TemplateNotFoundError",
    "SelectionError",
    "CatalogLoadError",
    "FormValidationError",
    "limiter"
]
