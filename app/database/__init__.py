from .client import BackendClient, TableQuery, probe_backend
from .auth import AuthService, AuthEvents, AuthSession, AuthUser, AuthChangeEvent
from .session import (
    BackendConnection,
    get_connection,
    get_backend,
    get_auth_service,
    bearer_token
)

__all__ = [
    "BackendClient",
    "TableQuery",
    "probe_backend",
    "AuthService",
    "AuthEvents",
    "AuthSession",
    "AuthUser",
    "AuthChangeEvent",
    "BackendConnection",
    "get_connection",
    "get_backend",
    "get_auth_service",
    "bearer_token"
]
