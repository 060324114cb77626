"""
Controle Fotógrafo - Backend Session
Conexão ativa com o backend hospedado e dependências do FastAPI
"""
import logging
from typing import Optional

import httpx
from fastapi import Request

from app.core.config import (
    BackendCredentials,
    CredentialStore,
    Settings,
    resolve_backend_credentials,
    settings,
    validate_credentials,
)
from app.core.exceptions import ConfigurationError
from .auth import AuthEvents, AuthService
from .client import BackendClient, probe_backend

logger = logging.getLogger(__name__)


class BackendConnection:
    """
    Credenciais resolvidas + cliente HTTP compartilhado.

    Criada uma vez no lifespan da aplicação; as credenciais podem ser
    trocadas em tempo de execução pela tela de configuração.
    """

    def __init__(
        self,
        app_settings: Optional[Settings] = None,
        store: Optional[CredentialStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.settings = app_settings or settings
        self.store = store or CredentialStore(self.settings.BACKEND_CREDENTIALS_FILE)
        self.http = httpx.AsyncClient(timeout=self.settings.BACKEND_TIMEOUT_SECONDS, transport=transport)
        self.events = AuthEvents()
        self.credentials: Optional[BackendCredentials] = None
        self.error: Optional[str] = None

    @property
    def is_configured(self) -> bool:
        return self.credentials is not None

    def configure(self, override: Optional[BackendCredentials] = None) -> Optional[BackendCredentials]:
        """Resolve credenciais (override > persistidas > ambiente) sem levantar erro"""
        try:
            self.credentials = resolve_backend_credentials(override, self.store, self.settings)
            self.error = None
        except ConfigurationError as e:
            self.credentials = None
            self.error = e.message
        return self.credentials

    async def activate(self, url: str, anon_key: str) -> BackendCredentials:
        """Valida, testa a conexão e só então persiste e ativa as novas credenciais"""
        candidate = validate_credentials(url, anon_key, source="persisted")
        await probe_backend(self.http, candidate)
        self.store.save(candidate)
        self.credentials = candidate
        self.error = None
        return candidate

    def forget(self):
        """Remove credenciais persistidas e volta para as do ambiente"""
        self.store.clear()
        self.configure()

    def _require_credentials(self) -> BackendCredentials:
        if self.credentials is None:
            raise ConfigurationError(self.error or "Credenciais do backend não configuradas")
        return self.credentials

    def client(self, access_token: Optional[str] = None) -> BackendClient:
        return BackendClient(self._require_credentials(), self.http, access_token=access_token)

    def auth(self) -> AuthService:
        return AuthService(self._require_credentials(), self.http, self.events)

    async def close(self):
        await self.http.aclose()


def get_connection(request: Request) -> BackendConnection:
    """Dependency: conexão ativa guardada no estado da aplicação"""
    return request.app.state.backend


def bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() == "bearer" and token:
        return token.strip()
    return None


def get_backend(request: Request) -> BackendClient:
    """Dependency: cliente das tabelas, com o token do usuário quando houver"""
    return get_connection(request).client(access_token=bearer_token(request))


def get_auth_service(request: Request) -> AuthService:
    return get_connection(request).auth()
