"""
Controle Fotógrafo - Auth Service
Cadastro, login, logout e sessão no serviço de autenticação do backend
"""
import enum
import logging
from typing import Callable, List, Optional

import httpx
from pydantic import BaseModel, Field

from app.core.config import BackendCredentials
from app.core.exceptions import AuthError, BackendError
from .client import raise_for_backend_error

logger = logging.getLogger(__name__)

INVALID_REFRESH_MESSAGES = ("Refresh Token Not Found", "Invalid Refresh Token")


class AuthUser(BaseModel):
    id: str
    email: Optional[str] = None
    user_metadata: dict = Field(default_factory=dict)

    class Config:
        extra = "ignore"


class AuthSession(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    expires_in: Optional[int] = None
    user: AuthUser

    class Config:
        extra = "ignore"


class AuthChangeEvent(str, enum.Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    TOKEN_INVALID = "TOKEN_INVALID"


AuthListener = Callable[[AuthChangeEvent, Optional[AuthSession]], None]


class Subscription:
    """Handle devolvido por AuthEvents.subscribe"""

    def __init__(self, events: "AuthEvents", listener: AuthListener):
        self._events = events
        self._listener = listener

    def unsubscribe(self):
        self._events._remove(self._listener)


class AuthEvents:
    """Fluxo de notificações de login/logout"""

    def __init__(self):
        self._listeners: List[AuthListener] = []

    def subscribe(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove(self, listener: AuthListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: AuthChangeEvent, session: Optional[AuthSession] = None):
        email = session.user.email if session else None
        logger.info(f"Mudança de autenticação: {event.value} {email or 'Nenhum usuário'}")
        for listener in list(self._listeners):
            try:
                listener(event, session)
            except Exception as e:
                logger.error(f"Erro em listener de autenticação: {e}")


class AuthService:
    """Wrapper fino sobre os endpoints /auth/v1 do backend"""

    def __init__(self, credentials: BackendCredentials, http: httpx.AsyncClient, events: AuthEvents):
        self.credentials = credentials
        self.http = http
        self.events = events

    def _headers(self, access_token: Optional[str] = None) -> dict:
        return {
            "apikey": self.credentials.anon_key,
            "Authorization": f"Bearer {access_token or self.credentials.anon_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, path: str, json: Optional[dict] = None, params: Optional[dict] = None,
                    access_token: Optional[str] = None) -> httpx.Response:
        try:
            return await self.http.post(
                f"{self.credentials.auth_url}{path}",
                json=json,
                params=params,
                headers=self._headers(access_token)
            )
        except httpx.HTTPError as e:
            logger.error(f"Erro de conexão com o serviço de autenticação: {e}")
            raise BackendError("Erro de conexão com o serviço de autenticação") from e

    async def sign_up(self, email: str, password: str, metadata: Optional[dict] = None) -> AuthUser:
        """Cria a conta; o perfil (users/photographers) é criado pelo chamador"""
        logger.info(f"Tentando criar conta: {email}")
        response = await self._post("/signup", json={
            "email": email,
            "password": password,
            "data": metadata or {},
        })
        raise_for_backend_error(response)
        data = response.json()
        # Com confirmação de email desativada, o backend já devolve uma sessão
        user_data = data.get("user") or data
        return AuthUser.model_validate(user_data)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        logger.info(f"Tentando fazer login: {email}")
        response = await self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password}
        )
        if response.status_code in (400, 401):
            raise AuthError("Email ou senha inválidos")
        raise_for_backend_error(response)

        session = AuthSession.model_validate(response.json())
        self.events.emit(AuthChangeEvent.SIGNED_IN, session)
        return session

    async def refresh_session(self, refresh_token: str) -> Optional[AuthSession]:
        """Renova a sessão; token de refresh inválido limpa a sessão e devolve None"""
        response = await self._post(
            "/token",
            params={"grant_type": "refresh_token"},
            json={"refresh_token": refresh_token}
        )
        if response.status_code in (400, 401):
            message = response.text
            if any(m in message for m in INVALID_REFRESH_MESSAGES):
                logger.info("Token de refresh inválido, limpando sessão...")
                self.events.emit(AuthChangeEvent.TOKEN_INVALID, None)
                self.events.emit(AuthChangeEvent.SIGNED_OUT, None)
                return None
        raise_for_backend_error(response)

        session = AuthSession.model_validate(response.json())
        self.events.emit(AuthChangeEvent.TOKEN_REFRESHED, session)
        return session

    async def sign_out(self, access_token: str):
        logger.info("Fazendo logout...")
        response = await self._post("/logout", access_token=access_token)
        # Token já expirado conta como logout concluído
        if response.status_code not in (401, 403):
            raise_for_backend_error(response)
        self.events.emit(AuthChangeEvent.SIGNED_OUT, None)
        logger.info("Logout realizado com sucesso")

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Usuário da sessão atual, ou None se o token não for mais válido"""
        try:
            response = await self.http.get(
                f"{self.credentials.auth_url}/user",
                headers=self._headers(access_token)
            )
        except httpx.HTTPError as e:
            logger.error(f"Erro ao verificar sessão: {e}")
            raise BackendError("Erro ao verificar autenticação") from e

        if response.status_code in (401, 403):
            self.events.emit(AuthChangeEvent.TOKEN_INVALID, None)
            return None
        raise_for_backend_error(response)
        return AuthUser.model_validate(response.json())
