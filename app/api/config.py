"""
Controle Fotógrafo - Config API
Status e troca das credenciais do backend em tempo de execução
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from app.database import AuthUser, BackendConnection, get_connection
from app.schemas import BackendConfigRequest, ConfigStatusResponse
from .auth import optional_security

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/config", tags=["Configuration"])


def _status(connection: BackendConnection) -> ConfigStatusResponse:
    credentials = connection.credentials
    if credentials is None:
        return ConfigStatusResponse(configured=False, error=connection.error, reconfigure=True)
    return ConfigStatusResponse(configured=True, source=credentials.source, url=credentials.url)


async def require_config_access(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    connection: BackendConnection = Depends(get_connection)
) -> Optional[AuthUser]:
    """
    Dependency das rotas que alteram o backend.

    Sem backend configurado a tela de configuração é aberta (não há
    como autenticar ainda); depois disso só um usuário logado altera.
    """
    if not connection.is_configured:
        return None

    user = None
    if credentials is not None:
        user = await connection.auth().get_user(credentials.credentials)
    if user is None:
        logger.warning("Tentativa de alterar o backend sem autenticação")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Autenticação necessária para alterar o backend"
        )
    return user


@router.get("/status", response_model=ConfigStatusResponse)
async def config_status(connection: BackendConnection = Depends(get_connection)):
    """Indica se o backend está configurado e de onde vieram as credenciais"""
    return _status(connection)


@router.post("/backend", response_model=ConfigStatusResponse)
async def configure_backend(
    request: BackendConfigRequest,
    connection: BackendConnection = Depends(get_connection),
    user: Optional[AuthUser] = Depends(require_config_access)
):
    """Testa a conexão e, se responder, salva e ativa as novas credenciais"""
    await connection.activate(request.url.strip(), request.anon_key.strip())
    logger.info("Conexão com o backend configurada com sucesso")
    return _status(connection)


@router.delete("/backend", response_model=ConfigStatusResponse)
async def forget_backend(
    connection: BackendConnection = Depends(get_connection),
    user: Optional[AuthUser] = Depends(require_config_access)
):
    """Remove as credenciais salvas e volta para as do ambiente"""
    connection.forget()
    return _status(connection)
