"""
Controle Fotógrafo - Auth API
Cadastro, login e sessão dos fotógrafos
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core import limiter, settings
from app.database import AuthService, AuthUser, BackendClient, get_auth_service, get_backend
from app.schemas import LoginRequest, RefreshRequest, SessionResponse, SessionUser, SignUpRequest
from app.services.profile import register_photographer

router = APIRouter(prefix="/auth", tags=["Authentication"])
security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def _session_user(user: AuthUser) -> SessionUser:
    return SessionUser(id=user.id, email=user.email, name=user.user_metadata.get("name"))


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth: AuthService = Depends(get_auth_service)
) -> AuthUser:
    """Dependency para obter o usuário autenticado"""
    user = await auth.get_user(credentials.credentials)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sessão inválida ou expirada"
        )
    return user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    auth: AuthService = Depends(get_auth_service)
) -> Optional[AuthUser]:
    """Usuário autenticado quando houver token; rotas públicas seguem sem ele"""
    if credentials is None:
        return None
    return await auth.get_user(credentials.credentials)


@router.post("/signup", response_model=SessionUser, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignUpRequest,
    auth: AuthService = Depends(get_auth_service),
    backend: BackendClient = Depends(get_backend)
):
    """Cria a conta e os perfis do fotógrafo"""
    user = await register_photographer(
        auth,
        backend,
        email=request.email,
        password=request.password,
        name=request.name,
        business_name=request.business_name,
        phone=request.phone
    )
    return SessionUser(id=user.id, email=user.email or request.email, name=request.name)


@router.post("/login", response_model=SessionResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    data: LoginRequest,
    auth: AuthService = Depends(get_auth_service)
):
    """Login do fotógrafo (limitado por IP)"""
    session = await auth.sign_in(data.email, data.password)
    return SessionResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        token_type=session.token_type,
        authenticated=True,
        user=_session_user(session.user)
    )


@router.post("/refresh", response_model=SessionResponse)
async def refresh(data: RefreshRequest, auth: AuthService = Depends(get_auth_service)):
    """Renova a sessão; refresh inválido devolve sessão vazia"""
    session = await auth.refresh_session(data.refresh_token)
    if session is None:
        return SessionResponse()
    return SessionResponse(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        token_type=session.token_type,
        authenticated=True,
        user=_session_user(session.user)
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth: AuthService = Depends(get_auth_service)
):
    """Encerra a sessão no serviço de autenticação"""
    await auth.sign_out(credentials.credentials)


@router.get("/session", response_model=SessionResponse)
async def get_session(user: Optional[AuthUser] = Depends(get_optional_user)):
    """Sessão atual (authenticated=false quando não há usuário)"""
    if user is None:
        return SessionResponse()
    return SessionResponse(authenticated=True, user=_session_user(user))
