"""
Controle Fotógrafo - Profile API
Perfil do fotógrafo logado
"""
from fastapi import APIRouter, Depends

from app.database import AuthUser, BackendClient, get_backend
from app.schemas import ProfileUpdate
from app.services.profile import Profile, load_profile, save_profile
from .auth import get_current_user

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=Profile)
async def get_profile(
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Dados do usuário e do perfil de fotógrafo"""
    return await load_profile(backend, user.id)


@router.put("", response_model=Profile)
async def update_profile(
    request: ProfileUpdate,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Atualiza nome, nome da empresa e telefone"""
    return await save_profile(
        backend,
        user.id,
        name=request.name,
        business_name=request.business_name,
        phone=request.phone
    )
