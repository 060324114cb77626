"""
Controle Fotógrafo - Profile Service
Perfil do usuário (tabela users) e do fotógrafo (tabela photographers)
"""
import logging
from typing import Optional

from pydantic import BaseModel

from app.core.exceptions import BackendError
from app.database.auth import AuthService, AuthUser
from app.database.client import BackendClient
from app.models import Photographer, UserProfile

logger = logging.getLogger(__name__)


class Profile(BaseModel):
    user: Optional[UserProfile] = None
    photographer: Optional[Photographer] = None


async def get_photographer(backend: BackendClient, user_id: str) -> Optional[Photographer]:
    row = await backend.table("photographers").select("*").eq("user_id", user_id).maybe_single()
    return Photographer.model_validate(row) if row else None


async def get_photographer_id(backend: BackendClient, user_id: Optional[str]) -> Optional[str]:
    """Id do fotógrafo do usuário; sem perfil (ou com erro de leitura) devolve None"""
    if not user_id:
        return None
    try:
        photographer = await get_photographer(backend, user_id)
    except BackendError as e:
        logger.warning(f"Erro ao buscar fotógrafo do usuário {user_id}: {e.message}")
        return None
    return photographer.id if photographer else None


async def load_profile(backend: BackendClient, user_id: str) -> Profile:
    """Leitura não crítica: falhas viram perfil vazio com aviso no log"""
    profile = Profile()
    try:
        row = await backend.table("users").select("*").eq("id", user_id).maybe_single()
        if row:
            profile.user = UserProfile.model_validate(row)
        profile.photographer = await get_photographer(backend, user_id)
    except BackendError as e:
        logger.warning(f"Erro ao carregar perfil: {e.message}")
    return profile


async def save_profile(
    backend: BackendClient,
    user_id: str,
    name: Optional[str] = None,
    business_name: Optional[str] = None,
    phone: Optional[str] = None
) -> Profile:
    """Atualiza o nome do usuário e atualiza/cria o perfil de fotógrafo"""
    if name is not None:
        await backend.table("users").update({"name": name}).eq("id", user_id).execute()

    photographer_data = {}
    if business_name is not None:
        photographer_data["business_name"] = business_name
    if phone is not None:
        photographer_data["phone"] = phone

    if photographer_data:
        existing = await get_photographer(backend, user_id)
        if existing:
            await backend.table("photographers").update(photographer_data).eq("user_id", user_id).execute()
        else:
            await backend.table("photographers").insert({
                "user_id": user_id,
                "settings": {},
                **photographer_data,
            }).execute()

    logger.info(f"Perfil do usuário {user_id} salvo")
    return await load_profile(backend, user_id)


async def register_photographer(
    auth: AuthService,
    backend: BackendClient,
    email: str,
    password: str,
    name: str,
    business_name: Optional[str] = None,
    phone: Optional[str] = None
) -> AuthUser:
    """
    Cria a conta no serviço de autenticação e os perfis users/photographers.

    Falha ao criar o registro em users aborta o cadastro; falha no perfil
    de fotógrafo só é registrada no log (ele pode ser criado depois pelo
    próprio usuário ao salvar o perfil).
    """
    user = await auth.sign_up(email, password, metadata={"name": name})
    logger.info("Conta criada no serviço de autenticação, criando perfil...")

    await backend.table("users").insert({
        "id": user.id,
        "email": user.email or email,
        "name": name,
        "role": "photographer",
    }).execute()

    try:
        await backend.table("photographers").insert({
            "user_id": user.id,
            "business_name": business_name,
            "phone": phone,
            "settings": {},
        }).execute()
    except BackendError as e:
        logger.error(f"Erro ao criar perfil do fotógrafo: {e.message}")

    logger.info(f"Cadastro concluído com sucesso: {email}")
    return user
