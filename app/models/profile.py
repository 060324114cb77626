"""
Controle Fotógrafo - Profile Models
Usuário, perfil de fotógrafo e dados da empresa
"""
from typing import Optional

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: str = "photographer"
    created_at: Optional[str] = None

    class Config:
        extra = "ignore"


class Photographer(BaseModel):
    id: str
    user_id: str
    business_name: Optional[str] = None
    phone: Optional[str] = None
    settings: dict = Field(default_factory=dict)
    created_at: Optional[str] = None

    class Config:
        extra = "ignore"


class BusinessInfo(BaseModel):
    """Linha única com os dados da empresa usados nos contratos"""
    id: Optional[str] = None
    company_name: Optional[str] = None
    document: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    instagram: Optional[str] = None
    website: Optional[str] = None

    class Config:
        extra = "allow"
