"""
Controle Fotógrafo - Config Schemas
Tela de configuração das credenciais do backend
"""
from typing import Optional

from pydantic import BaseModel, Field


class BackendConfigRequest(BaseModel):
    url: str = Field(..., min_length=1)
    anon_key: str = Field(..., min_length=1)


class ConfigStatusResponse(BaseModel):
    configured: bool
    source: Optional[str] = None
    url: Optional[str] = None
    error: Optional[str] = None
    reconfigure: bool = False
