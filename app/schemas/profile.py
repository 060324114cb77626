"""
Controle Fotógrafo - Profile Schemas
"""
from typing import Optional

from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    business_name: Optional[str] = None
    phone: Optional[str] = None
