"""
Controle Fotógrafo - Auth Schemas
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=255)
    business_name: Optional[str] = None
    phone: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class SessionUser(BaseModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None


class SessionResponse(BaseModel):
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    authenticated: bool = False
    user: Optional[SessionUser] = None


class RefreshRequest(BaseModel):
    refresh_token: str
