"""
Controle Fotógrafo - Settings Schemas
Cadastros de tipos de evento, pacotes, formas de pagamento e modelos de contrato
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models import PaymentScheduleItem


class EventTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    is_active: bool = True


class EventTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    is_active: Optional[bool] = None


class PackageCreate(BaseModel):
    event_type_id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    features: List[str] = Field(default_factory=list)
    is_active: bool = True


class PackageUpdate(BaseModel):
    event_type_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None


class PaymentMethodCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    discount_percentage: float = Field(0, ge=-100, le=100)
    installments: int = Field(1, ge=1, le=48)
    payment_schedule: List[PaymentScheduleItem] = Field(default_factory=list)
    is_active: bool = True


class PaymentMethodUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    discount_percentage: Optional[float] = Field(None, ge=-100, le=100)
    installments: Optional[int] = Field(None, ge=1, le=48)
    payment_schedule: Optional[List[PaymentScheduleItem]] = None
    is_active: Optional[bool] = None


class ContractTemplateCreate(BaseModel):
    event_type_id: str
    name: str = Field(..., min_length=1, max_length=255)
    content: str = ""
    is_active: bool = True


class ContractTemplateUpdate(BaseModel):
    event_type_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    is_active: Optional[bool] = None


class BusinessInfoUpdate(BaseModel):
    company_name: Optional[str] = None
    document: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    instagram: Optional[str] = None
    website: Optional[str] = None
