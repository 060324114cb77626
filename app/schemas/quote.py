"""
Controle Fotógrafo - Quote Schemas
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models import Package, PackagePaymentMethod


class QuoteRequest(BaseModel):
    event_type_id: Optional[str] = None
    package_id: Optional[str] = None
    payment_method_id: Optional[str] = None
    discount_percentage: float = 0


class EventFieldsResponse(BaseModel):
    kind: str
    required_fields: List[str] = Field(default_factory=list)
    optional_fields: List[str] = Field(default_factory=list)
    local_festa_label: str = "Local da Festa"


class QuoteResponse(BaseModel):
    stage: str
    package_price: float = 0
    payment_method_id: Optional[str] = None
    base_price: float = 0
    discount_percentage: float = 0
    discount_amount: float = 0
    final_price: float = 0
    adjusted_price: float = 0
    packages: List[Package] = Field(default_factory=list)
    payment_methods: List[PackagePaymentMethod] = Field(default_factory=list)
    event_fields: Optional[EventFieldsResponse] = None
