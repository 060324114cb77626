"""
Controle Fotógrafo - Payment Model
Parcelas de pagamento dos contratos (status simulado, sem gateway)
"""
import enum
from typing import Optional

from pydantic import BaseModel


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class Payment(BaseModel):
    id: str
    contract_id: Optional[str] = None
    amount: float = 0
    due_date: Optional[str] = None
    paid_date: Optional[str] = None
    status: PaymentStatus = PaymentStatus.PENDING
    description: Optional[str] = None
    created_at: Optional[str] = None

    class Config:
        extra = "ignore"
