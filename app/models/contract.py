"""
Controle Fotógrafo - Contract Model
Registro "contrato": snapshot dos dados do cliente, do evento e do preço
"""
import enum
from typing import Optional

from pydantic import BaseModel


class ContractStatus(str, enum.Enum):
    """Status do contrato (apenas rótulo, sem regras de transição)"""
    DRAFT = "draft"
    SENT = "sent"
    SIGNED = "signed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return CONTRACT_STATUS_LABELS[self]


CONTRACT_STATUS_LABELS = {
    ContractStatus.DRAFT: "Rascunho",
    ContractStatus.SENT: "Enviado",
    ContractStatus.SIGNED: "Assinado",
    ContractStatus.CANCELLED: "Cancelado",
}


class Contract(BaseModel):
    id: Optional[str] = None

    # Dados pessoais
    nome_completo: str
    cpf: str
    email: str
    whatsapp: str
    endereco: Optional[str] = None
    cidade: Optional[str] = None
    data_nascimento: Optional[str] = None

    # Dados do evento
    tipo_evento: Optional[str] = None
    event_type_id: Optional[str] = None
    data_evento: Optional[str] = None
    horario_evento: Optional[str] = None
    local_festa: Optional[str] = None
    local_pre_wedding: Optional[str] = None
    local_making_of: Optional[str] = None
    local_cerimonia: Optional[str] = None
    nome_noivos: Optional[str] = None
    nome_aniversariante: Optional[str] = None

    # Preço (snapshot)
    package_id: Optional[str] = None
    package_price: Optional[float] = None
    payment_method_id: Optional[str] = None
    discount_percentage: Optional[float] = 0
    final_price: Optional[float] = None
    adjusted_price: Optional[float] = None
    preferred_payment_day: Optional[int] = None

    photographer_id: Optional[str] = None
    status: ContractStatus = ContractStatus.DRAFT
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"

    @property
    def revenue(self) -> float:
        """Valor considerado nos totais: preço final, senão preço do pacote"""
        return float(self.final_price or self.package_price or 0)
