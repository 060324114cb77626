"""
Controle Fotógrafo - Contract Schemas
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models import ContractStatus


class ContractForm(BaseModel):
    """Dados enviados pelo formulário do cliente (validados campo a campo no serviço)"""
    nome_completo: str = ""
    cpf: str = ""
    email: str = ""
    whatsapp: str = ""
    endereco: str = ""
    cidade: str = ""
    data_nascimento: str = ""

    event_type_id: str = ""
    package_id: str = ""
    payment_method_id: str = ""
    discount_percentage: float = 0
    preferred_payment_day: Optional[int] = None

    data_evento: str = ""
    horario_evento: str = ""
    local_festa: str = ""
    local_pre_wedding: str = ""
    local_making_of: str = ""
    local_cerimonia: str = ""
    nome_noivos: str = ""
    nome_aniversariante: str = ""


class ContractStatusUpdate(BaseModel):
    status: ContractStatus


class ContractListResponse(BaseModel):
    total: int
    filtered: int
    contracts: List[dict] = Field(default_factory=list)


class RenderedContractResponse(BaseModel):
    contract_id: str
    template_id: str
    filename: str
    content: str


class ClientLinkResponse(BaseModel):
    url: str
