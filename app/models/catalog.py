"""
Controle Fotógrafo - Catalog Models
Tipos de evento, pacotes, formas de pagamento e modelos de contrato
"""
import enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class EventKind(str, enum.Enum):
    """Categorias fechadas de evento, derivadas do nome do tipo de evento"""
    CASAMENTO = "casamento"
    ANIVERSARIO = "aniversario"
    ENSAIO_FOTOGRAFICO = "ensaio_fotografico"
    FORMATURA = "formatura"
    OUTRO = "outro"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "EventKind":
        normalized = (name or "").strip().casefold()
        if normalized == "casamento":
            return cls.CASAMENTO
        if "aniversário" in normalized or "aniversario" in normalized:
            return cls.ANIVERSARIO
        if normalized in ("ensaio fotográfico", "ensaio fotografico"):
            return cls.ENSAIO_FOTOGRAFICO
        if normalized == "formatura":
            return cls.FORMATURA
        return cls.OUTRO

    @property
    def fields(self) -> "EventFieldSchema":
        return EVENT_FIELD_SCHEMAS[self]


@dataclass(frozen=True)
class EventFieldSchema:
    """Campos específicos que cada categoria de evento exibe no formulário"""
    optional_fields: Tuple[str, ...] = ()
    required_fields: Tuple[str, ...] = ()
    local_festa_label: str = "Local da Festa"

    @property
    def extra_fields(self) -> Tuple[str, ...]:
        return self.required_fields + self.optional_fields


# Todos os campos que variam por categoria
EVENT_SPECIFIC_FIELDS = (
    "nome_noivos",
    "nome_aniversariante",
    "local_pre_wedding",
    "local_making_of",
    "local_cerimonia",
)

EVENT_FIELD_SCHEMAS = {
    EventKind.CASAMENTO: EventFieldSchema(
        required_fields=("nome_noivos",),
        optional_fields=("local_pre_wedding", "local_making_of", "local_cerimonia"),
    ),
    EventKind.ANIVERSARIO: EventFieldSchema(
        required_fields=("nome_aniversariante",),
    ),
    EventKind.ENSAIO_FOTOGRAFICO: EventFieldSchema(local_festa_label="Local do Ensaio"),
    EventKind.FORMATURA: EventFieldSchema(),
    EventKind.OUTRO: EventFieldSchema(),
}


class EventType(BaseModel):
    id: str
    name: str
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"

    @property
    def kind(self) -> EventKind:
        return EventKind.from_name(self.name)


class Package(BaseModel):
    """Pacote de serviço vinculado a um único tipo de evento"""
    id: str
    event_type_id: str
    name: str
    description: Optional[str] = None
    price: float = 0
    features: List[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"


class PaymentScheduleItem(BaseModel):
    percentage: float = 0
    description: str = ""


class PaymentMethod(BaseModel):
    """Forma de pagamento genérica (não vinculada a pacote)"""
    id: str
    name: str
    description: Optional[str] = None
    discount_percentage: float = 0
    installments: int = 1
    payment_schedule: List[PaymentScheduleItem] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"


class PackagePaymentMethod(BaseModel):
    """Preço final autoritativo de um par (pacote, forma de pagamento)"""
    id: str
    package_id: str
    payment_method_id: str
    final_price: float = 0
    created_at: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None

    class Config:
        extra = "ignore"


class ContractTemplate(BaseModel):
    id: str
    event_type_id: str
    name: str
    content: str = ""
    is_active: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    class Config:
        extra = "ignore"
