"""
Controle Fotógrafo - Selection Pipeline
Máquina de estados tipo de evento -> pacote -> forma de pagamento -> preço

Cada transição devolve um novo estado. Qualquer mudança em uma etapa
anterior zera todas as etapas seguintes, nunca deixando uma combinação
parcialmente obsoleta.
"""
import enum
import logging
from dataclasses import dataclass, replace
from typing import List, Optional

from app.core.exceptions import SelectionError
from app.models import EventKind, EventType, Package, PackagePaymentMethod
from .catalog import Catalog
from .quote import Quote, calculate_quote, validate_discount

logger = logging.getLogger(__name__)


class SelectionStage(str, enum.Enum):
    NO_EVENT_TYPE = "no_event_type"
    EVENT_TYPE_SELECTED = "event_type_selected"
    PACKAGE_SELECTED = "package_selected"
    PRICED = "priced"


@dataclass(frozen=True)
class Selection:
    event_type: Optional[EventType] = None
    package: Optional[Package] = None
    payment_link: Optional[PackagePaymentMethod] = None
    discount_percentage: float = 0

    @property
    def stage(self) -> SelectionStage:
        if self.event_type is None:
            return SelectionStage.NO_EVENT_TYPE
        if self.package is None:
            return SelectionStage.EVENT_TYPE_SELECTED
        if self.payment_link is None:
            return SelectionStage.PACKAGE_SELECTED
        return SelectionStage.PRICED

    @property
    def event_kind(self) -> Optional[EventKind]:
        return self.event_type.kind if self.event_type else None

    @property
    def quote(self) -> Quote:
        return calculate_quote(self.package, self.payment_link, self.discount_percentage)


class SelectionPipeline:
    """Aplica as transições de seleção sobre um catálogo carregado"""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def start(self, discount_percentage: float = 0) -> Selection:
        return Selection(discount_percentage=validate_discount(discount_percentage))

    def available_packages(self, selection: Selection) -> List[Package]:
        if selection.event_type is None:
            return []
        return self.catalog.packages_for_event_type(selection.event_type.id)

    def available_payment_methods(self, selection: Selection) -> List[PackagePaymentMethod]:
        if selection.package is None:
            return []
        return self.catalog.payment_links_for_package(selection.package.id)

    def select_event_type(self, selection: Selection, event_type_id: Optional[str]) -> Selection:
        current = selection.event_type.id if selection.event_type else None
        if (event_type_id or None) == current:
            return selection
        if not event_type_id:
            return Selection(discount_percentage=selection.discount_percentage)

        event_type = self.catalog.event_type(event_type_id)
        if event_type is None:
            raise SelectionError("Tipo de evento não encontrado", field="event_type_id")
        return Selection(event_type=event_type, discount_percentage=selection.discount_percentage)

    def select_package(self, selection: Selection, package_id: Optional[str]) -> Selection:
        current = selection.package.id if selection.package else None
        if (package_id or None) == current:
            return selection
        if not package_id:
            return replace(selection, package=None, payment_link=None)
        if selection.event_type is None:
            raise SelectionError("Selecione o tipo de evento antes do pacote", field="package_id")

        package = next((p for p in self.available_packages(selection) if p.id == package_id), None)
        if package is None:
            raise SelectionError("Pacote não disponível para este tipo de evento", field="package_id")
        return replace(selection, package=package, payment_link=None)

    def select_payment_method(self, selection: Selection, payment_method_id: Optional[str]) -> Selection:
        if not payment_method_id:
            return replace(selection, payment_link=None)
        if selection.package is None:
            raise SelectionError("Selecione o pacote antes da forma de pagamento", field="payment_method_id")

        link = self.catalog.link_for(selection.package.id, payment_method_id)
        if link is None:
            raise SelectionError(
                "Forma de pagamento não configurada para este pacote",
                field="payment_method_id"
            )
        return replace(selection, payment_link=link)

    def set_discount(self, selection: Selection, discount_percentage: float) -> Selection:
        return replace(selection, discount_percentage=validate_discount(discount_percentage))

    def resolve(
        self,
        event_type_id: Optional[str] = None,
        package_id: Optional[str] = None,
        payment_method_id: Optional[str] = None,
        discount_percentage: float = 0,
        strict: bool = True
    ) -> Selection:
        """
        Aplica as transições em ordem, a partir do estado inicial.

        Com strict=False uma forma de pagamento sem vínculo com o pacote
        resolvido é descartada (etapa package_selected, preços zerados)
        em vez de gerar SelectionError.
        """
        selection = self.start(discount_percentage)
        selection = self.select_event_type(selection, event_type_id)
        selection = self.select_package(selection, package_id)
        if payment_method_id and not strict:
            package_id = selection.package.id if selection.package else None
            if self.catalog.link_for(package_id, payment_method_id) is None:
                logger.info(f"Forma de pagamento {payment_method_id} descartada: sem vínculo com o pacote {package_id}")
                payment_method_id = None
        return self.select_payment_method(selection, payment_method_id)
