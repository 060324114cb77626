"""
Controle Fotógrafo - Catalog Loader
Carrega tipos de evento, pacotes, formas de pagamento e preços por pacote
"""
import asyncio
import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.exceptions import BackendError, CatalogLoadError
from app.database.client import BackendClient
from app.models import EventType, Package, PackagePaymentMethod, PaymentMethod

logger = logging.getLogger(__name__)

PACKAGE_PAYMENT_METHODS_SELECT = """
    *,
    payment_method:payment_methods(*)
"""


class Catalog(BaseModel):
    """Catálogo completo usado pelo formulário; nunca parcialmente carregado"""
    event_types: List[EventType] = Field(default_factory=list)
    packages: List[Package] = Field(default_factory=list)
    payment_methods: List[PaymentMethod] = Field(default_factory=list)
    package_payment_methods: List[PackagePaymentMethod] = Field(default_factory=list)
    available: bool = True

    def event_type(self, event_type_id: Optional[str]) -> Optional[EventType]:
        return next((et for et in self.event_types if et.id == event_type_id), None)

    def package(self, package_id: Optional[str]) -> Optional[Package]:
        return next((p for p in self.packages if p.id == package_id), None)

    def payment_method(self, payment_method_id: Optional[str]) -> Optional[PaymentMethod]:
        return next((m for m in self.payment_methods if m.id == payment_method_id), None)

    def packages_for_event_type(self, event_type_id: Optional[str]) -> List[Package]:
        if not event_type_id:
            return []
        return [p for p in self.packages if p.event_type_id == event_type_id]

    def payment_links_for_package(self, package_id: Optional[str]) -> List[PackagePaymentMethod]:
        """Formas de pagamento configuradas para o pacote (apenas métodos ativos)"""
        if not package_id:
            return []
        active_ids = {m.id for m in self.payment_methods}
        links = []
        for link in self.package_payment_methods:
            if link.package_id != package_id or link.payment_method_id not in active_ids:
                continue
            if link.payment_method is None:
                link = link.model_copy(update={"payment_method": self.payment_method(link.payment_method_id)})
            links.append(link)
        return links

    def link_for(self, package_id: Optional[str], payment_method_id: Optional[str]) -> Optional[PackagePaymentMethod]:
        return next(
            (link for link in self.payment_links_for_package(package_id)
             if link.payment_method_id == payment_method_id),
            None
        )


async def load_catalog(backend: BackendClient) -> Catalog:
    """
    Busca as quatro tabelas do catálogo em paralelo.

    Se qualquer busca falhar o carregamento inteiro é abortado com
    CatalogLoadError, para nunca expor pacotes sem tipos de evento
    correspondentes (ou vice-versa).
    """
    try:
        event_types, packages, payment_methods, links = await asyncio.gather(
            backend.table("event_types").select("*").eq("is_active", True).order("name").execute(),
            backend.table("packages").select("*").eq("is_active", True).order("name").execute(),
            backend.table("payment_methods").select("*").eq("is_active", True).order("name").execute(),
            backend.table("package_payment_methods").select(PACKAGE_PAYMENT_METHODS_SELECT).order("created_at").execute(),
        )
    except BackendError as e:
        raise CatalogLoadError(f"Erro ao carregar catálogo: {e.message}", status=e.status, table=e.table) from e

    return Catalog(
        event_types=[EventType.model_validate(row) for row in event_types],
        packages=[Package.model_validate(row) for row in packages],
        payment_methods=[PaymentMethod.model_validate(row) for row in payment_methods],
        package_payment_methods=[PackagePaymentMethod.model_validate(row) for row in links],
    )


async def load_catalog_or_empty(backend: BackendClient) -> Catalog:
    """Versão tolerante: em caso de falha devolve catálogo vazio marcado como indisponível"""
    try:
        return await load_catalog(backend)
    except CatalogLoadError as e:
        logger.warning(f"Erro ao carregar tipos de eventos e pacotes: {e.message}")
        return Catalog(available=False)
