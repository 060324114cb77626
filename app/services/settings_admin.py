"""
Controle Fotógrafo - Settings Administration
Cadastros do catálogo e geração dos preços por pacote/forma de pagamento
"""
import logging
from typing import Any, Dict, List, Type

from pydantic import BaseModel

from app.core.exceptions import NotFoundError
from app.database.client import BackendClient
from app.models import BusinessInfo, ContractTemplate, EventType, Package, PackagePaymentMethod, PaymentMethod

logger = logging.getLogger(__name__)

# tabela -> (modelo, coluna de ordenação)
CATALOG_TABLES: Dict[str, tuple] = {
    "event_types": (EventType, "name"),
    "packages": (Package, "name"),
    "payment_methods": (PaymentMethod, "name"),
    "contract_templates": (ContractTemplate, "name"),
}


class CatalogTable:
    """CRUD genérico de uma tabela de configuração"""

    def __init__(self, backend: BackendClient, table: str):
        if table not in CATALOG_TABLES:
            raise ValueError(f"Tabela de configuração desconhecida: {table}")
        self.backend = backend
        self.table = table
        self.model: Type[BaseModel] = CATALOG_TABLES[table][0]
        self.order_by: str = CATALOG_TABLES[table][1]

    async def list(self) -> List[BaseModel]:
        rows = await self.backend.table(self.table).select("*").order(self.order_by).execute()
        return [self.model.model_validate(row) for row in rows]

    async def get(self, row_id: str) -> BaseModel:
        row = await self.backend.table(self.table).select("*").eq("id", row_id).maybe_single()
        if row is None:
            raise NotFoundError("Registro não encontrado")
        return self.model.model_validate(row)

    async def create(self, data: Dict[str, Any]) -> BaseModel:
        rows = await self.backend.table(self.table).insert(data).execute()
        if not rows:
            raise NotFoundError("Registro não retornado pelo backend")
        logger.info(f"Registro criado em {self.table}: {rows[0].get('id')}")
        return self.model.model_validate(rows[0])

    async def update(self, row_id: str, data: Dict[str, Any]) -> BaseModel:
        rows = await self.backend.table(self.table).update(data).eq("id", row_id).execute()
        if not rows:
            raise NotFoundError("Registro não encontrado")
        return self.model.model_validate(rows[0])

    async def delete(self, row_id: str):
        rows = await self.backend.table(self.table).delete().eq("id", row_id).execute()
        if not rows:
            raise NotFoundError("Registro não encontrado")
        logger.info(f"Registro {row_id} excluído de {self.table}")


def link_price(package_price: float, method: PaymentMethod) -> float:
    """Preço sugerido do vínculo: acréscimo (ou desconto, se negativo) da forma de pagamento"""
    return package_price * (1 + method.discount_percentage / 100)


async def regenerate_package_payment_methods(backend: BackendClient, package_id: str) -> List[PackagePaymentMethod]:
    """
    Recria os vínculos de um pacote com todas as formas de pagamento ativas.
    Os vínculos existentes do pacote são apagados antes.
    """
    package = await CatalogTable(backend, "packages").get(package_id)

    await backend.table("package_payment_methods").delete().eq("package_id", package_id).execute()

    rows = await backend.table("payment_methods").select("*").eq("is_active", True).execute()
    methods = [PaymentMethod.model_validate(row) for row in rows]
    if not methods:
        logger.info(f"Nenhuma forma de pagamento ativa para vincular ao pacote {package_id}")
        return []

    associations = [
        {
            "package_id": package.id,
            "payment_method_id": method.id,
            "final_price": link_price(package.price, method),
        }
        for method in methods
    ]
    inserted = await backend.table("package_payment_methods") \
        .insert(associations) \
        .select("*, payment_method:payment_methods(*)") \
        .execute()
    logger.info(f"{len(inserted)} forma(s) de pagamento vinculadas ao pacote {package_id}")
    return [PackagePaymentMethod.model_validate(row) for row in inserted]


async def get_business_info(backend: BackendClient) -> BusinessInfo:
    row = await backend.table("business_info").select("*").maybe_single()
    return BusinessInfo.model_validate(row) if row else BusinessInfo()


async def save_business_info(backend: BackendClient, data: Dict[str, Any]) -> BusinessInfo:
    """Tabela de linha única: atualiza se existir, senão cria"""
    current = await get_business_info(backend)
    if current.id:
        rows = await backend.table("business_info").update(data).eq("id", current.id).execute()
    else:
        rows = await backend.table("business_info").insert(data).execute()
    return BusinessInfo.model_validate(rows[0]) if rows else BusinessInfo(**data)
