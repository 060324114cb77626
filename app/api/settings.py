"""
Controle Fotógrafo - Settings API
Cadastros do catálogo e dados da empresa
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.database import AuthUser, BackendClient, get_backend
from app.models import BusinessInfo, ContractTemplate, EventType, Package, PackagePaymentMethod, PaymentMethod
from app.schemas import (
    BusinessInfoUpdate,
    ContractTemplateCreate,
    ContractTemplateUpdate,
    EventTypeCreate,
    EventTypeUpdate,
    PackageCreate,
    PackageUpdate,
    PaymentMethodCreate,
    PaymentMethodUpdate
)
from app.services.settings_admin import (
    CatalogTable,
    get_business_info,
    regenerate_package_payment_methods,
    save_business_info
)
from .auth import get_current_user

router = APIRouter(prefix="/settings", tags=["Settings"])


def _crud_routes(path: str, table: str, model, create_schema, update_schema):
    """Registra list/create/update/delete de uma tabela de configuração"""

    @router.get(f"/{path}", response_model=List[model], name=f"list_{table}")
    async def list_rows(
        backend: BackendClient = Depends(get_backend),
        user: AuthUser = Depends(get_current_user)
    ):
        return await CatalogTable(backend, table).list()

    @router.post(f"/{path}", response_model=model, status_code=status.HTTP_201_CREATED, name=f"create_{table}")
    async def create_row(
        request: create_schema,
        backend: BackendClient = Depends(get_backend),
        user: AuthUser = Depends(get_current_user)
    ):
        return await CatalogTable(backend, table).create(request.model_dump(mode="json"))

    @router.put(f"/{path}/{{row_id}}", response_model=model, name=f"update_{table}")
    async def update_row(
        row_id: str,
        request: update_schema,
        backend: BackendClient = Depends(get_backend),
        user: AuthUser = Depends(get_current_user)
    ):
        data = request.model_dump(mode="json", exclude_unset=True)
        return await CatalogTable(backend, table).update(row_id, data)

    @router.delete(f"/{path}/{{row_id}}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{table}")
    async def delete_row(
        row_id: str,
        backend: BackendClient = Depends(get_backend),
        user: AuthUser = Depends(get_current_user)
    ):
        await CatalogTable(backend, table).delete(row_id)


_crud_routes("event-types", "event_types", EventType, EventTypeCreate, EventTypeUpdate)
_crud_routes("packages", "packages", Package, PackageCreate, PackageUpdate)
_crud_routes("payment-methods", "payment_methods", PaymentMethod, PaymentMethodCreate, PaymentMethodUpdate)
_crud_routes("contract-templates", "contract_templates", ContractTemplate, ContractTemplateCreate, ContractTemplateUpdate)


@router.post("/packages/{package_id}/payment-methods/regenerate", response_model=List[PackagePaymentMethod])
async def regenerate_payment_methods(
    package_id: str,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Recria os preços do pacote para todas as formas de pagamento ativas"""
    return await regenerate_package_payment_methods(backend, package_id)


@router.get("/business-info", response_model=BusinessInfo)
async def read_business_info(
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Dados da empresa"""
    return await get_business_info(backend)


@router.put("/business-info", response_model=BusinessInfo)
async def update_business_info(
    request: BusinessInfoUpdate,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Salva os dados da empresa (linha única)"""
    return await save_business_info(backend, request.model_dump(exclude_unset=True))
