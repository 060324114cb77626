"""
Controle Fotógrafo - Catalog API
Catálogo do formulário: tipos de evento, pacotes e formas de pagamento
"""
from typing import List

from fastapi import APIRouter, Depends, Query

from app.database import BackendClient, get_backend
from app.models import Package, PackagePaymentMethod
from app.services.catalog import Catalog, load_catalog, load_catalog_or_empty

router = APIRouter(prefix="/catalog", tags=["Catalog"])


async def get_catalog(backend: BackendClient = Depends(get_backend)) -> Catalog:
    """Dependency: catálogo completo, ou vazio com available=false"""
    return await load_catalog_or_empty(backend)


async def get_available_catalog(backend: BackendClient = Depends(get_backend)) -> Catalog:
    """Dependency: catálogo completo; falha do backend vira CatalogLoadError (502)"""
    return await load_catalog(backend)


@router.get("", response_model=Catalog)
async def read_catalog(catalog: Catalog = Depends(get_catalog)):
    """Catálogo ativo completo"""
    return catalog


@router.get("/packages", response_model=List[Package])
async def list_packages(
    event_type_id: str = Query(...),
    catalog: Catalog = Depends(get_catalog)
):
    """Pacotes do tipo de evento"""
    return catalog.packages_for_event_type(event_type_id)


@router.get("/payment-methods", response_model=List[PackagePaymentMethod])
async def list_payment_methods(
    package_id: str = Query(...),
    catalog: Catalog = Depends(get_catalog)
):
    """Formas de pagamento configuradas para o pacote, com o preço final"""
    return catalog.payment_links_for_package(package_id)
