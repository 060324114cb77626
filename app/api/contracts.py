"""
Controle Fotógrafo - Contracts API
Formulário público do cliente, listagem, status, geração e exclusão de contratos
"""
import logging
from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from app.core import BackendError, settings
from app.database import AuthUser, BackendClient, get_backend
from app.models import Contract, ContractTemplate, Package
from app.schemas import (
    ClientLinkResponse,
    ContractForm,
    ContractListResponse,
    ContractStatusUpdate,
    RenderedContractResponse
)
from app.services import contracts as contract_store
from app.services.catalog import Catalog
from app.services.contract_renderer import RenderedContract, index_templates, render_contract
from app.services.profile import get_photographer_id
from .auth import get_current_user, get_optional_user
from .catalog import get_available_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contracts", tags=["Contracts"])


async def _load_templates(backend: BackendClient) -> List[ContractTemplate]:
    try:
        rows = await backend.table("contract_templates").select("*").eq("is_active", True).execute()
    except BackendError as e:
        logger.warning(f"Erro ao carregar modelos de contrato: {e.message}")
        return []
    return [ContractTemplate.model_validate(row) for row in rows]


async def _load_packages(backend: BackendClient) -> List[Package]:
    try:
        rows = await backend.table("packages").select("*").execute()
    except BackendError as e:
        logger.warning(f"Erro ao carregar pacotes: {e.message}")
        return []
    return [Package.model_validate(row) for row in rows]


async def _render(backend: BackendClient, contract_id: str) -> RenderedContract:
    contract = await contract_store.get_contract(backend, contract_id)
    templates = index_templates(await _load_templates(backend))
    packages = {p.id: p for p in await _load_packages(backend)}
    return render_contract(contract, templates, packages)


@router.get("", response_model=ContractListResponse)
async def list_contracts(
    search: Optional[str] = Query(None),
    tipo_evento: Optional[str] = Query(None),
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Contratos do fotógrafo logado, com busca opcional"""
    photographer_id = await get_photographer_id(backend, user.id)
    contracts = await contract_store.list_contracts(backend, photographer_id)
    filtered = contract_store.search_contracts(contracts, search, tipo_evento)
    return ContractListResponse(
        total=len(contracts),
        filtered=len(filtered),
        contracts=[c.model_dump() for c in filtered]
    )


@router.get("/client-link", response_model=ClientLinkResponse)
async def client_link(user: AuthUser = Depends(get_current_user)):
    """Link do formulário público para enviar ao cliente"""
    return ClientLinkResponse(url=settings.CLIENT_FORM_URL)


@router.post("", response_model=Contract, status_code=status.HTTP_201_CREATED)
async def create_contract(
    form: ContractForm,
    backend: BackendClient = Depends(get_backend),
    catalog: Catalog = Depends(get_available_catalog),
    user: Optional[AuthUser] = Depends(get_optional_user)
):
    """Formulário do cliente: valida, calcula o preço e salva o contrato"""
    photographer_id = await get_photographer_id(backend, user.id if user else None)
    return await contract_store.create_contract(backend, form, catalog, photographer_id)


@router.delete("/{contract_id}", response_model=Contract)
async def delete_contract(
    contract_id: str,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Exclui o contrato; devolve o registro removido confirmado pelo backend"""
    return await contract_store.delete_contract(backend, contract_id)


@router.patch("/{contract_id}/status", response_model=Contract)
async def update_contract_status(
    contract_id: str,
    request: ContractStatusUpdate,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Atualiza o status do contrato"""
    return await contract_store.update_contract_status(backend, contract_id, request.status)


@router.get("/{contract_id}/render", response_model=RenderedContractResponse)
async def render(
    contract_id: str,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Texto do contrato gerado a partir do modelo do tipo de evento"""
    rendered = await _render(backend, contract_id)
    return RenderedContractResponse(
        contract_id=contract_id,
        template_id=rendered.template_id,
        filename=rendered.filename,
        content=rendered.content
    )


@router.get("/{contract_id}/download", response_class=PlainTextResponse)
async def download(
    contract_id: str,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Download do contrato gerado como .txt"""
    rendered = await _render(backend, contract_id)
    filename = quote(rendered.filename)
    if filename != rendered.filename:
        disposition = f"attachment; filename*=utf-8''{filename}"
    else:
        disposition = f'attachment; filename="{filename}"'
    return PlainTextResponse(content=rendered.content, headers={"Content-Disposition": disposition})
