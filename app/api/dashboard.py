"""
Controle Fotógrafo - Dashboard API
Indicadores de contratos e controle financeiro
"""
from fastapi import APIRouter, Depends

from app.database import AuthUser, BackendClient, get_backend
from app.models import Payment
from app.services.contracts import list_contracts
from app.services.dashboard import (
    DashboardStats,
    FinancialSummary,
    compute_stats,
    load_financial_summary,
    mark_payment_paid,
    refresh_overdue_payments
)
from app.services.profile import get_photographer_id
from .auth import get_current_user

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Totais de contratos e receita do fotógrafo logado"""
    photographer_id = await get_photographer_id(backend, user.id)
    contracts = await list_contracts(backend, photographer_id)
    return compute_stats(contracts)


@router.get("/financial", response_model=FinancialSummary)
async def get_financial(
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Resumo financeiro e parcelas"""
    return await load_financial_summary(backend)


@router.post("/financial/payments/{payment_id}/paid", response_model=Payment)
async def pay(
    payment_id: str,
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Marca a parcela como paga hoje"""
    return await mark_payment_paid(backend, payment_id)


@router.post("/financial/refresh-overdue")
async def refresh_overdue(
    backend: BackendClient = Depends(get_backend),
    user: AuthUser = Depends(get_current_user)
):
    """Atualiza parcelas vencidas para 'em atraso'"""
    updated = await refresh_overdue_payments(backend)
    return {"updated": updated}
