"""
Controle Fotógrafo - Dashboard Service
Indicadores de contratos e resumo financeiro
"""
import logging
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from app.core.exceptions import NotFoundError
from app.database.client import BackendClient
from app.models import Contract, ContractStatus, Payment, PaymentStatus
from app.utils.formatters import parse_date

logger = logging.getLogger(__name__)

RECENT_CONTRACTS_LIMIT = 5


class DashboardStats(BaseModel):
    total_contracts: int = 0
    pending_contracts: int = 0
    completed_contracts: int = 0
    total_revenue: float = 0
    monthly_revenue: float = 0
    average_contract_value: float = 0
    recent_contracts: List[Contract] = Field(default_factory=list)


class FinancialSummary(BaseModel):
    total_received: float = 0
    total_pending: float = 0
    total_overdue: float = 0
    monthly_revenue: float = 0
    contracts_this_month: int = 0
    average_contract_value: float = 0
    payments: List[Payment] = Field(default_factory=list)


def _same_month(value: Optional[str], today: date) -> bool:
    parsed = parse_date(value)
    return parsed is not None and parsed.year == today.year and parsed.month == today.month


def compute_stats(contracts: List[Contract], today: Optional[date] = None) -> DashboardStats:
    today = today or date.today()
    total = len(contracts)
    total_revenue = sum(c.revenue for c in contracts)
    monthly_revenue = sum(c.revenue for c in contracts if _same_month(c.created_at, today))

    recent = sorted(contracts, key=lambda c: c.created_at or "", reverse=True)[:RECENT_CONTRACTS_LIMIT]

    return DashboardStats(
        total_contracts=total,
        pending_contracts=sum(
            1 for c in contracts if c.status in (ContractStatus.DRAFT, ContractStatus.SENT)
        ),
        completed_contracts=sum(1 for c in contracts if c.status == ContractStatus.SIGNED),
        total_revenue=total_revenue,
        monthly_revenue=monthly_revenue,
        average_contract_value=total_revenue / total if total else 0,
        recent_contracts=recent,
    )


def compute_financial_summary(
    payments: List[Payment],
    contracts: List[Contract],
    today: Optional[date] = None
) -> FinancialSummary:
    today = today or date.today()

    def total(status: PaymentStatus) -> float:
        return sum(p.amount for p in payments if p.status == status)

    monthly_revenue = sum(
        p.amount for p in payments
        if p.status == PaymentStatus.PAID and _same_month(p.paid_date, today)
    )
    contracts_total = sum(float(c.final_price or 0) for c in contracts)

    return FinancialSummary(
        total_received=total(PaymentStatus.PAID),
        total_pending=total(PaymentStatus.PENDING),
        total_overdue=total(PaymentStatus.OVERDUE),
        monthly_revenue=monthly_revenue,
        contracts_this_month=sum(1 for c in contracts if _same_month(c.created_at, today)),
        average_contract_value=contracts_total / len(contracts) if contracts else 0,
        payments=payments,
    )


async def load_financial_summary(backend: BackendClient, today: Optional[date] = None) -> FinancialSummary:
    payments = await backend.table("payments").select("*").order("due_date").execute()
    contracts = await backend.table("contratos").select("*").order("created_at", ascending=False).execute()
    return compute_financial_summary(
        [Payment.model_validate(row) for row in payments],
        [Contract.model_validate(row) for row in contracts],
        today,
    )


async def mark_payment_paid(backend: BackendClient, payment_id: str, today: Optional[date] = None) -> Payment:
    """Baixa simulada: apenas marca a parcela como paga na data de hoje"""
    today = today or date.today()
    rows = await backend.table("payments").update({
        "status": PaymentStatus.PAID.value,
        "paid_date": today.isoformat(),
    }).eq("id", payment_id).execute()
    if not rows:
        raise NotFoundError("Pagamento não encontrado")
    logger.info(f"Pagamento {payment_id} marcado como pago")
    return Payment.model_validate(rows[0])


async def refresh_overdue_payments(backend: BackendClient, today: Optional[date] = None) -> int:
    """Parcelas pendentes com vencimento anterior a hoje passam para 'overdue'"""
    today = today or date.today()
    overdue = await backend.table("payments").select("id") \
        .eq("status", PaymentStatus.PENDING.value) \
        .lt("due_date", today.isoformat()) \
        .execute()
    if not overdue:
        return 0

    ids = [row["id"] for row in overdue]
    await backend.table("payments").update({"status": PaymentStatus.OVERDUE.value}).in_("id", ids).execute()
    logger.info(f"{len(ids)} pagamento(s) marcados como em atraso")
    return len(ids)
