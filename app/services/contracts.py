"""
Controle Fotógrafo - Contract Record Store
Criação, listagem, busca e exclusão dos registros de contrato
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from app.core.exceptions import CatalogLoadError, FormValidationError, NotFoundError, SelectionError
from app.database.client import BackendClient
from app.models import EVENT_SPECIFIC_FIELDS, Contract, ContractStatus
from app.schemas.contract import ContractForm
from app.utils.formatters import only_digits
from .catalog import Catalog
from .selection import Selection, SelectionPipeline
from .validation import collect_form_errors

logger = logging.getLogger(__name__)

TABLE = "contratos"


def resolve_form_selection(form: ContractForm, catalog: Catalog) -> Selection:
    """Valida o formulário e resolve a seleção; erros voltam campo a campo"""
    if not catalog.available:
        raise CatalogLoadError("Catálogo indisponível, tente novamente mais tarde")
    event_type = catalog.event_type(form.event_type_id) if form.event_type_id else None
    errors = collect_form_errors(form, event_type.kind if event_type else None)

    selection = None
    if not errors:
        try:
            selection = SelectionPipeline(catalog).resolve(
                event_type_id=form.event_type_id,
                package_id=form.package_id,
                payment_method_id=form.payment_method_id or None,
                discount_percentage=form.discount_percentage,
            )
        except SelectionError as e:
            errors[e.field] = e.message

    if errors:
        logger.info(f"Formulário de contrato rejeitado: {sorted(errors)}")
        raise FormValidationError(errors)
    return selection


def build_contract_record(
    form: ContractForm,
    selection: Selection,
    photographer_id: Optional[str] = None
) -> dict:
    """Snapshot achatado do cliente, do evento e do preço resolvido"""
    quote = selection.quote
    kind_fields = selection.event_kind.fields.extra_fields if selection.event_kind else ()

    record = {
        "nome_completo": form.nome_completo.strip(),
        "cpf": only_digits(form.cpf),
        "email": form.email.strip(),
        "whatsapp": only_digits(form.whatsapp),
        "endereco": form.endereco.strip(),
        "cidade": form.cidade.strip(),
        "data_nascimento": form.data_nascimento,
        "tipo_evento": selection.event_type.name,
        "event_type_id": selection.event_type.id,
        "package_id": selection.package.id,
        "package_price": quote.package_price,
        "payment_method_id": quote.payment_method_id,
        "discount_percentage": quote.discount_percentage if quote.payment_method_id else 0,
        # Sem forma de pagamento o preço final é o do pacote
        "final_price": quote.final_price or quote.package_price,
        "adjusted_price": quote.adjusted_price or quote.package_price,
        "preferred_payment_day": form.preferred_payment_day if quote.payment_method_id else None,
        "data_evento": form.data_evento,
        "horario_evento": form.horario_evento,
        "local_festa": form.local_festa.strip(),
        "photographer_id": photographer_id,
        "status": ContractStatus.DRAFT.value,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }

    # Campos específicos só para a categoria que os exibe
    for field in EVENT_SPECIFIC_FIELDS:
        value = getattr(form, field).strip()
        record[field] = value if field in kind_fields and value else None

    return record


async def create_contract(
    backend: BackendClient,
    form: ContractForm,
    catalog: Catalog,
    photographer_id: Optional[str] = None
) -> Contract:
    selection = resolve_form_selection(form, catalog)
    record = build_contract_record(form, selection, photographer_id)

    rows = await backend.table(TABLE).insert(record).execute()
    saved = rows[0] if rows else record
    logger.info(f"Contrato salvo com sucesso: {saved.get('id', '(sem id)')}")
    return Contract.model_validate(saved)


async def list_contracts(backend: BackendClient, photographer_id: Optional[str]) -> List[Contract]:
    """Contratos do fotógrafo, mais recentes primeiro; sem fotógrafo, lista vazia"""
    if not photographer_id:
        return []
    rows = await backend.table(TABLE).select("*") \
        .eq("photographer_id", photographer_id) \
        .order("created_at", ascending=False) \
        .execute()
    return [Contract.model_validate(row) for row in rows]


async def get_contract(backend: BackendClient, contract_id: str) -> Contract:
    row = await backend.table(TABLE).select("*").eq("id", contract_id).maybe_single()
    if row is None:
        raise NotFoundError("Contrato não encontrado")
    return Contract.model_validate(row)


def search_contracts(
    contracts: List[Contract],
    term: Optional[str] = None,
    tipo_evento: Optional[str] = None
) -> List[Contract]:
    """Filtro da listagem: texto livre e tipo de evento"""
    term = (term or "").strip()
    needle = term.lower()

    def matches(contract: Contract) -> bool:
        if tipo_evento and contract.tipo_evento != tipo_evento:
            return False
        if not term:
            return True
        texts = [
            contract.nome_completo,
            contract.email,
            contract.cidade or "",
            contract.nome_noivos or "",
            contract.nome_aniversariante or "",
        ]
        if any(needle in text.lower() for text in texts):
            return True
        return term in contract.cpf or term in contract.whatsapp

    return [c for c in contracts if matches(c)]


async def delete_contract(backend: BackendClient, contract_id: str) -> Contract:
    """
    Exclui e devolve o registro removido.

    A exclusão só é considerada feita quando o backend devolve a linha
    removida; nenhuma linha significa contrato inexistente ou já excluído.
    """
    logger.info(f"Excluindo contrato ID: {contract_id}")
    rows = await backend.table(TABLE).delete().eq("id", contract_id).execute()
    if not rows:
        raise NotFoundError("Contrato não encontrado ou já foi excluído")
    logger.info(f"Contrato {contract_id} excluído")
    return Contract.model_validate(rows[0])


async def update_contract_status(backend: BackendClient, contract_id: str, status: ContractStatus) -> Contract:
    rows = await backend.table(TABLE).update({"status": status.value}).eq("id", contract_id).execute()
    if not rows:
        raise NotFoundError("Contrato não encontrado")
    return Contract.model_validate(rows[0])
