"""
Controle Fotógrafo - Quotes API
Orçamento a partir da seleção tipo de evento / pacote / forma de pagamento
"""
from fastapi import APIRouter, Depends

from app.schemas import EventFieldsResponse, QuoteRequest, QuoteResponse
from app.services.catalog import Catalog
from app.services.selection import SelectionPipeline
from .catalog import get_available_catalog

router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.post("", response_model=QuoteResponse)
async def create_quote(request: QuoteRequest, catalog: Catalog = Depends(get_available_catalog)):
    """
    Resolve a seleção e calcula o preço final.

    Também devolve as opções disponíveis na etapa atual e os campos
    específicos da categoria do evento.
    """
    pipeline = SelectionPipeline(catalog)
    selection = pipeline.resolve(
        event_type_id=request.event_type_id,
        package_id=request.package_id,
        payment_method_id=request.payment_method_id,
        discount_percentage=request.discount_percentage,
        strict=False
    )

    event_fields = None
    if selection.event_kind is not None:
        schema = selection.event_kind.fields
        event_fields = EventFieldsResponse(
            kind=selection.event_kind.value,
            required_fields=list(schema.required_fields),
            optional_fields=list(schema.optional_fields),
            local_festa_label=schema.local_festa_label
        )

    return QuoteResponse(
        stage=selection.stage.value,
        **selection.quote.model_dump(),
        packages=pipeline.available_packages(selection),
        payment_methods=pipeline.available_payment_methods(selection),
        event_fields=event_fields
    )
