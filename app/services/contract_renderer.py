"""
Controle Fotógrafo - Contract Renderer
Gera o texto do contrato substituindo as variáveis {{token}} do modelo
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from app.core.exceptions import TemplateNotFoundError
from app.models import Contract, ContractTemplate, Package
from app.utils.formatters import bullet_list, format_cpf, format_currency, format_date, format_whatsapp

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

# Substituídas apenas quando o contrato tem valor para elas
OPTIONAL_TOKENS = (
    "nome_noivos",
    "nome_aniversariante",
    "local_pre_wedding",
    "local_making_of",
    "local_cerimonia",
)


@dataclass(frozen=True)
class RenderedContract:
    content: str
    filename: str
    template_id: str


def index_templates(templates: Iterable[ContractTemplate]) -> Dict[str, ContractTemplate]:
    """Modelos indexados por event_type_id (o primeiro de cada tipo prevalece)"""
    indexed: Dict[str, ContractTemplate] = {}
    for template in templates:
        indexed.setdefault(template.event_type_id, template)
    return indexed


def contract_filename(contract: Contract) -> str:
    name = re.sub(r"\s+", "_", contract.nome_completo)
    return f"contrato_{name}.txt"


def build_token_values(contract: Contract, package: Optional[Package] = None) -> Dict[str, str]:
    values = {
        # Dados pessoais
        "nome_completo": contract.nome_completo,
        "cpf": format_cpf(contract.cpf),
        "email": contract.email,
        "whatsapp": format_whatsapp(contract.whatsapp),
        "endereco": contract.endereco or "",
        "cidade": contract.cidade or "",
        "data_nascimento": format_date(contract.data_nascimento),
        # Dados do evento
        "tipo_evento": contract.tipo_evento or "",
        "data_evento": format_date(contract.data_evento),
        "horario_evento": contract.horario_evento or "",
        "local_festa": contract.local_festa or "",
    }

    for token in OPTIONAL_TOKENS:
        value = getattr(contract, token)
        if value:
            values[token] = value

    if package is not None:
        values["package_name"] = package.name
        values["package_price"] = format_currency(contract.package_price or package.price)
        if package.features:
            values["package_features"] = bullet_list(package.features)

    return values


def substitute_tokens(content: str, values: Mapping[str, str]) -> str:
    """
    Substituição literal em uma única passada: tokens conhecidos recebem
    o valor, os demais {{...}} são removidos. O texto inserido não é
    reprocessado.
    """
    return TOKEN_PATTERN.sub(lambda match: values.get(match.group(1), ""), content)


def render_contract(
    contract: Contract,
    templates: Mapping[str, ContractTemplate],
    packages: Optional[Mapping[str, Package]] = None
) -> RenderedContract:
    """Gera o contrato com o modelo do tipo de evento do contrato"""
    template = templates.get(contract.event_type_id) if contract.event_type_id else None
    if template is None:
        logger.warning(f"Modelo de contrato não encontrado para o tipo de evento {contract.event_type_id}")
        raise TemplateNotFoundError(contract.event_type_id)

    package = None
    if contract.package_id and packages:
        package = packages.get(contract.package_id)

    content = substitute_tokens(template.content, build_token_values(contract, package))
    return RenderedContract(
        content=content,
        filename=contract_filename(contract),
        template_id=template.id,
    )
