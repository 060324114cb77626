"""
Controle Fotógrafo - Form Validation
Validação do formulário de contrato, campo a campo, antes de qualquer chamada ao backend
"""
import re
from typing import Dict, Optional

from app.models import EventKind
from app.schemas.contract import ContractForm
from app.utils.formatters import only_digits

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MAX_PAYMENT_DAY = 28

REQUIRED_MESSAGES = {
    "nome_completo": "Nome completo é obrigatório",
    "endereco": "Endereço é obrigatório",
    "cidade": "Cidade é obrigatória",
    "data_nascimento": "Data de nascimento é obrigatória",
    "event_type_id": "Tipo de evento é obrigatório",
    "package_id": "Pacote é obrigatório",
    "data_evento": "Data do evento é obrigatória",
    "horario_evento": "Horário do evento é obrigatório",
}

EVENT_FIELD_MESSAGES = {
    "nome_noivos": "Nome dos noivos é obrigatório",
    "nome_aniversariante": "Nome do aniversariante é obrigatório",
    "local_pre_wedding": "Local do pré-wedding é obrigatório",
    "local_making_of": "Local do making of é obrigatório",
    "local_cerimonia": "Local da cerimônia é obrigatório",
}


def validate_cpf(cpf: str) -> bool:
    return len(only_digits(cpf)) == 11


def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def validate_whatsapp(whatsapp: str) -> bool:
    return len(only_digits(whatsapp)) == 11


def collect_form_errors(form: ContractForm, kind: Optional[EventKind] = None) -> Dict[str, str]:
    """Devolve {campo: mensagem}; dicionário vazio significa formulário válido"""
    errors: Dict[str, str] = {}

    for field, message in REQUIRED_MESSAGES.items():
        if not getattr(form, field).strip():
            errors[field] = message

    if not form.cpf.strip():
        errors["cpf"] = "CPF é obrigatório"
    elif not validate_cpf(form.cpf):
        errors["cpf"] = "CPF deve ter 11 dígitos"

    if not form.email.strip():
        errors["email"] = "E-mail é obrigatório"
    elif not validate_email(form.email.strip()):
        errors["email"] = "E-mail deve ter um formato válido"

    if not form.whatsapp.strip():
        errors["whatsapp"] = "WhatsApp é obrigatório"
    elif not validate_whatsapp(form.whatsapp):
        errors["whatsapp"] = "WhatsApp deve ter 11 dígitos (DDD + número)"

    if form.payment_method_id:
        if not form.preferred_payment_day:
            errors["preferred_payment_day"] = (
                "Dia do pagamento é obrigatório quando uma forma de pagamento é selecionada"
            )
        elif not 1 <= form.preferred_payment_day <= MAX_PAYMENT_DAY:
            errors["preferred_payment_day"] = f"Dia do pagamento deve estar entre 1 e {MAX_PAYMENT_DAY}"

    if form.discount_percentage < 0 or form.discount_percentage > 100:
        errors["discount_percentage"] = "Desconto deve estar entre 0 e 100%"

    if kind is not None:
        for field in kind.fields.required_fields:
            if not getattr(form, field).strip():
                errors[field] = EVENT_FIELD_MESSAGES[field]

    return errors
