"""Tests for the contract form validation."""

from app.models import EventKind
from app.schemas.contract import ContractForm
from app.services.validation import collect_form_errors


def valid_form(**overrides):
    data = {
        "nome_completo": "Ana Souza",
        "cpf": "123.456.789-01",
        "email": "ana@example.com",
        "whatsapp": "(11) 98765-4321",
        "endereco": "Rua A, 1",
        "cidade": "São Paulo",
        "data_nascimento": "1990-05-20",
        "event_type_id": "et-casamento",
        "package_id": "pkg-essencial",
        "data_evento": "2025-03-08",
        "horario_evento": "16:00",
        "local_festa": "Espaço Jardim",
        "nome_noivos": "Ana e Bia",
    }
    data.update(overrides)
    return ContractForm(**data)


def test_valid_form_has_no_errors():
    assert collect_form_errors(valid_form(), EventKind.CASAMENTO) == {}


def test_empty_form_collects_every_required_field():
    errors = collect_form_errors(ContractForm())
    for field in ("nome_completo", "cpf", "email", "whatsapp", "endereco", "cidade",
                  "data_nascimento", "event_type_id", "package_id", "data_evento", "horario_evento"):
        assert field in errors
    assert errors["cpf"] == "CPF é obrigatório"


def test_cpf_must_have_eleven_digits():
    errors = collect_form_errors(valid_form(cpf="123.456.789"))
    assert errors == {"cpf": "CPF deve ter 11 dígitos"}


def test_email_format():
    assert "email" in collect_form_errors(valid_form(email="ana@exemplo"))
    assert "email" in collect_form_errors(valid_form(email="ana souza@example.com"))


def test_whatsapp_needs_area_code():
    errors = collect_form_errors(valid_form(whatsapp="98765-4321"))
    assert errors == {"whatsapp": "WhatsApp deve ter 11 dígitos (DDD + número)"}


def test_payment_day_required_with_payment_method():
    errors = collect_form_errors(valid_form(payment_method_id="pm-pix"))
    assert "preferred_payment_day" in errors
    assert collect_form_errors(valid_form(payment_method_id="pm-pix", preferred_payment_day=10)) == {}
    assert "preferred_payment_day" in collect_form_errors(
        valid_form(payment_method_id="pm-pix", preferred_payment_day=31)
    )


def test_payment_day_ignored_without_payment_method():
    assert collect_form_errors(valid_form(preferred_payment_day=31)) == {}


def test_discount_range():
    assert "discount_percentage" in collect_form_errors(valid_form(discount_percentage=120))
    assert "discount_percentage" in collect_form_errors(valid_form(discount_percentage=-1))


def test_event_kind_required_fields():
    errors = collect_form_errors(valid_form(nome_noivos=""), EventKind.CASAMENTO)
    assert errors == {"nome_noivos": "Nome dos noivos é obrigatório"}
    assert "nome_aniversariante" in collect_form_errors(valid_form(), EventKind.ANIVERSARIO)
    assert collect_form_errors(valid_form(nome_noivos=""), EventKind.FORMATURA) == {}


def test_event_kind_from_name():
    assert EventKind.from_name("Casamento") == EventKind.CASAMENTO
    assert EventKind.from_name("Aniversário Infantil") == EventKind.ANIVERSARIO
    assert EventKind.from_name("Ensaio Fotográfico") == EventKind.ENSAIO_FOTOGRAFICO
    assert EventKind.from_name("Batizado") == EventKind.OUTRO
