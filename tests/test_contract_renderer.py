"""Tests for contract template rendering."""

import pytest

from app.core.exceptions import TemplateNotFoundError
from app.models import Contract, ContractTemplate, Package
from app.services.contract_renderer import contract_filename, index_templates, render_contract, substitute_tokens


def make_contract(**overrides):
    data = {
        "id": "c-1",
        "nome_completo": "Ana",
        "cpf": "12345678901",
        "email": "ana@example.com",
        "whatsapp": "11987654321",
        "endereco": "Rua A, 1",
        "cidade": "São Paulo",
        "data_nascimento": "1990-05-20",
        "tipo_evento": "Casamento",
        "event_type_id": "et-1",
        "data_evento": "2025-03-08",
        "horario_evento": "16:00",
        "local_festa": "Espaço Jardim",
        "package_id": "pkg-1",
        "package_price": 100.0,
    }
    data.update(overrides)
    return Contract(**data)


def make_templates(content):
    return index_templates([ContractTemplate(id="tpl-1", event_type_id="et-1", name="Modelo", content=content)])


@pytest.fixture
def packages():
    return {"pkg-1": Package(id="pkg-1", event_type_id="et-1", name="Essencial", price=100.0,
                             features=["Álbum", "Pendrive"])}


def test_render_substitutes_and_drops_unknown_tokens(packages):
    templates = make_templates("Olá {{nome_completo}}, valor {{package_price}}, {{unknown_token}}")
    rendered = render_contract(make_contract(), templates, packages)
    assert rendered.content == "Olá Ana, valor R$ 100,00, "
    assert rendered.template_id == "tpl-1"


def test_render_formats_personal_data():
    templates = make_templates("{{cpf}} | {{whatsapp}} | {{data_nascimento}} | {{data_evento}}")
    rendered = render_contract(make_contract(), templates)
    assert rendered.content == "123.456.789-01 | (11) 98765-4321 | 20/05/1990 | 08/03/2025"


def test_missing_event_date_renders_empty():
    templates = make_templates("Data: {{data_evento}}.")
    assert render_contract(make_contract(data_evento=None), templates).content == "Data: ."


def test_optional_tokens_only_when_present():
    templates = make_templates("[{{nome_noivos}}][{{local_cerimonia}}]")
    assert render_contract(make_contract(), templates).content == "[][]"
    filled = make_contract(nome_noivos="Ana e Bia", local_cerimonia="Igreja Matriz")
    assert render_contract(filled, templates).content == "[Ana e Bia][Igreja Matriz]"


def test_package_tokens_need_known_package(packages):
    templates = make_templates("{{package_name}}|{{package_features}}")
    assert render_contract(make_contract(), templates).content == "|"
    assert render_contract(make_contract(), templates, packages).content == "Essencial|• Álbum\n• Pendrive"


def test_package_price_falls_back_to_package(packages):
    templates = make_templates("{{package_price}}")
    packages["pkg-1"] = packages["pkg-1"].model_copy(update={"price": 3500.0})
    rendered = render_contract(make_contract(package_price=None), templates, packages)
    assert rendered.content == "R$ 3.500,00"


def test_empty_feature_list_drops_token():
    templates = make_templates("A{{package_features}}B")
    packages = {"pkg-1": Package(id="pkg-1", event_type_id="et-1", name="P", price=1.0)}
    assert render_contract(make_contract(), templates, packages).content == "AB"


def test_inserted_text_is_not_rescanned():
    content = substitute_tokens("{{nome_completo}}", {"nome_completo": "{{cpf}}", "cpf": "123"})
    assert content == "{{cpf}}"


def test_template_not_found():
    templates = make_templates("x")
    with pytest.raises(TemplateNotFoundError):
        render_contract(make_contract(event_type_id="et-outro"), templates)


def test_filename_uses_underscores():
    assert contract_filename(make_contract(nome_completo="Ana Maria  Souza")) == "contrato_Ana_Maria_Souza.txt"


def test_first_template_per_event_type_wins():
    templates = index_templates([
        ContractTemplate(id="tpl-a", event_type_id="et-1", name="A", content="A"),
        ContractTemplate(id="tpl-b", event_type_id="et-1", name="B", content="B"),
    ])
    assert templates["et-1"].id == "tpl-a"


def test_null_text_columns_render_empty():
    templates = make_templates("[{{endereco}}][{{cidade}}][{{tipo_evento}}][{{local_festa}}]")
    contract = make_contract(endereco=None, cidade=None, tipo_evento=None, local_festa=None)
    assert render_contract(contract, templates).content == "[][][][]"
