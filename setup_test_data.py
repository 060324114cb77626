"""
Script para criar um catálogo de teste no Controle Fotógrafo
Execute: python setup_test_data.py <email> <senha>
"""
import sys

import httpx

BASE_URL = "http://localhost:3000"


def create(client: httpx.Client, path: str, payload: dict) -> dict:
    response = client.post(f"{BASE_URL}/api/settings/{path}", json=payload)
    if response.status_code != 201:
        print(f"Erro ao criar em {path}: {response.text}")
        sys.exit(1)
    return response.json()


def main():
    if len(sys.argv) != 3:
        print("Uso: python setup_test_data.py <email> <senha>")
        return

    print("=== Setup de Dados de Teste ===\n")

    # 1. Login
    print("1. Fazendo login...")
    login_response = httpx.post(
        f"{BASE_URL}/api/auth/login",
        json={"email": sys.argv[1], "password": sys.argv[2]}
    )
    if login_response.status_code != 200:
        print(f"Erro no login: {login_response.text}")
        return

    token = login_response.json()["access_token"]
    client = httpx.Client(headers={"Authorization": f"Bearer {token}"})
    print("   Token obtido!")

    # 2. Tipo de evento
    print("\n2. Criando tipo de evento...")
    event_type = create(client, "event-types", {"name": "Casamento"})
    print(f"   Tipo de evento: {event_type['name']} (ID: {event_type['id']})")

    # 3. Pacote
    print("\n3. Criando pacote...")
    package = create(client, "packages", {
        "event_type_id": event_type["id"],
        "name": "Pacote Essencial",
        "description": "Cobertura da cerimônia e festa",
        "price": 3500.0,
        "features": ["8 horas de cobertura", "300 fotos editadas", "Galeria online"]
    })
    print(f"   Pacote: {package['name']} - R$ {package['price']:.2f}")

    # 4. Formas de pagamento
    print("\n4. Criando formas de pagamento...")
    create(client, "payment-methods", {
        "name": "PIX à vista",
        "discount_percentage": -5,
        "installments": 1,
        "payment_schedule": [{"percentage": 100, "description": "Na assinatura"}]
    })
    create(client, "payment-methods", {
        "name": "Cartão em 10x",
        "discount_percentage": 10,
        "installments": 10,
        "payment_schedule": [{"percentage": 100, "description": "10 parcelas mensais"}]
    })

    # 5. Preços por forma de pagamento
    print("\n5. Gerando preços do pacote...")
    response = client.post(f"{BASE_URL}/api/settings/packages/{package['id']}/payment-methods/regenerate")
    for link in response.json():
        print(f"   {link['payment_method']['name']}: R$ {link['final_price']:.2f}")

    # 6. Modelo de contrato
    print("\n6. Criando modelo de contrato...")
    create(client, "contract-templates", {
        "event_type_id": event_type["id"],
        "name": "Contrato de Casamento",
        "content": (
            "CONTRATANTE: {{nome_completo}}, CPF {{cpf}}\n"
            "Noivos: {{nome_noivos}}\n"
            "Evento em {{data_evento}} às {{horario_evento}}, {{local_festa}}\n"
            "Pacote {{package_name}} - {{package_price}}\n{{package_features}}\n"
        )
    })

    print("\n=== Setup Completo! ===")
    print(f"\nFormulário do cliente: {BASE_URL}/?client=true")


if __name__ == "__main__":
    main()
