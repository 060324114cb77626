"""In-memory emulation of the hosted backend (REST tables + auth), served through httpx.MockTransport."""

import copy
import itertools
import json
import re
from typing import Dict, List, Optional, Set

import httpx

EMBED_PATTERN = re.compile(r"(\w+):(\w+)\(\*\)")

VALID_KEY = "test-anon-key-" + "x" * 32


def _fmt(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _compare_key(value: str):
    try:
        return (0, float(value))
    except ValueError:
        return (1, value)


def seed_tables() -> Dict[str, List[dict]]:
    return {
        "event_types": [
            {"id": "et-casamento", "name": "Casamento", "is_active": True},
            {"id": "et-aniversario", "name": "Aniversário", "is_active": True},
            {"id": "et-ensaio", "name": "Ensaio Fotográfico", "is_active": True},
        ],
        "packages": [
            {
                "id": "pkg-essencial", "event_type_id": "et-casamento", "name": "Essencial",
                "price": 3000.0, "features": ["8 horas de cobertura", "300 fotos"], "is_active": True,
            },
            {
                "id": "pkg-premium", "event_type_id": "et-casamento", "name": "Premium",
                "price": 5000.0, "features": [], "is_active": True,
            },
            {
                "id": "pkg-festa", "event_type_id": "et-aniversario", "name": "Festa",
                "price": 1500.0, "features": ["4 horas"], "is_active": True,
            },
        ],
        "payment_methods": [
            {"id": "pm-pix", "name": "PIX", "discount_percentage": -5, "installments": 1, "is_active": True},
            {"id": "pm-cartao", "name": "Cartão", "discount_percentage": 10, "installments": 10, "is_active": True},
            {"id": "pm-boleto", "name": "Boleto", "discount_percentage": 0, "installments": 3, "is_active": False},
        ],
        "package_payment_methods": [
            {"id": "ppm-1", "package_id": "pkg-essencial", "payment_method_id": "pm-pix",
             "final_price": 2850.0, "created_at": "2024-01-01T00:00:00"},
            {"id": "ppm-2", "package_id": "pkg-essencial", "payment_method_id": "pm-cartao",
             "final_price": 3300.0, "created_at": "2024-01-02T00:00:00"},
            {"id": "ppm-3", "package_id": "pkg-festa", "payment_method_id": "pm-pix",
             "final_price": 1425.0, "created_at": "2024-01-03T00:00:00"},
            {"id": "ppm-4", "package_id": "pkg-essencial", "payment_method_id": "pm-boleto",
             "final_price": 3000.0, "created_at": "2024-01-04T00:00:00"},
        ],
        "contract_templates": [
            {
                "id": "tpl-casamento", "event_type_id": "et-casamento", "name": "Contrato Casamento",
                "content": "Contratante: {{nome_completo}} ({{cpf}})\nNoivos: {{nome_noivos}}\n"
                           "Pacote {{package_name}} por {{package_price}}\n{{package_features}}",
                "is_active": True,
            },
        ],
        "contratos": [],
        "users": [{"id": "user-1", "email": "foto@example.com", "name": "Fotógrafa", "role": "photographer"}],
        "photographers": [{"id": "ph-1", "user_id": "user-1", "business_name": "Estúdio Luz", "settings": {}}],
        "business_info": [],
        "payments": [],
    }


class FakeBackend:
    """Tabelas em memória com filtros no formato col=op.valor, embed de FK e endpoints de auth"""

    def __init__(self, tables: Optional[Dict[str, List[dict]]] = None):
        self.tables = tables if tables is not None else seed_tables()
        self.failing_tables: Set[str] = set()
        self.probe_status = 200
        self.requests: List[httpx.Request] = []
        self._ids = itertools.count(1)
        self.accounts = {"foto@example.com": {"id": "user-1", "password": "segredo123", "name": "Fotógrafa"}}
        self.tokens: Dict[str, dict] = {}
        self.refresh_tokens: Dict[str, dict] = {}

    # Helpers para os testes
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def issue_token(self, email: str = "foto@example.com") -> str:
        account = self.accounts[email]
        token = f"token-{next(self._ids)}"
        self.tokens[token] = {"id": account["id"], "email": email, "user_metadata": {"name": account["name"]}}
        return token

    def requests_to(self, table: str, method: Optional[str] = None) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if r.url.path == f"/rest/v1/{table}" and (method is None or r.method == method)
        ]

    # Roteamento
    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.headers.get("apikey") != VALID_KEY:
            return httpx.Response(401, json={"message": "Invalid API key"})

        path = request.url.path
        if path.startswith("/auth/v1/"):
            return self._auth(request, path[len("/auth/v1/"):])
        if path == "/rest/v1/":
            return httpx.Response(self.probe_status, json={})
        if path.startswith("/rest/v1/"):
            return self._rest(request, path[len("/rest/v1/"):])
        return httpx.Response(404, json={"message": "not found"})

    # REST
    def _rest(self, request: httpx.Request, table: str) -> httpx.Response:
        if table in self.failing_tables:
            return httpx.Response(500, json={"message": f"falha simulada em {table}"})
        rows = self.tables.setdefault(table, [])

        select = "*"
        order = None
        limit = None
        filters = []
        for key, value in request.url.params.multi_items():
            if key == "select":
                select = value
            elif key == "order":
                order = value
            elif key == "limit":
                limit = int(value)
            else:
                filters.append((key, value))

        if request.method == "POST":
            body = json.loads(request.content)
            inserted = []
            for row in body:
                row = dict(row)
                row.setdefault("id", f"{table}-{next(self._ids)}")
                rows.append(row)
                inserted.append(row)
            return httpx.Response(201, json=[self._embed(r, select) for r in inserted])

        matched = [r for r in rows if all(self._matches(r, k, v) for k, v in filters)]

        if request.method == "PATCH":
            values = json.loads(request.content)
            for row in matched:
                row.update(values)
            return httpx.Response(200, json=[self._embed(r, select) for r in matched])

        if request.method == "DELETE":
            for row in matched:
                rows.remove(row)
            return httpx.Response(200, json=[self._embed(r, select) for r in matched])

        if order:
            for part in reversed(order.split(",")):
                column, _, direction = part.partition(".")
                matched = sorted(matched, key=lambda r: _fmt(r.get(column)), reverse=direction == "desc")
        if limit is not None:
            matched = matched[:limit]
        return httpx.Response(200, json=[self._embed(r, select) for r in matched])

    def _matches(self, row: dict, column: str, expression: str) -> bool:
        operator, _, value = expression.partition(".")
        stored = _fmt(row.get(column))
        if operator == "eq":
            return stored == value
        if operator == "neq":
            return stored != value
        if operator == "in":
            return stored in value.strip("()").split(",")
        if row.get(column) is None:
            return False
        if operator == "lt":
            return _compare_key(stored) < _compare_key(value)
        if operator == "gte":
            return _compare_key(stored) >= _compare_key(value)
        raise AssertionError(f"operador não suportado: {operator}")

    def _embed(self, row: dict, select: str) -> dict:
        result = copy.deepcopy(row)
        for alias, table in EMBED_PATTERN.findall(select):
            fk = row.get(f"{alias}_id")
            result[alias] = next((dict(r) for r in self.tables.get(table, []) if r["id"] == fk), None)
        return result

    # Auth
    def _session(self, email: str) -> dict:
        token = self.issue_token(email)
        refresh = f"refresh-{token}"
        self.refresh_tokens[refresh] = self.tokens[token]
        return {
            "access_token": token,
            "refresh_token": refresh,
            "token_type": "bearer",
            "expires_in": 3600,
            "user": self.tokens[token],
        }

    def _auth(self, request: httpx.Request, endpoint: str) -> httpx.Response:
        if endpoint == "signup":
            body = json.loads(request.content)
            if body["email"] in self.accounts:
                return httpx.Response(422, json={"msg": "User already registered"})
            user_id = f"user-{next(self._ids)}"
            name = body.get("data", {}).get("name")
            self.accounts[body["email"]] = {"id": user_id, "password": body["password"], "name": name}
            return httpx.Response(200, json={"id": user_id, "email": body["email"], "user_metadata": body.get("data", {})})

        if endpoint == "token":
            body = json.loads(request.content)
            grant = request.url.params.get("grant_type")
            if grant == "password":
                account = self.accounts.get(body.get("email"))
                if account is None or account["password"] != body.get("password"):
                    return httpx.Response(400, json={"error_description": "Invalid login credentials"})
                return httpx.Response(200, json=self._session(body["email"]))
            user = self.refresh_tokens.pop(body.get("refresh_token"), None)
            if user is None:
                return httpx.Response(400, json={"message": "Invalid Refresh Token: Refresh Token Not Found"})
            return httpx.Response(200, json=self._session(user["email"]))

        token = request.headers.get("Authorization", "").replace("Bearer ", "")
        if endpoint == "logout":
            if token not in self.tokens:
                return httpx.Response(401, json={"message": "invalid token"})
            del self.tokens[token]
            return httpx.Response(204)

        if endpoint == "user":
            user = self.tokens.get(token)
            if user is None:
                return httpx.Response(401, json={"message": "invalid token"})
            return httpx.Response(200, json=user)

        return httpx.Response(404, json={"message": "not found"})
