"""
Controle Fotógrafo - Backend Client
Cliente REST assíncrono para as tabelas do backend hospedado
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx

from app.core.config import BackendCredentials
from app.core.exceptions import BackendError, ConfigurationError, NotFoundError

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        return payload.get("message") or payload.get("msg") or payload.get("error_description") \
            or payload.get("error") or f"HTTP {response.status_code}"
    return f"HTTP {response.status_code}"


def raise_for_backend_error(response: httpx.Response, table: Optional[str] = None):
    """Converte respostas de erro do backend em exceções da aplicação"""
    if response.status_code < 400:
        return
    message = _error_message(response)
    if response.status_code == 401 and "Invalid API key" in message:
        raise ConfigurationError(
            "Chave de API inválida. Verifique as credenciais do backend nas configurações."
        )
    raise BackendError(message, status=response.status_code, table=table)


class TableQuery:
    """
    Construtor de consultas para uma tabela remota.

    Uso:
        rows = await backend.table("packages").select("*").eq("is_active", True).order("name").execute()
    """

    def __init__(self, client: "BackendClient", table: str):
        self._client = client
        self.table = table
        self._method = "GET"
        self._columns = "*"
        self._filters: List[Tuple[str, str]] = []
        self._order: List[str] = []
        self._limit: Optional[int] = None
        self._body: Any = None

    # Operações
    def select(self, columns: str = "*") -> "TableQuery":
        self._columns = " ".join(columns.split())
        return self

    def insert(self, rows) -> "TableQuery":
        self._method = "POST"
        self._body = rows if isinstance(rows, list) else [rows]
        return self

    def update(self, values: Dict[str, Any]) -> "TableQuery":
        self._method = "PATCH"
        self._body = values
        return self

    def delete(self) -> "TableQuery":
        self._method = "DELETE"
        return self

    # Filtros
    def _filter(self, column: str, operator: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"{operator}.{_format_value(value)}"))
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "eq", value)

    def neq(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "neq", value)

    def lt(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "lt", value)

    def gte(self, column: str, value: Any) -> "TableQuery":
        return self._filter(column, "gte", value)

    def in_(self, column: str, values: Iterable[Any]) -> "TableQuery":
        joined = ",".join(_format_value(v) for v in values)
        self._filters.append((column, f"in.({joined})"))
        return self

    def order(self, column: str, ascending: bool = True) -> "TableQuery":
        self._order.append(f"{column}.{'asc' if ascending else 'desc'}")
        return self

    def limit(self, count: int) -> "TableQuery":
        self._limit = count
        return self

    def build_params(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = [("select", self._columns)]
        params.extend(self._filters)
        if self._order:
            params.append(("order", ",".join(self._order)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        return params

    async def execute(self) -> List[Dict[str, Any]]:
        """Executa a requisição e retorna as linhas afetadas/encontradas"""
        return await self._client.request(
            self._method, self.table, params=self.build_params(), json=self._body
        )

    async def maybe_single(self) -> Optional[Dict[str, Any]]:
        rows = await self.limit(1).execute() if self._method == "GET" else await self.execute()
        return rows[0] if rows else None

    async def single(self) -> Dict[str, Any]:
        row = await self.maybe_single()
        if row is None:
            raise NotFoundError(f"Registro não encontrado em {self.table}")
        return row


class BackendClient:
    """Acesso às tabelas remotas com a chave pública e, opcionalmente, o token do usuário"""

    def __init__(
        self,
        credentials: BackendCredentials,
        http: httpx.AsyncClient,
        access_token: Optional[str] = None
    ):
        self.credentials = credentials
        self.http = http
        self.access_token = access_token

    def with_token(self, access_token: Optional[str]) -> "BackendClient":
        return BackendClient(self.credentials, self.http, access_token=access_token)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "apikey": self.credentials.anon_key,
            "Authorization": f"Bearer {self.access_token or self.credentials.anon_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    def table(self, name: str) -> TableQuery:
        return TableQuery(self, name)

    async def request(
        self,
        method: str,
        table: str,
        params: Optional[List[Tuple[str, str]]] = None,
        json: Any = None
    ) -> List[Dict[str, Any]]:
        url = f"{self.credentials.rest_url}/{table}"
        try:
            response = await self.http.request(method, url, params=params, json=json, headers=self.headers)
        except httpx.HTTPError as e:
            logger.error(f"Erro de conexão com o backend ({method} {table}): {e}")
            raise BackendError(
                "Erro de conexão. Verifique sua internet e as configurações do backend.",
                table=table
            ) from e

        raise_for_backend_error(response, table=table)

        if response.status_code == 204 or not response.content:
            return []
        data = response.json()
        if isinstance(data, dict):
            return [data]
        return data or []


async def probe_backend(http: httpx.AsyncClient, credentials: BackendCredentials) -> None:
    """Testa a conexão com GET na raiz da API REST; levanta ConfigurationError se falhar"""
    try:
        response = await http.get(
            f"{credentials.rest_url}/",
            headers={
                "apikey": credentials.anon_key,
                "Authorization": f"Bearer {credentials.anon_key}",
                "Content-Type": "application/json",
            }
        )
    except httpx.HTTPError as e:
        logger.error(f"Erro ao testar conexão: {e}")
        raise ConfigurationError(f"Erro: {e}") from e

    if response.is_error:
        raise ConfigurationError(f"Conexão falhou: HTTP {response.status_code}")

    logger.info("Conexão com o backend testada com sucesso")
