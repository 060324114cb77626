"""
Controle Fotógrafo - Configuration
Settings da aplicação e resolução das credenciais do backend hospedado
"""
import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Carrega .env com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)

MIN_KEY_LENGTH = 20


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Controle Fotógrafo"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Backend hospedado (tabelas REST + auth)
    BACKEND_URL: Optional[str] = None
    BACKEND_ANON_KEY: Optional[str] = None
    BACKEND_CREDENTIALS_FILE: str = ".backend_credentials.json"
    BACKEND_TIMEOUT_SECONDS: float = 10.0

    # Rate limit do login
    LOGIN_RATE_LIMIT: str = "5/minute"

    # Link público do formulário do cliente
    CLIENT_FORM_URL: str = "http://localhost:3000/?client=true"

    # CORS
    CORS_ORIGINS: list = ["*"]

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


@dataclass(frozen=True)
class BackendCredentials:
    """URL e chave pública do backend, com a origem de onde vieram"""
    url: str
    anon_key: str
    source: str = "environment"

    @property
    def rest_url(self) -> str:
        return f"{self.url}/rest/v1"

    @property
    def auth_url(self) -> str:
        return f"{self.url}/auth/v1"


def is_valid_backend_url(url: Optional[str]) -> bool:
    """URL precisa ser https e ter host"""
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme == "https" and bool(parsed.netloc)


def is_valid_anon_key(key: Optional[str]) -> bool:
    return bool(key) and len(key) > MIN_KEY_LENGTH


def validate_credentials(url: Optional[str], anon_key: Optional[str], source: str) -> BackendCredentials:
    """Valida URL e chave, levantando ConfigurationError com a mensagem para o usuário"""
    if not url or not anon_key:
        raise ConfigurationError("Preencha URL e chave antes de continuar")
    if not is_valid_backend_url(url):
        raise ConfigurationError("URL do backend inválida (use https://seu-projeto...)")
    if not is_valid_anon_key(anon_key):
        raise ConfigurationError("Chave pública do backend inválida")
    return BackendCredentials(url=url.rstrip("/"), anon_key=anon_key, source=source)


class CredentialStore:
    """Credenciais informadas pelo usuário em tempo de execução, persistidas em JSON"""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or settings.BACKEND_CREDENTIALS_FILE)

    def load(self) -> Optional[dict]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Arquivo de credenciais ilegível ({self.path}): {e}")
            return None
        if not isinstance(data, dict):
            return None
        return data

    def save(self, credentials: BackendCredentials):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"url": credentials.url, "anon_key": credentials.anon_key}),
            encoding="utf-8"
        )
        logger.info(f"Credenciais do backend salvas em {self.path}")

    def clear(self):
        if self.path.exists():
            self.path.unlink()
            logger.info("Credenciais persistidas removidas")


def resolve_backend_credentials(
    override: Optional[BackendCredentials] = None,
    store: Optional[CredentialStore] = None,
    app_settings: Optional[Settings] = None,
) -> BackendCredentials:
    """
    Resolve as credenciais do backend.

    Precedência: override em tempo de execução > credenciais persistidas
    pelo usuário > variáveis de ambiente. Fontes inválidas são ignoradas
    e a próxima é tentada; sem nenhuma válida, levanta ConfigurationError.
    """
    app_settings = app_settings or settings
    store = store or CredentialStore(app_settings.BACKEND_CREDENTIALS_FILE)

    candidates = []
    if override is not None:
        candidates.append((override.url, override.anon_key, "override"))
    persisted = store.load()
    if persisted:
        candidates.append((persisted.get("url"), persisted.get("anon_key"), "persisted"))
    candidates.append((app_settings.BACKEND_URL, app_settings.BACKEND_ANON_KEY, "environment"))

    for url, key, source in candidates:
        if is_valid_backend_url(url) and is_valid_anon_key(key):
            logger.info(f"Backend URL: Configurado (origem: {source})")
            return BackendCredentials(url=url.rstrip("/"), anon_key=key, source=source)
        if url or key:
            logger.warning(f"Credenciais do backend inválidas na origem '{source}', ignorando")

    logger.warning("Credenciais do backend não encontradas!")
    raise ConfigurationError("Credenciais do backend não configuradas")
