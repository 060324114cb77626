"""
Controle Fotógrafo - Exceptions
Taxonomia de erros da aplicação
"""
from typing import Dict, Optional


class AppError(Exception):
    """Base de todos os erros da aplicação"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(AppError):
    """URL ou chave do backend ausente/inválida - exige reconfiguração"""
    status_code = 503


class BackendError(AppError):
    """Falha de rede ou erro retornado pelo backend hospedado"""
    status_code = 502

    def __init__(self, message: str, status: Optional[int] = None, table: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.table = table


class AuthError(AppError):
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class TemplateNotFoundError(NotFoundError):
    def __init__(self, event_type_id: Optional[str] = None):
        super().__init__("Modelo de contrato não encontrado para este tipo de evento")
        self.event_type_id = event_type_id


class SelectionError(AppError):
    """Combinação de tipo de evento / pacote / forma de pagamento não configurada"""
    status_code = 422

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field


class CatalogLoadError(BackendError):
    """Alguma das buscas do catálogo falhou; o catálogo inteiro é descartado"""


class FormValidationError(AppError):
    """Erros de formulário coletados campo a campo"""
    status_code = 422

    def __init__(self, errors: Dict[str, str]):
        super().__init__("Dados do formulário inválidos")
        self.errors = errors
