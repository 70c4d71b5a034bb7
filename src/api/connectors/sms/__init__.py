"""Conector SMS - adapter de borda para a API HTTP do provedor.

Este módulo é o único ponto de IO para o canal SMS.
Responsabilidades:
- Montagem de URL e headers de autenticação
- HTTP client (envia JSON, recebe JSON ou erro)
- Contrato da resposta de sucesso e parsing de erros do provedor
"""

from .http_client import SmsHttpClient, create_sms_http_client
from .provider_errors import extract_service_exception_text
from .request_builders import build_headers, build_url

__all__ = [
    "SmsHttpClient",
    "build_headers",
    "build_url",
    "create_sms_http_client",
    "extract_service_exception_text",
]
