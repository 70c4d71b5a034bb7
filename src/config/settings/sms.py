"""Settings específicas de SMS.

Configurações do canal SMS via API HTTP do provedor. Opcionais: o envio
recebe AccountConfig explícito e nunca lê o ambiente por conta própria.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.sms.request_builders import build_url

if TYPE_CHECKING:
    from app.protocols.models import AccountConfig


@dataclass(frozen=True)
class SmsSettings:
    """Configurações do canal SMS.

    Attributes:
        api_domain: Host da API específico da conta
        api_key: Chave de API do provedor
        request_timeout_seconds: Timeout HTTP; None usa o padrão do httpx
        verify_ssl: Verificação de certificado TLS
    """

    api_domain: str = ""
    api_key: str = ""
    request_timeout_seconds: float | None = None
    verify_ssl: bool = True

    @property
    def messages_endpoint(self) -> str:
        """URL completa de envio para o domínio configurado.

        Raises:
            ValueError: Se api_domain não configurado.
        """
        if not self.api_domain:
            raise ValueError("api_domain é obrigatório")
        return build_url(self.api_domain)

    def account_config(self) -> AccountConfig:
        """Converte as credenciais configuradas em AccountConfig."""
        from app.protocols.models import AccountConfig

        return AccountConfig(domain=self.api_domain, api_key=self.api_key)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de SMS.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_domain:
            errors.append("SMS_API_DOMAIN não configurado")

        if not self.api_key:
            errors.append("SMS_API_KEY não configurado")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("SMS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    raw = raw.strip()
    return float(raw) if raw else None


def _load_from_env() -> SmsSettings:
    """Carrega SmsSettings a partir de variáveis de ambiente."""
    return SmsSettings(
        api_domain=os.getenv("SMS_API_DOMAIN", ""),
        api_key=os.getenv("SMS_API_KEY", ""),
        request_timeout_seconds=_parse_timeout(os.getenv("SMS_REQUEST_TIMEOUT_SECONDS", "")),
        verify_ssl=os.getenv("SMS_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_sms_settings() -> SmsSettings:
    """Retorna instância cacheada de SmsSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
