"""Contratos canônicos do envio de SMS.

Modelos imutáveis, construídos e descartados dentro de uma única chamada.
O resultado é discriminado pelo campo `success`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ErrorKind = Literal["provider_error", "transport_error", "malformed_response"]


@dataclass(frozen=True)
class AccountConfig:
    """Credenciais da conta no provedor.

    Attributes:
        domain: Host da API específico da conta (ex: xyz.api.example.com)
        api_key: Chave de API usada no header Authorization
    """

    domain: str
    api_key: str

    def __repr__(self) -> str:
        return f"AccountConfig(domain={self.domain!r}, api_key='***')"


@dataclass(frozen=True)
class OutboundSms:
    """Mensagem a enviar: um destino (MSISDN) e um texto."""

    destination: str
    text: str


@dataclass(frozen=True)
class SmsSendSuccess:
    """Resultado de envio aceito pelo provedor."""

    message_id: str
    status: str
    category: str
    success: Literal[True] = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": True,
            "messageId": self.message_id,
            "status": self.status,
            "category": self.category,
        }


@dataclass(frozen=True)
class SmsSendFailure:
    """Resultado de envio com falha (provedor, transporte ou resposta inválida).

    Attributes:
        error_message: Mensagem legível do erro
        error_kind: Origem da falha
        error_details: Corpo de erro estruturado do provedor, quando existir
    """

    error_message: str
    error_kind: ErrorKind
    error_details: dict[str, Any] | None = None
    success: Literal[False] = False

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "success": False,
            "errorMessage": self.error_message,
        }
        if self.error_details is not None:
            record["errorDetails"] = self.error_details
        return record


SmsSendResult = SmsSendSuccess | SmsSendFailure
