"""Exceções do cliente SMS.

Duas famílias:
- Pré-condições violadas (SmsValidationError): levantadas antes de qualquer IO.
- Falhas de execução (SmsTransportError, MalformedProviderResponseError):
  levantadas pelo transporte e convertidas em resultado pelo normalizer.
"""

from __future__ import annotations

from typing import Any


class SmsError(Exception):
    """Base para erros do cliente SMS."""


class SmsValidationError(SmsError, ValueError):
    """Campo obrigatório ausente ou vazio na chamada de envio."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"{field} é obrigatório")
        self.field = field


class SmsTransportError(SmsError):
    """Falha ao executar a requisição HTTP.

    Attributes:
        status_code: Status HTTP quando o provedor respondeu.
        response_body: Corpo JSON estruturado da resposta de erro, se houver.
            None para falhas de rede (DNS, timeout, conexão recusada).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class MalformedProviderResponseError(SmsError):
    """Resposta de sucesso do provedor fora do contrato esperado."""
