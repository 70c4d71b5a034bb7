"""Helpers de logging para a API de SMS (sem PII).

Nunca loga api_key, número de destino ou texto da mensagem.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_provider_error(endpoint: str, status_code: int, has_body: bool) -> None:
    """Loga resposta de erro HTTP do provedor."""
    logger.warning(
        "sms_provider_error",
        extra={
            "endpoint": endpoint,
            "status_code": status_code,
            "structured_body": has_body,
        },
    )


def log_transport_error(endpoint: str, error_type: str) -> None:
    """Loga falha de rede (DNS, timeout, conexão recusada)."""
    logger.warning(
        "sms_transport_error",
        extra={"endpoint": endpoint, "error_type": error_type},
    )


def log_success(endpoint: str, status_code: int) -> None:
    """Loga envio aceito."""
    logger.debug(
        "sms_send_success",
        extra={"endpoint": endpoint, "status_code": status_code},
    )
