"""Normalizer da resposta de envio SMS: converte para ResultRecord."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from api.connectors.sms.models import ProviderSendResponse
from api.connectors.sms.provider_errors import extract_service_exception_text
from app.protocols.models import SmsSendFailure, SmsSendResult, SmsSendSuccess
from utils.errors import MalformedProviderResponseError, SmsTransportError

logger = logging.getLogger(__name__)

MALFORMED_RESPONSE_MESSAGE = "Resposta do provedor fora do formato esperado"


def normalize_success(response_body: dict[str, Any]) -> SmsSendResult:
    """Mapeia `messages[0]` do corpo de sucesso para SmsSendSuccess.

    Corpo sem `messages` (ou com lista vazia/campos ausentes) resulta em
    SmsSendFailure com error_kind="malformed_response".
    """
    try:
        parsed = ProviderSendResponse.model_validate(response_body)
    except ValidationError as exc:
        logger.warning(
            "sms_malformed_provider_response",
            extra={"validation_errors": exc.error_count()},
        )
        return SmsSendFailure(
            error_message=MALFORMED_RESPONSE_MESSAGE,
            error_kind="malformed_response",
            error_details=response_body,
        )

    first = parsed.messages[0]
    return SmsSendSuccess(
        message_id=first.message_id,
        status=first.status.name,
        category=first.status.group_name,
    )


def normalize_failure(
    error: SmsTransportError | MalformedProviderResponseError,
) -> SmsSendFailure:
    """Mapeia erro de transporte para SmsSendFailure.

    - Corpo de erro estruturado: mensagem de `requestError.serviceException.text`
      e corpo completo em error_details.
    - Sem corpo (falha de rede): mensagem do próprio erro, sem error_details.
    """
    if isinstance(error, MalformedProviderResponseError):
        return SmsSendFailure(
            error_message=str(error),
            error_kind="malformed_response",
        )

    if error.response_body is not None:
        service_text = extract_service_exception_text(error.response_body)
        return SmsSendFailure(
            error_message=service_text or str(error),
            error_kind="provider_error",
            error_details=error.response_body,
        )

    return SmsSendFailure(
        error_message=str(error),
        error_kind="transport_error",
    )
