"""Validação de campos obrigatórios do envio de SMS."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from utils.errors import SmsValidationError

if TYPE_CHECKING:
    from app.protocols.models import AccountConfig

logger = logging.getLogger(__name__)


def require_field(value: Any, field_name: str) -> None:
    """Falha se o valor estiver ausente ou vazio (falsy).

    Raises:
        SmsValidationError: Identificando o campo ofendido.
    """
    if not value:
        logger.warning("sms_required_field_missing", extra={"field": field_name})
        raise SmsValidationError(field_name)


def validate_send_request(config: AccountConfig, destination: str, text: str) -> None:
    """Valida os quatro campos exigidos antes de qualquer IO."""
    require_field(config.domain, "domain")
    require_field(config.api_key, "api_key")
    require_field(destination, "destination")
    require_field(text, "text")
