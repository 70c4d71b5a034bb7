"""Use case para envio de um SMS."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.sms.request_builders import build_headers, build_url
from api.normalizers.sms.response import normalize_failure, normalize_success
from api.payload_builders.sms.text import TextSmsPayloadBuilder
from api.validators.sms.required import validate_send_request
from app.protocols.models import OutboundSms
from utils.errors import MalformedProviderResponseError, SmsTransportError

if TYPE_CHECKING:
    from app.protocols.http_client import SmsTransportProtocol
    from app.protocols.models import AccountConfig, SmsSendResult
    from app.protocols.payload_builder import PayloadBuilderProtocol

logger = logging.getLogger(__name__)


class SendSmsUseCase:
    """Orquestra validação, build, envio e normalização.

    Chamada malformada falha com exceção (SmsValidationError) antes de IO;
    falha do provedor ou da rede volta como SmsSendFailure.
    """

    def __init__(
        self,
        transport: SmsTransportProtocol,
        builder: PayloadBuilderProtocol | None = None,
    ) -> None:
        self._transport = transport
        self._builder = builder or TextSmsPayloadBuilder()

    async def execute(
        self,
        config: AccountConfig,
        destination: str,
        text: str,
    ) -> SmsSendResult:
        """Envia um SMS e retorna o resultado normalizado.

        Raises:
            SmsValidationError: Se domain, api_key, destination ou text vazio.
        """
        validate_send_request(config, destination, text)

        url = build_url(config.domain)
        payload = self._builder.build(OutboundSms(destination=destination, text=text))
        headers = build_headers(config.api_key)

        try:
            response_body = await self._transport.post_json(url, payload, headers)
        except (SmsTransportError, MalformedProviderResponseError) as exc:
            result = normalize_failure(exc)
            logger.info("sms_send_failed", extra={"error_kind": result.error_kind})
            return result

        return normalize_success(response_body)


async def send_sms(
    config: AccountConfig,
    destination: str,
    text: str,
    *,
    transport: SmsTransportProtocol | None = None,
) -> SmsSendResult:
    """Envia um SMS pelo provedor.

    Args:
        config: Domínio e api_key da conta
        destination: MSISDN de destino (formato internacional)
        text: Texto da mensagem
        transport: Transporte opcional; padrão é SmsHttpClient sem timeout próprio

    Returns:
        SmsSendSuccess ou SmsSendFailure

    Raises:
        SmsValidationError: Se algum campo obrigatório estiver vazio.
    """
    if transport is None:
        # Import local: wiring concreto fica no bootstrap
        from app.bootstrap.sms_factory import create_default_sms_transport

        transport = create_default_sms_transport()

    return await SendSmsUseCase(transport).execute(config, destination, text)
