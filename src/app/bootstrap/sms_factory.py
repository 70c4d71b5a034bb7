"""Factory de wiring para SMS (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.sms.http_client import SmsHttpClient, create_sms_http_client
from app.use_cases.sms.send_sms import SendSmsUseCase

if TYPE_CHECKING:
    from app.protocols.http_client import SmsTransportProtocol
    from config.settings import SmsSettings


def create_default_sms_transport() -> SmsHttpClient:
    """Cria transporte sem ler ambiente (timeout padrão do httpx)."""
    return SmsHttpClient()


def create_sms_transport(settings: SmsSettings | None = None) -> SmsHttpClient:
    """Cria transporte configurado por SmsSettings (ou pelo ambiente)."""
    return create_sms_http_client(settings)


def create_send_sms_use_case(
    transport: SmsTransportProtocol | None = None,
) -> SendSmsUseCase:
    """Cria use case de envio com transporte injetado."""
    return SendSmsUseCase(transport=transport or create_sms_transport())
