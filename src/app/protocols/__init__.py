"""Protocolos e contratos do core da aplicação."""

from .http_client import SmsTransportProtocol
from .models import (
    AccountConfig,
    ErrorKind,
    OutboundSms,
    SmsSendFailure,
    SmsSendResult,
    SmsSendSuccess,
)
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "AccountConfig",
    "ErrorKind",
    "OutboundSms",
    "PayloadBuilderProtocol",
    "SmsSendFailure",
    "SmsSendResult",
    "SmsSendSuccess",
    "SmsTransportProtocol",
]
