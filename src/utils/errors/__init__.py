"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MalformedProviderResponseError,
    SmsError,
    SmsTransportError,
    SmsValidationError,
)

__all__ = [
    "MalformedProviderResponseError",
    "SmsError",
    "SmsTransportError",
    "SmsValidationError",
]
