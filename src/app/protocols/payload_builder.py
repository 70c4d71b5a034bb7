"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import OutboundSms


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir payloads de envio."""

    def build(self, message: OutboundSms) -> dict[str, Any]: ...
