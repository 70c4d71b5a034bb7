"""Builder para SMS de texto."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import OutboundSms


def build_request_body(destination: str, text: str) -> dict[str, Any]:
    """Constrói o corpo de envio do provedor.

    Sempre uma mensagem com um único destino; envio em lote não é suportado.

    Args:
        destination: MSISDN de destino
        text: Texto da mensagem

    Returns:
        {"messages": [{"destinations": [{"to": ...}], "text": ...}]}
    """
    return {
        "messages": [
            {
                "destinations": [{"to": destination}],
                "text": text,
            }
        ]
    }


class TextSmsPayloadBuilder:
    """Builder para SMS de texto simples."""

    def build(self, message: OutboundSms) -> dict[str, Any]:
        return build_request_body(message.destination, message.text)
