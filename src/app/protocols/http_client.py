"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class SmsTransportProtocol(Protocol):
    """Contrato mínimo de transporte: envia JSON, recebe JSON ou erro.

    Implementações levantam SmsTransportError em falha de rede ou status
    HTTP de erro, e MalformedProviderResponseError quando o corpo de
    sucesso não é JSON.
    """

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> dict[str, Any]: ...
