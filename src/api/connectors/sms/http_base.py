"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    timeout_seconds=None mantém o timeout padrão do httpx.
    """

    timeout_seconds: float | None = None
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Sem retry: cada chamada executa exatamente uma requisição.
    Sem client injetado, cada chamada abre e fecha o seu próprio AsyncClient;
    com client injetado, aclose() (ou `async with`) o encerra.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        request_kwargs: dict[str, Any] = {"json": json, "headers": merged_headers}
        if self._config.timeout_seconds is not None:
            request_kwargs["timeout"] = self._config.timeout_seconds

        if self._client is not None:
            return await self._client.post(url, **request_kwargs)

        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.post(url, **request_kwargs)

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient injetado, se houver."""
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
