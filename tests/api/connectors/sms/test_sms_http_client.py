"""Testes do SmsHttpClient usando httpx.MockTransport (sem rede)."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from api.connectors.sms.http_base import HttpClientConfig
from api.connectors.sms.http_client import SmsHttpClient, create_sms_http_client
from config.settings import SmsSettings
from utils.errors import MalformedProviderResponseError, SmsTransportError

URL = "https://x.api.example.com/sms/2/text/advanced"
HEADERS = {"Content-Type": "application/json", "Authorization": "App KEY"}
PAYLOAD = {"messages": [{"destinations": [{"to": "+15551234567"}], "text": "hi"}]}


def _client_with(handler: Any) -> SmsHttpClient:
    return SmsHttpClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class TestPostJsonSuccess:
    """Respostas 2xx."""

    @pytest.mark.asyncio
    async def test_returns_decoded_body(self, success_body: dict[str, Any]) -> None:
        """Corpo JSON de sucesso é retornado como dict."""
        client = _client_with(lambda request: httpx.Response(200, json=success_body))

        result = await client.post_json(URL, PAYLOAD, HEADERS)

        assert result == success_body

    @pytest.mark.asyncio
    async def test_sends_single_post_with_json_and_headers(
        self, success_body: dict[str, Any]
    ) -> None:
        """Uma única requisição POST com corpo JSON e headers informados."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=success_body)

        await _client_with(handler).post_json(URL, PAYLOAD, HEADERS)

        assert len(requests) == 1
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers["Authorization"] == "App KEY"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == PAYLOAD

    @pytest.mark.asyncio
    async def test_default_headers_are_merged(self, success_body: dict[str, Any]) -> None:
        """default_headers da config entram na requisição."""
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json=success_body)

        client = SmsHttpClient(
            config=HttpClientConfig(default_headers={"User-Agent": "pyloto-sms"}),
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        await client.post_json(URL, PAYLOAD, HEADERS)

        assert seen["user-agent"] == "pyloto-sms"
        assert seen["authorization"] == "App KEY"

    @pytest.mark.asyncio
    async def test_non_json_success_raises_malformed(self) -> None:
        """2xx com corpo não-JSON levanta MalformedProviderResponseError."""
        client = _client_with(lambda request: httpx.Response(200, text="<html>ok</html>"))

        with pytest.raises(MalformedProviderResponseError):
            await client.post_json(URL, PAYLOAD, HEADERS)

    @pytest.mark.asyncio
    async def test_json_array_success_raises_malformed(self) -> None:
        """2xx com JSON que não é objeto levanta MalformedProviderResponseError."""
        client = _client_with(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(MalformedProviderResponseError):
            await client.post_json(URL, PAYLOAD, HEADERS)


class TestPostJsonErrors:
    """Status de erro e falhas de rede."""

    @pytest.mark.asyncio
    async def test_status_error_carries_structured_body(
        self, auth_error_body: dict[str, Any]
    ) -> None:
        """401 com corpo JSON vira SmsTransportError com response_body."""
        client = _client_with(lambda request: httpx.Response(401, json=auth_error_body))

        with pytest.raises(SmsTransportError) as exc_info:
            await client.post_json(URL, PAYLOAD, HEADERS)

        error = exc_info.value
        assert error.status_code == 401
        assert error.response_body == auth_error_body
        assert str(error) == "Request failed with status code 401"

    @pytest.mark.asyncio
    async def test_status_error_without_json_has_no_body(self) -> None:
        """502 com corpo texto vira SmsTransportError sem response_body."""
        client = _client_with(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(SmsTransportError) as exc_info:
            await client.post_json(URL, PAYLOAD, HEADERS)

        assert exc_info.value.status_code == 502
        assert exc_info.value.response_body is None

    @pytest.mark.asyncio
    async def test_connection_error_has_message_and_no_body(self) -> None:
        """Conexão recusada vira SmsTransportError com a mensagem original."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(SmsTransportError) as exc_info:
            await _client_with(handler).post_json(URL, PAYLOAD, HEADERS)

        error = exc_info.value
        assert str(error) == "Connection refused"
        assert error.status_code is None
        assert error.response_body is None

    @pytest.mark.asyncio
    async def test_timeout_without_message_uses_exception_name(self) -> None:
        """Erro de rede sem mensagem usa o nome da exceção."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("", request=request)

        with pytest.raises(SmsTransportError, match="ReadTimeout"):
            await _client_with(handler).post_json(URL, PAYLOAD, HEADERS)

    @pytest.mark.asyncio
    async def test_does_not_retry(self) -> None:
        """Falha não é repetida."""
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(503, json={})

        with pytest.raises(SmsTransportError):
            await _client_with(handler).post_json(URL, PAYLOAD, HEADERS)

        assert calls == 1

    @pytest.mark.asyncio
    async def test_non_ascii_header_becomes_transport_error(self) -> None:
        """Header não codificável em ASCII falha antes do envio, sem corpo."""
        calls = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal calls
            calls += 1
            return httpx.Response(200, json={})

        headers = {**HEADERS, "Authorization": "App chavé"}
        with pytest.raises(SmsTransportError) as exc_info:
            await _client_with(handler).post_json(URL, PAYLOAD, headers)

        assert exc_info.value.status_code is None
        assert exc_info.value.response_body is None
        assert calls == 0


class TestHttpClientClose:
    """Testes de encerramento do client injetado."""

    @pytest.mark.asyncio
    async def test_aclose_closes_injected_client(self) -> None:
        inner = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        client = SmsHttpClient(client=inner)

        await client.aclose()

        assert inner.is_closed

    @pytest.mark.asyncio
    async def test_async_with_closes_injected_client(self, success_body: dict[str, Any]) -> None:
        inner = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200, json=success_body))
        )

        async with SmsHttpClient(client=inner) as client:
            assert await client.post_json(URL, PAYLOAD, HEADERS) == success_body

        assert inner.is_closed

    @pytest.mark.asyncio
    async def test_aclose_without_injected_client_is_noop(self) -> None:
        await SmsHttpClient().aclose()


class TestCreateSmsHttpClient:
    """Factory a partir de SmsSettings."""

    def test_factory_uses_settings(self) -> None:
        """Timeout e verify_ssl vêm das settings."""
        settings = SmsSettings(
            api_domain="x.api.example.com",
            api_key="KEY",
            request_timeout_seconds=12.5,
            verify_ssl=False,
        )

        client = create_sms_http_client(settings)

        assert isinstance(client, SmsHttpClient)
        assert client._config.timeout_seconds == 12.5
        assert client._config.verify_ssl is False

    def test_factory_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem settings explícitas, carrega do ambiente."""
        monkeypatch.setenv("SMS_REQUEST_TIMEOUT_SECONDS", "7")

        client = create_sms_http_client()

        assert client._config.timeout_seconds == 7.0
