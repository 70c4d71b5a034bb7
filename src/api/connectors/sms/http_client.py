"""Cliente HTTP especializado para a API de SMS do provedor.

Estende HttpClient genérico com o contrato "envia JSON, recebe JSON ou erro":
- Status HTTP de erro → SmsTransportError com o corpo estruturado, se houver
- Falha de rede (DNS, timeout, conexão recusada) → SmsTransportError sem corpo
- Resposta 2xx que não é JSON → MalformedProviderResponseError
- Logging estruturado sem PII (api_key, números, texto)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.sms.http_base import HttpClient, HttpClientConfig
from api.connectors.sms.provider_logging import (
    log_provider_error,
    log_success,
    log_transport_error,
)
from utils.errors import MalformedProviderResponseError, SmsTransportError

if TYPE_CHECKING:
    from config.settings import SmsSettings

logger: logging.Logger = logging.getLogger(__name__)


class SmsHttpClient(HttpClient):
    """Transporte httpx para o endpoint de envio de SMS.

    Implementa SmsTransportProtocol. Uma chamada = uma requisição.
    """

    async def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str],
    ) -> dict[str, Any]:
        """Executa POST JSON e retorna o corpo decodificado.

        Args:
            url: Endpoint completo de envio
            payload: Corpo JSON da requisição
            headers: Headers (Authorization, Content-Type)

        Returns:
            Corpo JSON da resposta de sucesso

        Raises:
            SmsTransportError: Falha de rede, status HTTP de erro ou requisição
                impossível de montar (ex: api_key com caractere não ASCII)
            MalformedProviderResponseError: Resposta 2xx sem JSON válido
        """
        try:
            response = await self.post(url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise _status_error(exc, url) from exc
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # UnicodeError: header ou URL não codificável ao montar a requisição
            log_transport_error(url, type(exc).__name__)
            raise SmsTransportError(str(exc) or type(exc).__name__) from exc

        return _decode_success(response, url)


def _status_error(exc: httpx.HTTPStatusError, endpoint: str) -> SmsTransportError:
    status_code = exc.response.status_code
    body = _decode_error_body(exc.response)
    log_provider_error(endpoint, status_code, has_body=body is not None)
    return SmsTransportError(
        f"Request failed with status code {status_code}",
        status_code=status_code,
        response_body=body,
    )


def _decode_error_body(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _decode_success(response: httpx.Response, endpoint: str) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError as exc:
        logger.error("sms_response_invalid_json", extra={"endpoint": endpoint})
        raise MalformedProviderResponseError("Response JSON inválido") from exc

    if not isinstance(body, dict):
        logger.error("sms_response_not_object", extra={"endpoint": endpoint})
        raise MalformedProviderResponseError("Response JSON não é um objeto")

    log_success(endpoint, response.status_code)
    return body


def create_sms_http_client(settings: SmsSettings | None = None) -> SmsHttpClient:
    """Factory para criar cliente SMS com config do ambiente.

    Args:
        settings: SmsSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para o provedor de SMS.
    """
    # Import local para evitar dependência circular
    from config.settings import get_sms_settings

    sms = settings or get_sms_settings()
    config = HttpClientConfig(
        timeout_seconds=sms.request_timeout_seconds,
        verify_ssl=sms.verify_ssl,
    )
    return SmsHttpClient(config=config)
