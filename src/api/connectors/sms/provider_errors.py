"""Helpers de parsing para erros estruturados do provedor de SMS."""

from __future__ import annotations

from typing import Any


def extract_service_exception_text(response_body: dict[str, Any]) -> str | None:
    """Extrai `requestError.serviceException.text` do corpo de erro.

    Returns:
        Texto do erro, ou None se o corpo não segue o formato esperado.
    """
    request_error = response_body.get("requestError")
    if not isinstance(request_error, dict):
        return None

    service_exception = request_error.get("serviceException")
    if not isinstance(service_exception, dict):
        return None

    text = service_exception.get("text")
    if not isinstance(text, str) or not text:
        return None
    return text
