"""Montagem de URL e headers para a API de SMS do provedor."""

from __future__ import annotations

SEND_SMS_PATH = "/sms/2/text/advanced"
AUTH_SCHEME = "App"


def build_url(domain: str) -> str:
    """Retorna o endpoint de envio para o domínio da conta.

    O domínio é entrada confiável do chamador: não há escape nem encoding.
    """
    return f"https://{domain}{SEND_SMS_PATH}"


def build_headers(api_key: str) -> dict[str, str]:
    """Headers de autenticação e content-type (esquema `App {api_key}`)."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"{AUTH_SCHEME} {api_key}",
    }
