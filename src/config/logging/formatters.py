"""Formatter JSON (python-json-logger) dos logs de envio de SMS."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Presentes em todo record; correlation_id e service vêm do CorrelationIdFilter
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado por configure_logging.

    Campos de `extra` dos eventos do conector (endpoint, status_code,
    structured_body, error_type) e do validador (field) saem como chaves
    de topo. api_key, número de destino e texto nunca são logados.

    Exemplo (sms_provider_error):
        {"asctime": "...", "level": "WARNING", "logger": "api.connectors.sms.provider_logging",
         "message": "sms_provider_error", "correlation_id": "abc-123",
         "service": "pyloto_sms", "endpoint": "https://x.api.example.com/sms/2/text/advanced",
         "status_code": 401, "structured_body": true}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
