"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_send_sms_use_case

    initialize_app()
    use_case = create_send_sms_use_case()
"""

from __future__ import annotations

import logging

from app.bootstrap.sms_factory import (
    create_default_sms_transport,
    create_send_sms_use_case,
    create_sms_transport,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_sms_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings de base e SMS.

    Em `staging`/`production` falha rápido; em `development` apenas alerta.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"sms: {error}" for error in get_sms_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


__all__ = [
    "create_default_sms_transport",
    "create_send_sms_use_case",
    "create_sms_transport",
    "initialize_app",
    "validate_runtime_settings",
]
