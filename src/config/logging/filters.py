"""Filter de contexto para os logs do cliente SMS.

Cada record recebe:
- correlation_id: ID do envio, definido por scripts/send_sms.py ou pelo
  chamador via app.observability.set_correlation_id
- service: nome do serviço (SERVICE_NAME, padrão pyloto_sms)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Anexa correlation_id e service aos records de envio de SMS.

    Um correlation_id passado em `extra` tem precedência sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
