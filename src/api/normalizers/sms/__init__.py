"""Normalizer SMS: respostas do provedor para o modelo interno SmsSendResult.

Responsabilidades:
- Mapear corpo de sucesso (messageId, status.name, status.groupName)
- Mapear erros estruturados do provedor e falhas de rede
"""

from .response import normalize_failure, normalize_success

__all__ = ["normalize_failure", "normalize_success"]
