"""Validators para SMS.

Responsabilidades:
- Garantir campos obrigatórios (domain, api_key, destination, text)
  antes de qualquer chamada de rede
"""

from api.validators.sms.required import require_field, validate_send_request

__all__ = ["require_field", "validate_send_request"]
