"""Validators: validação de chamadas antes de acionar APIs externas.

Estrutura:
- sms/: campos obrigatórios do envio de SMS
"""

__all__: list[str] = []
