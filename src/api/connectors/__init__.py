"""Connectors: adapters de borda para APIs externas.

Estrutura:
- sms/: API HTTP de envio de SMS do provedor
"""

__all__: list[str] = []
