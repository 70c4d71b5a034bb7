"""Payload builders: construção de payloads para APIs externas.

Estrutura:
- sms/: corpo de envio de texto (uma mensagem, um destino)
"""

__all__: list[str] = []
