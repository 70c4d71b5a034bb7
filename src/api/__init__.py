"""API: camada de borda com o provedor de SMS.

Subpastas:
- connectors/: adapter HTTP (URL, headers, transporte httpx, erros do provedor)
- normalizers/: respostas do provedor → SmsSendResult
- payload_builders/: corpo JSON de envio
- validators/: campos obrigatórios antes de qualquer IO

NÃO PODE conter: orquestração de use cases.
"""
