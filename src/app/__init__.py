"""App: orquestração, contratos e wiring do envio de SMS.

Subpastas:
- bootstrap/: composition root (factories, logging, validação de settings)
- use_cases/: caso de uso de envio (send_sms)
- protocols/: contratos/interfaces e modelos de resultado
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
