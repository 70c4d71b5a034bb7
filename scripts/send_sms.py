#!/usr/bin/env python3
"""Envia um SMS pelo provedor e imprime o resultado em JSON.

Uso:
    SMS_API_DOMAIN=xyz.api.example.com SMS_API_KEY=... \
        python scripts/send_sms.py +5511999998888 "Olá"

    python scripts/send_sms.py --domain xyz.api.example.com --api-key KEY +15551234567 "hello"

Códigos de saída: 0 sucesso, 1 falha de envio, 2 chamada inválida.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from app.bootstrap import create_sms_transport, initialize_app
from app.observability import reset_correlation_id, set_correlation_id
from app.protocols.models import AccountConfig
from app.use_cases.sms import send_sms
from config.settings import get_sms_settings
from utils.errors import SmsValidationError


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Envia um SMS.")
    parser.add_argument("destination", help="MSISDN de destino (ex: +5511999998888)")
    parser.add_argument("text", help="Texto da mensagem")
    parser.add_argument("--domain", default=None, help="Sobrescreve SMS_API_DOMAIN")
    parser.add_argument("--api-key", default=None, help="Sobrescreve SMS_API_KEY")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    settings = get_sms_settings()
    config = AccountConfig(
        domain=args.domain or settings.api_domain,
        api_key=args.api_key or settings.api_key,
    )

    token = set_correlation_id()
    try:
        result = await send_sms(
            config,
            args.destination,
            args.text,
            transport=create_sms_transport(settings),
        )
    except SmsValidationError as exc:
        print(f"Chamada inválida: {exc}", file=sys.stderr)
        return 2
    finally:
        reset_correlation_id(token)

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.success else 1


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    initialize_app()
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
