"""Configuração do pytest para o cliente SMS."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.protocols.models import AccountConfig  # noqa: E402
from config.settings import get_base_settings, get_sms_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Evita que settings cacheadas vazem entre testes."""
    get_base_settings.cache_clear()
    get_sms_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_sms_settings.cache_clear()


@pytest.fixture
def account_config() -> AccountConfig:
    """Conta de teste."""
    return AccountConfig(domain="x.api.example.com", api_key="KEY")


@pytest.fixture
def success_body() -> dict[str, Any]:
    """Corpo de sucesso típico do provedor."""
    return {
        "messages": [
            {
                "messageId": "ID1",
                "status": {
                    "groupId": 1,
                    "groupName": "PENDING",
                    "id": 26,
                    "name": "PENDING_ACCEPTED",
                    "description": "Message sent to next instance",
                },
                "to": "+15551234567",
            }
        ]
    }


@pytest.fixture
def auth_error_body() -> dict[str, Any]:
    """Corpo de erro estruturado (credenciais inválidas)."""
    return {
        "requestError": {
            "serviceException": {
                "messageId": "UNAUTHORIZED",
                "text": "Invalid login details",
            }
        }
    }
