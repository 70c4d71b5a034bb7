"""Agregador de settings do cliente SMS.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.sms import SmsSettings, get_sms_settings

__all__ = [
    "DEFAULT_SERVICE_NAME",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "SmsSettings",
    "get_base_settings",
    "get_sms_settings",
]
