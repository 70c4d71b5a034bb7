"""Normalizers: conversão de respostas externas para modelos internos."""

from .sms import normalize_failure, normalize_success

__all__ = [
    "normalize_failure",
    "normalize_success",
]
