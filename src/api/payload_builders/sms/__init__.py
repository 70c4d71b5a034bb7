"""Builders de payload para o provedor de SMS."""

from .text import TextSmsPayloadBuilder, build_request_body

__all__ = ["TextSmsPayloadBuilder", "build_request_body"]
