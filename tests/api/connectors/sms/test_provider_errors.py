"""Testes para extração de erro estruturado do provedor."""

from __future__ import annotations

from typing import Any

import pytest

from api.connectors.sms.provider_errors import extract_service_exception_text


def test_extracts_service_exception_text(auth_error_body: dict[str, Any]) -> None:
    assert extract_service_exception_text(auth_error_body) == "Invalid login details"


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"requestError": "boom"},
        {"requestError": {}},
        {"requestError": {"serviceException": None}},
        {"requestError": {"serviceException": {"messageId": "BAD_REQUEST"}}},
        {"requestError": {"serviceException": {"text": ""}}},
        {"requestError": {"serviceException": {"text": 42}}},
    ],
)
def test_returns_none_for_unexpected_shapes(body: dict[str, Any]) -> None:
    assert extract_service_exception_text(body) is None
