"""Contrato da resposta de sucesso do provedor de SMS.

Validado com pydantic para que um corpo fora do formato vire uma falha
`malformed_response` em vez de uma exceção não tratada.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProviderMessageStatus(BaseModel):
    """Status de aceitação de uma mensagem."""

    model_config = ConfigDict(extra="ignore")

    name: str
    group_name: str = Field(alias="groupName")


class ProviderSentMessage(BaseModel):
    """Mensagem aceita pelo provedor."""

    model_config = ConfigDict(extra="ignore")

    message_id: str = Field(alias="messageId")
    status: ProviderMessageStatus


class ProviderSendResponse(BaseModel):
    """Corpo de sucesso: `{messages: [{messageId, status: {name, groupName}}]}`."""

    model_config = ConfigDict(extra="ignore")

    messages: list[ProviderSentMessage] = Field(min_length=1)
