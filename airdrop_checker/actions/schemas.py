"""Action protocol request/response bodies."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LinkedAction(BaseModel):
    label: str
    href: str
    type: Literal["transaction", "message", "post", "external-link"] = "transaction"


class ActionLinks(BaseModel):
    actions: list[LinkedAction]


class ActionGetResponse(BaseModel):
    """Descriptor returned by GET/OPTIONS."""

    type: Literal["action"] = "action"
    icon: str
    title: str
    description: str
    label: str
    links: ActionLinks


class ActionPostRequest(BaseModel):
    account: str


class ActionPostResponse(BaseModel):
    """Signable transaction payload (base64, unsigned)."""

    type: Literal["transaction"] = "transaction"
    transaction: str
    message: str | None = None


class ActionMessageResponse(BaseModel):
    """Informational payload, no transaction attached."""

    message: str


class ActionRule(BaseModel):
    pathPattern: str
    apiPath: str


class ActionsJson(BaseModel):
    rules: list[ActionRule]


class ErrorResponse(BaseModel):
    error: str
