"""actions.json — tells action clients which paths on this host are actions."""

from __future__ import annotations

from fastapi import APIRouter

from airdrop_checker.actions.schemas import ActionRule, ActionsJson

router = APIRouter(tags=["actions"])

ACTION_RULES = [ActionRule(pathPattern="/api/action/**", apiPath="/api/action/**")]


@router.get("/actions.json", response_model=ActionsJson)
async def actions_json() -> ActionsJson:
    return ActionsJson(rules=ACTION_RULES)
