"""Airdrop eligibility action — GET/OPTIONS describe it, POST runs the check."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from airdrop_checker.actions.address import parse_wallet_address
from airdrop_checker.actions.schemas import (
    ActionGetResponse,
    ActionLinks,
    ActionMessageResponse,
    ActionPostRequest,
    ActionPostResponse,
    ErrorResponse,
    LinkedAction,
)
from airdrop_checker.actions.transaction import create_self_transfer_transaction
from airdrop_checker.eligibility.evaluator import EligibilityEvaluator
from airdrop_checker.eligibility.models import EligibilityResult
from airdrop_checker.exceptions import InvalidRequestError

router = APIRouter(prefix="/api/action", tags=["actions"])

CHECK_ACTION = "check"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while processing the airdrop check."

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _invalid_action() -> JSONResponse:
    return JSONResponse(ErrorResponse(error="Invalid action").model_dump(), status_code=400)


def _failure_message(exc: Exception) -> str:
    detail = str(exc)
    if not detail:
        return UNKNOWN_ERROR_MESSAGE
    return f"Failed to process airdrop check: {detail}"


def _summary(header: str, results: list[EligibilityResult]) -> str:
    return header + "\n" + "\n".join(r.reason for r in results)


async def _read_post_body(request: Request) -> ActionPostRequest:
    try:
        raw = await request.json()
    except ValueError as e:
        raise InvalidRequestError("Request body is not valid JSON") from e
    try:
        return ActionPostRequest.model_validate(raw)
    except ValidationError as e:
        raise InvalidRequestError("Request body must include an 'account' string") from e


@router.api_route("/claim-rent", methods=["GET", "OPTIONS"], responses=_ERROR_RESPONSES)
async def describe_action(request: Request, action: str | None = None) -> JSONResponse:
    """Action descriptor. OPTIONS answers the same for preflight clients."""
    if action != CHECK_ACTION:
        return _invalid_action()

    cfg = request.app.state.settings
    payload = ActionGetResponse(
        icon=cfg.action_icon_url,
        title=cfg.action_title,
        description=cfg.action_description,
        label=cfg.action_label,
        links=ActionLinks(
            actions=[
                LinkedAction(
                    label="Check Eligibility",
                    href=str(request.url.replace(query=f"action={CHECK_ACTION}")),
                    type="transaction",
                )
            ]
        ),
    )
    return JSONResponse(payload.model_dump())


@router.post("/claim-rent", responses=_ERROR_RESPONSES)
async def check_airdrops(request: Request, action: str | None = None) -> JSONResponse:
    """Evaluate every configured airdrop for ``account``.

    Nothing eligible -> informational message only.
    Anything eligible -> unsigned self-transfer for the wallet to sign,
    with the summary as its message.
    """
    if action != CHECK_ACTION:
        return _invalid_action()

    cfg = request.app.state.settings
    try:
        body = await _read_post_body(request)
        pubkey = parse_wallet_address(body.account)
        address = str(pubkey)
        logger.info(f"[ACTION] Checking airdrops for address: {address}")

        async with request.app.state.open_clients(cfg) as clients:
            evaluator = EligibilityEvaluator(
                request.app.state.criteria,
                holdings_source=clients.helius,
                rpc=clients.rpc,
                concurrent=cfg.evaluate_criteria_concurrently,
            )
            results = await evaluator.evaluate(address)
            eligible = [r for r in results if r.eligible]

            if not eligible:
                message = _summary("No eligible airdrops found.", results)
                return JSONResponse(ActionMessageResponse(message=message).model_dump())

            transaction = await create_self_transfer_transaction(
                clients.rpc, pubkey, lamports=cfg.demo_transfer_lamports
            )

        payload = ActionPostResponse(
            transaction=transaction,
            message=_summary(f"Found {len(eligible)} eligible airdrops:", results),
        )
        return JSONResponse(payload.model_dump())

    except Exception as e:
        logger.error(f"[ACTION] Error processing airdrop check: {type(e).__name__}: {e}")
        return JSONResponse(
            ErrorResponse(error=_failure_message(e)).model_dump(), status_code=500
        )
