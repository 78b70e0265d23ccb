"""Action protocol headers on every response."""

from __future__ import annotations

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from airdrop_checker.actions.headers import ACTIONS_CORS_HEADERS


class ActionHeadersMiddleware(BaseHTTPMiddleware):
    """Inject CORS + action version/chain headers, error responses included."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        response: Response = await call_next(request)
        for name, value in ACTIONS_CORS_HEADERS.items():
            response.headers[name] = value
        return response
