"""FastAPI application factory for the airdrop checker action."""

from __future__ import annotations

import os
from collections.abc import Sequence

from fastapi import FastAPI

from airdrop_checker import __version__
from airdrop_checker.api.dependencies import ClientsFactory, open_upstream_clients
from airdrop_checker.api.middleware import ActionHeadersMiddleware
from airdrop_checker.eligibility.criteria import AIRDROP_CRITERIA
from airdrop_checker.eligibility.models import AirdropCriterion
from config.settings import Settings, settings as default_settings


def create_app(
    *,
    app_settings: Settings | None = None,
    criteria: Sequence[AirdropCriterion] = AIRDROP_CRITERIA,
    clients_factory: ClientsFactory = open_upstream_clients,
) -> FastAPI:
    """Build and configure the FastAPI application.

    ``criteria`` and ``clients_factory`` are injected so the rule table and
    upstream clients can be swapped without touching module state.
    """
    app = FastAPI(
        title="DeFi Airdrop Checker",
        version=__version__,
        docs_url="/api/docs" if os.getenv("AIRDROP_DEBUG") else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if os.getenv("AIRDROP_DEBUG") else None,
    )

    app.state.settings = app_settings or default_settings
    app.state.criteria = tuple(criteria)
    app.state.open_clients = clients_factory

    app.add_middleware(ActionHeadersMiddleware)

    from airdrop_checker.api.routers.airdrop import router as airdrop_router
    from airdrop_checker.api.routers.discovery import router as discovery_router
    from airdrop_checker.api.routers.health import router as health_router

    app.include_router(airdrop_router)
    app.include_router(discovery_router)
    app.include_router(health_router)

    return app
