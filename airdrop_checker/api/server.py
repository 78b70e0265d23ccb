"""API server — runs uvicorn inside the current asyncio event loop."""

from __future__ import annotations

import uvicorn
from loguru import logger

from config.settings import settings


async def run_api_server() -> None:
    """Start uvicorn serving the action API.

    Uses ``uvicorn.Server.serve()`` so the caller owns the event loop.
    """
    from airdrop_checker.api.app import create_app

    app = create_app()
    config = uvicorn.Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        log_level="warning",
        loop="none",
    )
    server = uvicorn.Server(config)
    logger.info(f"Airdrop action API starting on http://{settings.server_host}:{settings.server_port}")
    await server.serve()
