"""Entry point for the airdrop checker action server."""

import asyncio

from loguru import logger

from airdrop_checker.api.server import run_api_server
from airdrop_checker.utils.logger import setup_logger
from config.settings import settings


async def run() -> None:
    setup_logger(json_logs=settings.json_logs, level=settings.log_level, log_dir=settings.log_dir)
    if not settings.helius_api_key:
        logger.warning("HELIUS_API_KEY is not set — POST requests will fail until it is")
    logger.info("Starting airdrop checker...")
    await run_api_server()
    logger.info("Shutdown complete")


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
