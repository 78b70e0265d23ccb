"""loguru setup for the action server.

The Helius key travels as an ``api-key`` query parameter, so httpx error
messages can carry it; every record is passed through ``redact_secrets``
before it reaches a sink.
"""

import os
import re
import sys

from loguru import logger

_API_KEY_PARAM = re.compile(r"(api-key=)[^&\s\"']+", re.IGNORECASE)

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def redact_secrets(text: str) -> str:
    return _API_KEY_PARAM.sub(r"\1***", text)


def _redact_record(record) -> None:
    record["message"] = redact_secrets(record["message"])


def setup_logger(*, json_logs: bool = False, level: str = "INFO", log_dir: str = "") -> None:
    """Console sink always; a rotating DEBUG file sink only when ``log_dir`` is set.

    LOG_LEVEL env overrides ``level``.
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()
    logger.configure(patcher=_redact_record)

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    if log_dir:
        logger.add(
            os.path.join(log_dir, "airdrop_checker_{time:YYYY-MM-DD}.log"),
            rotation="20 MB",
            retention="7 days",
            compression="gz",
            level="DEBUG",
            serialize=json_logs,
        )
