"""Loguru wiring for the ttl_memo package.

The package stays silent unless logging is switched on, either with
``TTL_MEMO_LOG_ENABLED=true`` or by calling :func:`enable_logging`.
"""

from loguru import logger

from ttl_memo.config import settings

PACKAGE_NAME = "ttl_memo"


def enable_logging() -> None:
    """Let records emitted by ttl_memo reach the configured loguru sinks."""
    logger.enable(PACKAGE_NAME)


def disable_logging() -> None:
    """Drop every record emitted by ttl_memo."""
    logger.disable(PACKAGE_NAME)


def configure_logging() -> None:
    """Apply ``settings.log_enabled``. Called once on package import."""
    if settings.log_enabled:
        enable_logging()
    else:
        disable_logging()
