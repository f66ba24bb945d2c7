"""
Logging setup for the gateway.

One stdout handler on the root logger, shared by the gateway, uvicorn
and httpx. The handler masks the upstream API key in every message it
emits, including records coming from third-party loggers.
"""

import logging
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
REDACTED = "[redacted]"

# Per-request chatter; the gateway logs its own line per conversion.
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


class SecretMaskingFilter(logging.Filter):
    """Replace every occurrence of the given secrets in a record's message."""

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self._secrets = tuple(secret for secret in secrets if secret)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self._secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in self._secrets:
            masked = masked.replace(secret, REDACTED)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def configure_logging(level: str = "INFO", secrets: Iterable[str] = ()) -> None:
    """Install the gateway's log handler.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
        secrets: Strings that must never appear in log output.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    handler.addFilter(SecretMaskingFilter(secrets))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
