"""Application-wide logger writing to platformdirs user_log_dir.

Modules log through ``logging.getLogger(__name__)``; their records reach the
rotating file once the CLI entry point has called :func:`get_logger`.

Every line carries a ``session=`` tag so the records of one lock-in run can
be picked out of ``aura.log``. Outside a session the tag is ``-``.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "aura_session"
_LOG_FILE = "aura.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_LEVEL_ENV = "AURA_LOG_LEVEL"
_NO_SESSION = "-"

_logger: logging.Logger | None = None
_session_tag = _NO_SESSION


class _SessionTagFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session = _session_tag
        return True


def new_session_tag() -> str:
    """A tag naming a session by its start time, e.g. ``20261019-142501``."""
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def set_session_tag(tag: str | None) -> None:
    """Tag subsequent records with *tag*; None clears it."""
    global _session_tag
    _session_tag = tag or _NO_SESSION


def _level_from_env() -> int:
    name = os.environ.get(_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.addFilter(_SessionTagFilter())
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s session=%(session)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
