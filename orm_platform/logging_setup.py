"""
Logging bootstrap for the platform facade.
Attaches a Rich console sink and, when a path is configured, a JSONL file
sink to the package logger.
"""

import json
import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from rich.logging import RichHandler

from .console import error_console
from .settings import load_settings

PACKAGE_LOGGER = "orm_platform"

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonlHandler(logging.Handler):
    """Append one JSON object per record to a file."""

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            for key, value in record.__dict__.items():
                if key not in _RECORD_ATTRS:
                    payload.setdefault(key, value)
            if record.exc_info:
                payload["exc"] = logging.Formatter().formatException(record.exc_info)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


def init_logging(level: str | None = None, path: str | Path | None = None, *, console: bool = True) -> None:
    """Configure the package logger from arguments, falling back to settings.

    Safe to call repeatedly: handlers installed by a previous call are replaced.

    Args:
        level: Log level name (e.g. "DEBUG"); settings decide when None
        path: JSONL log file; settings decide when None, no file sink if unset
        console: Attach the Rich stderr handler
    """
    settings = load_settings()
    level = (level or settings.log_level).upper()
    path = path or settings.log_path

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level, logging.WARNING))

    for handler in list(package_logger.handlers):
        if isinstance(handler, JsonlHandler | RichHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if console:
        package_logger.addHandler(RichHandler(console=error_console, show_path=False, markup=False))
    if path:
        package_logger.addHandler(JsonlHandler(path))
