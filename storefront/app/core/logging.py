from __future__ import annotations

import logging
from pathlib import Path

from storefront.app.core.config import Settings

# Order records: "2026/10/19 12:00:00 Order Details: ..." (one record, several lines)
ORDER_LOG_FORMAT = "%(asctime)s %(message)s"
ORDER_LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"


def _make_console_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _make_json_formatter() -> logging.Formatter:
    class JsonFormatter(logging.Formatter):
        def format(self, record: logging.LogRecord) -> str:
            msg = super().format(record)
            # order records span lines; keep one JSON object per line
            return (
                '{"ts":"%s","level":"%s","logger":"%s","msg":%s}'
                % (
                    self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
                    record.levelname,
                    record.name,
                    '"' + msg.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"',
                )
            )

    return JsonFormatter("%(message)s")


def make_order_log_handler(path: Path) -> logging.FileHandler:
    """
    Append-mode file handler for the order log. Raises OSError when the file
    cannot be opened; the caller decides whether that is fatal.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(ORDER_LOG_FORMAT, datefmt=ORDER_LOG_DATEFMT))
    return handler


def setup_logging(settings: Settings) -> logging.Handler:
    """
    Initialize root console logging from ``settings.log_level`` and
    ``settings.log_format`` (text|json). Returns the installed handler.
    """
    log_level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    formatter = _make_json_formatter() if settings.log_format.lower() == "json" else _make_console_formatter()

    root = logging.getLogger()
    # uvicorn installs its own handlers; replace them so output lines up
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(log_level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        lg.handlers = [handler]
        lg.setLevel(log_level)
    return handler
