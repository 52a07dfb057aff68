# src/wonky/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# First matching prefix wins; loggers outside wonky fall through to ERROR+.
_CONSOLE_FLOORS: tuple[tuple[str, int], ...] = (
    # Every reply is already printed to the chat; the file keeps the copy.
    ("wonky.core.responder", logging.WARNING),
    ("wonky.connectors.", logging.WARNING),
    ("wonky.", logging.NOTSET),
)


class _ConsoleNoiseFilter(logging.Filter):
    """Replies and log lines share one terminal, so only wonky's own diagnostics get through."""

    def filter(self, record: logging.LogRecord) -> bool:
        for prefix, floor in _CONSOLE_FLOORS:
            if record.name.startswith(prefix):
                return record.levelno >= floor
        # Third-party loggers and captured warnings ('py.warnings').
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/wonky",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send filtered logs to stderr and everything (including replies) to <log_dir>/wonky.log.

    Call once, before the session is created. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "wonky.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
