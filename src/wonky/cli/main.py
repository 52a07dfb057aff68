# src/wonky/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the session, then hands it to a front-end:
- console REPL (normal / test mode),
- tkinter chat window (gui mode).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import RunMode, check_mode, create_session
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import StorageError, WonkyError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    mode = check_mode(args)
    logger.info("Starting %s (mode=%s)...", settings.app_name, mode.value)

    try:
        if mode is RunMode.GUI:
            from ..connectors.gui_connector import run_gui

            run_gui(lambda on_exit: create_session(settings=settings, mode=mode, on_exit=on_exit))
        else:
            session = create_session(settings=settings, mode=mode)
            run_console_loop(session)
    except StorageError:
        logger.exception("Task storage failed.")
        return 1
    except WonkyError:
        logger.exception("Unrecoverable error.")
        return 1

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
