# src/wonky/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.session import Session

logger = logging.getLogger(__name__)

PROMPT = ">>> You: "


def run_console_loop(
    session: Session,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Feed console lines into the session until "bye", EOF or Ctrl+C.

    StorageError and other WonkyError failures are not caught here.
    """
    logger.info("Console connector started.")
    app_name = session.responder.app_name

    def show(text: str) -> None:
        if text:
            write(f"<<< {app_name}: {text}\n")

    show(session.responder.flush())

    while session.is_active():
        try:
            line = read(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        session.process_line(line)
        show(session.responder.flush())

    logger.info("Console connector finished.")
