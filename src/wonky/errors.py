# src/wonky/errors.py

"""
Hard failures.

Expected user-input problems (unknown command, bad index, ...) are never raised:
the dispatcher returns them as DispatchError values and answers with text.
Only infrastructure faults travel as exceptions.
"""

from __future__ import annotations


class WonkyError(Exception):
    """Base class for failures that must escape the line-processing entry point."""


class StorageError(WonkyError):
    """The task archive could not be read or written."""


class ResponseError(WonkyError):
    """The responder was asked to render something it cannot render."""


class LineProcessingError(WonkyError):
    """Unexpected failure while processing one input line."""

    def __init__(self, line: str, cause: BaseException) -> None:
        super().__init__(f"Failed to process line {line!r}: {cause}")
        self.line = line
        self.cause = cause
