# src/wonky/connectors/gui_connector.py

"""
Minimal tkinter chat window.

The window is a thin adapter: text from the entry field goes to the same
Session.process_line used by the console, and the flushed reply is shown as a
bot bubble. tkinter is imported lazily so the controller works headless.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.session import ExitHook, Session

logger = logging.getLogger(__name__)

COLOR_BG = "#1e1f29"
COLOR_USER = "#3a6ea5"
COLOR_BOT = "#44475a"
COLOR_TEXT = "#f8f8f2"


@dataclass(frozen=True, slots=True)
class Bubble:
    speaker: str
    text: str
    from_user: bool


class ChatController:
    """Turns one submitted line into the bubbles the window should append."""

    def __init__(self, session: Session, user_name: str = "You") -> None:
        self.session = session
        self.user_name = user_name

    @property
    def bot_name(self) -> str:
        return self.session.responder.app_name

    def startup(self) -> list[Bubble]:
        text = self.session.responder.flush()
        return [Bubble(self.bot_name, text, from_user=False)] if text else []

    def handle_user_input(self, text: str) -> list[Bubble]:
        # The farewell must still render, so check before processing.
        if not self.session.is_active() or not text.strip():
            return []
        self.session.process_line(text)
        reply = self.session.responder.flush()
        bubbles = [Bubble(self.user_name, text, from_user=True)]
        if reply:
            bubbles.append(Bubble(self.bot_name, reply, from_user=False))
        return bubbles


class ChatWindow:
    def __init__(self, root, controller: ChatController) -> None:
        import tkinter as tk

        self.root = root
        self.controller = controller

        root.title(controller.bot_name)
        root.geometry("420x600")
        root.minsize(320, 400)
        root.configure(bg=COLOR_BG)

        outer = tk.Frame(root, bg=COLOR_BG)
        outer.pack(fill="both", expand=True)

        self.canvas = tk.Canvas(outer, bg=COLOR_BG, highlightthickness=0)
        scrollbar = tk.Scrollbar(outer, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side="right", fill="y")
        self.canvas.pack(side="left", fill="both", expand=True)

        self.dialog = tk.Frame(self.canvas, bg=COLOR_BG)
        self.canvas.create_window((0, 0), window=self.dialog, anchor="nw")
        self.dialog.bind(
            "<Configure>",
            lambda _e: self.canvas.configure(scrollregion=self.canvas.bbox("all")),
        )

        bar = tk.Frame(root, bg=COLOR_BG)
        bar.pack(fill="x", side="bottom")
        self.entry = tk.Entry(bar, bg=COLOR_BOT, fg=COLOR_TEXT, insertbackground=COLOR_TEXT)
        self.entry.pack(side="left", fill="x", expand=True, padx=6, pady=6)
        self.entry.bind("<Return>", lambda _e: self.submit())
        tk.Button(bar, text="Send", command=self.submit).pack(side="right", padx=6, pady=6)
        self.entry.focus_set()

        self._tk = tk
        self._append(controller.startup())

    def submit(self) -> None:
        text = self.entry.get()
        bubbles = self.controller.handle_user_input(text)
        if bubbles:
            self.entry.delete(0, "end")
        self._append(bubbles)

    def _append(self, bubbles: list[Bubble]) -> None:
        for b in bubbles:
            self._tk.Label(
                self.dialog,
                text=b.text,
                justify="left",
                wraplength=300,
                bg=COLOR_USER if b.from_user else COLOR_BOT,
                fg=COLOR_TEXT,
                padx=8,
                pady=6,
            ).pack(anchor="e" if b.from_user else "w", padx=8, pady=4)
        self.root.update_idletasks()
        self.canvas.yview_moveto(1.0)


def run_gui(make_session: Callable[[ExitHook], Session]) -> None:
    """
    Open the chat window and block in the Tk main loop.

    make_session receives the exit hook that closes the window after the farewell
    delay; it may raise (e.g. StorageError), in which case the window is destroyed.
    """
    import tkinter as tk

    root = tk.Tk()

    def close_later(delay: float) -> None:
        root.after(int(delay * 1000), root.destroy)

    try:
        session = make_session(close_later)
    except Exception:
        root.destroy()
        raise

    # Tk would only print callback errors; keep the first one and re-raise it after the loop.
    failures: list[BaseException] = []

    def report_callback_exception(_exc_type, exc, _tb) -> None:
        logger.error("GUI callback failed.", exc_info=exc)
        failures.append(exc)
        root.destroy()

    root.report_callback_exception = report_callback_exception

    ChatWindow(root, ChatController(session))
    logger.info("GUI connector started.")
    root.mainloop()
    logger.info("GUI connector finished.")
    if failures:
        raise failures[0]
