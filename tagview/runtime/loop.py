"""Main interactive event loop for the table.

One thread reads keys, dispatches them to the app and redraws when needed;
no callback ever runs concurrently with another.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..input import read_key
from .terminal import TerminalController

if TYPE_CHECKING:
    from .app import TableApp

logger = logging.getLogger(__name__)

IDLE_POLL_MS = 250


def run_main_loop(app: TableApp, terminal: TerminalController, stdin_fd: int) -> None:
    """Run until a quit key is pressed.

    Each iteration notices terminal resizes, redraws if anything changed,
    then waits briefly for one key.
    """
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            size = terminal.size()
            if size != last_size:
                if last_size is not None:
                    logger.debug("terminal resized to %dx%d", *size)
                last_size = size
                app.dirty = True
            if app.dirty:
                terminal.write(app.compose_frame(*size))
                app.dirty = False

            key = read_key(stdin_fd, timeout_ms=IDLE_POLL_MS)
            if not key:
                continue
            if app.handle_key(key):
                return
