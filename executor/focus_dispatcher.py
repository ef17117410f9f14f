"""Deferred, non-blocking focus dispatch."""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor

from core.errors import DetachFailure, SwitcherError
from os_controller.base_controller import WindowController

logger = logging.getLogger("ws.focus")

DEFAULT_GRACE_PERIOD = 0.15


class FocusDispatcher:
    """Focuses a window shortly after control has returned to the host.

    The host tears its popup down right after a selection, so the focus
    command waits ``grace_period`` seconds before running. Tasks run on a
    background executor that outlives the call that scheduled them; pending
    tasks are never cancelled.
    """

    def __init__(
        self,
        controller: WindowController,
        grace_period: float = DEFAULT_GRACE_PERIOD,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.controller = controller
        self.grace_period = grace_period
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="ws-focus",
        )

    def _focus_later(self, address: str) -> None:
        time.sleep(self.grace_period)
        try:
            self.controller.focus_window(address)
        except SwitcherError as exc:
            logger.warning("Focus command for %s failed: %s", address, exc)

    def schedule(self, address: str) -> Future[None]:
        """Submit the deferred focus task; raises DetachFailure if it cannot start."""
        try:
            return self._executor.submit(self._focus_later, address)
        except RuntimeError as exc:
            raise DetachFailure(f"Cannot schedule focus for {address}: {exc}") from exc

    def dispatch(self, address: str) -> bool:
        """Schedule focus and return immediately; False when scheduling failed."""
        try:
            self.schedule(address)
        except DetachFailure as exc:
            logger.error("Failed to detach focus dispatch: %s", exc)
            return False
        return True

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
