"""Hyprland controller backed by the hyprctl CLI."""

from __future__ import annotations

import logging

from executor.command_executor import run_command
from os_controller.base_controller import WindowController

CLIENT_ARGS = ("clients", "-j")
FOCUS_ARGS = ("dispatch", "focuswindow")


class HyprlandController(WindowController):
    """Queries and focuses windows through ``hyprctl``."""

    def __init__(self, hyprctl_path: str = "hyprctl") -> None:
        self.hyprctl_path = hyprctl_path
        self.logger = logging.getLogger("ws.hyprland")

    def list_clients(self) -> str:
        return run_command([self.hyprctl_path, *CLIENT_ARGS])

    def focus_window(self, address: str) -> str:
        self.logger.debug("Focusing window at address %s", address)
        return run_command([self.hyprctl_path, *FOCUS_ARGS, f"address:{address}"])
