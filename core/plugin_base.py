"""Launcher plugin capability interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from world_model.desktop_state import HostAction, Match, PluginInfo


class SwitcherPlugin(ABC):
    """Lifecycle entry points a launcher host drives."""

    @abstractmethod
    def init(self, config_dir: Path | str) -> None:
        """Build session state once, before the first query."""
        pass

    @abstractmethod
    def info(self) -> PluginInfo:
        """Return plugin metadata."""
        pass

    @abstractmethod
    def query(self, input_text: str) -> list[Match]:
        """Return ordered matches for the current input."""
        pass

    @abstractmethod
    def select(self, selection: Match) -> HostAction:
        """Act on a chosen match and tell the host what to do with its UI."""
        pass
