"""Base interface for window-manager controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WindowController(ABC):
    """Abstract window-manager command layer."""

    @abstractmethod
    def list_clients(self) -> str:
        """Return the raw JSON array of window descriptors."""
        pass

    @abstractmethod
    def focus_window(self, address: str) -> str:
        """Focus the window identified by an opaque address."""
        pass
