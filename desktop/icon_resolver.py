"""Layered icon lookup for window clients."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from world_model.desktop_state import WindowClient


class IconResolver:
    """Resolves a display icon for a window against a read-only icon table."""

    def __init__(self, icon_table: Mapping[str, str] | None = None) -> None:
        self.icon_table: Mapping[str, str] = icon_table if icon_table is not None else MappingProxyType({})

    def resolve(self, client: WindowClient) -> str | None:
        # class, title, initialClass, initialTitle; first hit wins
        for key in (client.window_class, client.title, client.initial_class, client.initial_title):
            icon = self.icon_table.get(key.lower())
            if icon is not None:
                return icon
        return None
