"""Window snapshot and match schemas."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WindowClient(BaseModel):
    """One open window as reported by ``hyprctl clients -j``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    address: str
    title: str
    initial_title: str = Field(alias="initialTitle")
    window_class: str = Field(alias="class")
    initial_class: str = Field(alias="initialClass")
    mapped: bool


@dataclass(frozen=True)
class Match:
    """Single ranked result handed to the host."""

    title: str
    id: int
    icon: str | None = None
    description: str | None = None
    snapshot_id: str | None = None


@dataclass(frozen=True)
class PluginInfo:
    """Plugin metadata shown by the host."""

    name: str
    icon: str


class HostAction(str, Enum):
    """What the host should do with its UI after a selection."""

    CLOSE = "close"
    KEEP_OPEN = "keep_open"
