"""Window switcher session wiring the registry, ranking and focus dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from core.errors import StaleClientError, SwitcherError
from core.plugin_base import SwitcherPlugin
from core.policy_runtime import SwitcherConfig, load_plugin_config
from desktop.desktop_entries import DesktopEntry, build_icon_table, scan_desktop_entries
from desktop.icon_resolver import IconResolver
from executor.focus_dispatcher import FocusDispatcher
from os_controller.base_controller import WindowController
from os_controller.hyprland_controller import HyprlandController
from search.match_engine import MatchEngine
from world_model.app_state_registry import ClientRegistry
from world_model.desktop_state import HostAction, Match, PluginInfo

logger = logging.getLogger("ws.session")

PLUGIN_INFO = PluginInfo(name="Hyprland window switcher", icon="help-about")

ControllerFactory = Callable[[SwitcherConfig], WindowController]
EntryScanner = Callable[[], Iterable[DesktopEntry]]


@dataclass
class SessionState:
    """Everything built once at init and read by later calls."""

    config: SwitcherConfig
    registry: ClientRegistry
    icon_table: Mapping[str, str]
    engine: MatchEngine
    dispatcher: FocusDispatcher


def load_icon_table(scanner: EntryScanner = scan_desktop_entries) -> Mapping[str, str]:
    """Build the icon table, degrading to an empty one on failure."""
    try:
        return build_icon_table(scanner())
    except Exception as exc:
        logger.warning("Failed to load desktop entries: %s", exc)
        return MappingProxyType({})


def load_registry(controller: WindowController) -> ClientRegistry:
    """Snapshot open windows, degrading to an empty snapshot on failure."""
    try:
        return ClientRegistry.build(controller.list_clients())
    except SwitcherError as exc:
        logger.error("Failed to load window clients: %s", exc)
        return ClientRegistry.empty()


class WindowSwitcher(SwitcherPlugin):
    """Host-agnostic window switcher plugin."""

    def __init__(
        self,
        controller_factory: ControllerFactory | None = None,
        entry_scanner: EntryScanner = scan_desktop_entries,
    ) -> None:
        self.controller_factory = controller_factory or (
            lambda config: HyprlandController(hyprctl_path=config.hyprctl_path)
        )
        self.entry_scanner = entry_scanner
        self._state: SessionState | None = None

    @property
    def state(self) -> SessionState:
        if self._state is None:
            raise RuntimeError("WindowSwitcher.init() has not been called.")
        return self._state

    def init(self, config_dir: Path | str) -> None:
        config = load_plugin_config(config_dir)
        controller = self.controller_factory(config)
        icon_table = load_icon_table(self.entry_scanner)
        registry = load_registry(controller)
        engine = MatchEngine(
            registry=registry,
            icon_resolver=IconResolver(icon_table),
            max_entries=config.max_entries,
            prefix=config.prefix,
        )
        dispatcher = FocusDispatcher(controller, grace_period=config.focus_delay)
        self._state = SessionState(
            config=config,
            registry=registry,
            icon_table=icon_table,
            engine=engine,
            dispatcher=dispatcher,
        )
        logger.info(
            "Window switcher ready: %d window(s), %d icon(s)", len(registry), len(icon_table)
        )

    def info(self) -> PluginInfo:
        return PLUGIN_INFO

    def query(self, input_text: str) -> list[Match]:
        return self.state.engine.query(input_text)

    def select(self, selection: Match) -> HostAction:
        state = self.state
        try:
            client = state.registry.get(selection.id, selection.snapshot_id)
        except StaleClientError as exc:
            logger.error("Ignoring selection: %s", exc)
            return HostAction.CLOSE
        state.dispatcher.dispatch(client.address)
        return HostAction.CLOSE

    def close(self, wait: bool = True) -> None:
        """Release the focus executor; pending focus tasks still run when ``wait``."""
        if self._state is not None:
            self._state.dispatcher.shutdown(wait=wait)
