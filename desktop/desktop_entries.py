"""Desktop application descriptor scanner producing the icon table."""

from __future__ import annotations

import configparser
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger("ws.desktop_entries")

DESKTOP_GROUP = "Desktop Entry"


@dataclass(frozen=True)
class DesktopEntry:
    """Installed application name and its icon identifier."""

    name: str
    icon: str
    wm_class: str | None = None
    desktop_id: str | None = None


def application_dirs(env: Mapping[str, str] | None = None) -> list[Path]:
    """Return XDG application directories in lookup precedence order."""
    env = os.environ if env is None else env
    data_home = env.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    data_dirs = env.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    roots = [data_home, *(d for d in data_dirs.split(":") if d)]
    return [Path(root) / "applications" for root in roots]


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def parse_desktop_file(path: Path) -> DesktopEntry | None:
    """Parse one ``.desktop`` file; ``None`` when hidden or incomplete."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case-sensitive
    try:
        with path.open("r", encoding="utf-8") as fh:
            parser.read_file(fh)
    except (OSError, UnicodeDecodeError, configparser.Error) as exc:
        logger.debug("Skipping unreadable desktop file %s: %s", path, exc)
        return None
    if not parser.has_section(DESKTOP_GROUP):
        return None

    group = parser[DESKTOP_GROUP]
    if _truthy(group.get("NoDisplay")) or _truthy(group.get("Hidden")):
        return None
    name = (group.get("Name") or "").strip()
    icon = (group.get("Icon") or "").strip()
    if not name or not icon:
        return None
    return DesktopEntry(
        name=name,
        icon=icon,
        wm_class=(group.get("StartupWMClass") or "").strip() or None,
        desktop_id=path.stem,
    )


def scan_desktop_entries(dirs: Iterable[Path] | None = None) -> list[DesktopEntry]:
    """Collect entries from every application directory; earlier dirs shadow later ones."""
    seen: set[str] = set()
    entries: list[DesktopEntry] = []
    for directory in application_dirs() if dirs is None else dirs:
        if not directory.is_dir():
            continue
        try:
            paths = sorted(directory.rglob("*.desktop"))
        except OSError as exc:
            logger.debug("Skipping application directory %s: %s", directory, exc)
            continue
        for path in paths:
            desktop_id = path.relative_to(directory).as_posix()
            if desktop_id in seen:
                continue
            seen.add(desktop_id)
            entry = parse_desktop_file(path)
            if entry is not None:
                entries.append(entry)
    logger.debug("Scanned %d desktop entries", len(entries))
    return entries


def build_icon_table(entries: Iterable[DesktopEntry]) -> Mapping[str, str]:
    """Map lowercase names, window classes and desktop ids to icons (read-only)."""
    table: dict[str, str] = {}
    for entry in entries:
        for key in (entry.name, entry.wm_class, entry.desktop_id):
            if key:
                table.setdefault(key.lower(), entry.icon)
    return MappingProxyType(table)
