"""Typer command handlers acting as a standalone launcher host."""

from __future__ import annotations

import json
import os
from dataclasses import asdict
from pathlib import Path

import typer

from core.policy_runtime import load_plugin_config
from core.session import WindowSwitcher
from world_model.desktop_state import Match


def default_config_dir() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "hyprland-window-switcher"


def _runtime(config_dir: Path | None = None) -> WindowSwitcher:
    switcher = WindowSwitcher()
    switcher.init(config_dir or default_config_dir())
    return switcher


def _format_match(match: Match) -> str:
    line = f"[{match.id}] {match.title}"
    if match.description:
        line += f" | {match.description}"
    if match.icon:
        line += f" ({match.icon})"
    return line


def query(text: str, config_dir: Path | None = None, as_json: bool = False) -> None:
    """Print ranked matches for one input string."""
    switcher = _runtime(config_dir)
    matches = switcher.query(text)
    if as_json:
        typer.echo(json.dumps([asdict(m) for m in matches], indent=2))
    else:
        for match in matches:
            typer.echo(_format_match(match))
    switcher.close()


def select(client_id: int, config_dir: Path | None = None) -> None:
    """Focus the window with a snapshot id and wait for the deferred focus."""
    switcher = _runtime(config_dir)
    action = switcher.select(Match(title="", id=client_id))
    switcher.close(wait=True)
    typer.echo(f"Host action: {action.value}")


def pick(text: str, config_dir: Path | None = None) -> None:
    """Focus the best match for an input string."""
    switcher = _runtime(config_dir)
    matches = switcher.query(text)
    if not matches:
        switcher.close()
        typer.echo("No matching windows.")
        raise typer.Exit(code=1)
    best = matches[0]
    switcher.select(best)
    switcher.close(wait=True)
    typer.echo(f"Focused: {_format_match(best)}")


def list_windows(config_dir: Path | None = None) -> None:
    """List the mapped windows in the current snapshot."""
    switcher = _runtime(config_dir)
    for client in switcher.state.registry:
        typer.echo(f"[{client.id}] {client.initial_title} | {client.window_class} | {client.address}")
    switcher.close()


def icons(config_dir: Path | None = None, limit: int = 50) -> None:
    """Show the first entries of the icon table."""
    switcher = _runtime(config_dir)
    table = switcher.state.icon_table
    for name in sorted(table)[:limit]:
        typer.echo(f"{name}: {table[name]}")
    typer.echo(f"{len(table)} icon(s) known")
    switcher.close()


def config_show(config_dir: Path | None = None) -> None:
    """Show effective runtime config."""
    config = load_plugin_config(config_dir or default_config_dir())
    typer.echo(json.dumps(config.model_dump(), indent=2))
