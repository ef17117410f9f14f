"""CLI entrypoint for the window switcher."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Fuzzy Hyprland window switcher")
config_app = typer.Typer(help="Configuration commands")

ConfigDirOption = typer.Option(None, "--config-dir", help="Directory holding hyprland_window_switcher.yaml")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("query")
def query_cmd(
    text: str = typer.Argument("", help="Launcher input, including any prefix"),
    config_dir: Path | None = ConfigDirOption,
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON"),
) -> None:
    """Rank open windows against input text."""
    commands.query(text=text, config_dir=config_dir, as_json=as_json)


@app.command("select")
def select_cmd(
    client_id: int = typer.Argument(..., help="Window id from a query"),
    config_dir: Path | None = ConfigDirOption,
) -> None:
    """Focus a window by id."""
    commands.select(client_id=client_id, config_dir=config_dir)


@app.command("pick")
def pick_cmd(
    text: str = typer.Argument(..., help="Launcher input, including any prefix"),
    config_dir: Path | None = ConfigDirOption,
) -> None:
    """Focus the best match for input text."""
    commands.pick(text=text, config_dir=config_dir)


@app.command("list")
def list_cmd(config_dir: Path | None = ConfigDirOption) -> None:
    """List mapped windows."""
    commands.list_windows(config_dir=config_dir)


@app.command("icons")
def icons_cmd(
    config_dir: Path | None = ConfigDirOption,
    limit: int = typer.Option(50, min=1, max=10000),
) -> None:
    """Show the desktop icon table."""
    commands.icons(config_dir=config_dir, limit=limit)


@config_app.command("show")
def config_show_cmd(config_dir: Path | None = ConfigDirOption) -> None:
    """Show effective configuration."""
    commands.config_show(config_dir=config_dir)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
