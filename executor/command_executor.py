"""Command execution wrapper."""

from __future__ import annotations

import subprocess

from core.errors import CommandLaunchFailure, NonZeroExit, OutputDecodeFailure


def run_command(command: list[str]) -> str:
    """Run command without stdin and return its decoded stdout.

    Raises CommandLaunchFailure, NonZeroExit or OutputDecodeFailure.
    """
    try:
        proc = subprocess.run(command, stdin=subprocess.DEVNULL, capture_output=True)
    except (OSError, ValueError) as exc:
        raise CommandLaunchFailure(command, exc) from exc
    if proc.returncode != 0:
        raise NonZeroExit(command, proc.returncode)
    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OutputDecodeFailure(f"{command[0]!r} produced non UTF-8 output: {exc}") from exc
