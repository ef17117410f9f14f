"""Error taxonomy for window switching."""

from __future__ import annotations


class SwitcherError(Exception):
    """Base class for window switcher failures."""


class CommandLaunchFailure(SwitcherError):
    """External command could not be started."""

    def __init__(self, command: list[str], cause: OSError | ValueError) -> None:
        super().__init__(f"Failed to launch {command[0]!r}: {cause}")
        self.command = command
        self.cause = cause


class NonZeroExit(SwitcherError):
    """External command ran but exited with a failure status."""

    def __init__(self, command: list[str], code: int) -> None:
        super().__init__(f"{command[0]!r} exited with code {code}")
        self.command = command
        self.code = code


class OutputDecodeFailure(SwitcherError):
    """Command stdout was not valid UTF-8."""


class ParsingError(SwitcherError):
    """Window source output is not a JSON array of window descriptors."""


class DetachFailure(SwitcherError):
    """Deferred focus task could not be scheduled."""


class StaleClientError(SwitcherError):
    """Client id does not belong to the current snapshot."""
