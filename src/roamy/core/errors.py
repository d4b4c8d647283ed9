from __future__ import annotations


class RoamyError(Exception):
    """Base class for errors raised by roamy."""


class SettingsStoreError(RoamyError):
    """The persisted settings blob could not be read or written."""


class CommandUnavailableError(RoamyError):
    """A command was executed while its availability check is false."""

    def __init__(self, command_id: str) -> None:
        super().__init__(f"command '{command_id}' is not available in the current context")
        self.command_id = command_id
