"""Data models for command execution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CommandResult:
    args: list[str]
    exit_code: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandError(RuntimeError):
    """A strict command exited non-zero."""

    def __init__(self, result: CommandResult):
        super().__init__(f"{result.args[0]} failed with status {result.exit_code}")
        self.result = result

    @property
    def exit_code(self) -> int:
        return self.result.exit_code
