"""Shell classification and per-shell activation snippets."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .core import Settings


class Shell(Enum):
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    UNSUPPORTED = "unsupported"


# Checked in order; "/usr/local/bin/bash" and "bash-5.2" are both bash.
_SUPPORTED = (Shell.BASH, Shell.ZSH, Shell.FISH)


def classify_shell(identity: str | None) -> Shell:
    """Map a shell path or name (e.g. $SHELL) to a Shell."""
    identity = identity or ""
    for shell in _SUPPORTED:
        if shell.value in identity:
            return shell
    return Shell.UNSUPPORTED


def rc_path(shell: Shell, settings: Settings) -> Path:
    """Startup file that receives the direnv hook for `shell`."""
    if shell is Shell.BASH:
        return settings.home / ".bashrc"
    if shell is Shell.ZSH:
        return settings.home / ".zshrc"
    if shell is Shell.FISH:
        return settings.config_home / "fish" / "conf.d" / "asdf_direnv.fish"
    raise ValueError(f"No startup file for {shell.value} shell")


def activation_snippet(shell: Shell, direnv_bin: Path | str) -> str:
    if shell in (Shell.BASH, Shell.ZSH):
        return (
            f'export ASDF_DIRENV_BIN="{direnv_bin}"\n'
            f'eval "$($ASDF_DIRENV_BIN hook {shell.value})"'
        )
    if shell is Shell.FISH:
        return (
            f'set -gx ASDF_DIRENV_BIN "{direnv_bin}"\n'
            "$ASDF_DIRENV_BIN hook fish | source"
        )
    raise ValueError(f"No activation snippet for {shell.value} shell")
