"""Wire direnv into the user's shell, and asdf into direnv."""

from __future__ import annotations

from pathlib import Path

from .core import Settings
from .files import grep_or_add
from .shells import Shell, activation_snippet, classify_shell, rc_path
from .status import fail

USE_ASDF_SNIPPET = """\
source "$(asdf direnv hook asdf)"

# Uncomment the following line to make direnv silent by default.
# export DIRENV_LOG_FORMAT=""
"""


def use_asdf_path(settings: Settings) -> Path:
    return settings.config_home / "direnv" / "lib" / "use_asdf.sh"


def direnv_shell_integration(identity: str, direnv_bin: Path, settings: Settings) -> bool:
    """Append the direnv hook for `identity`'s shell to its startup file."""
    shell = classify_shell(identity)
    if shell is Shell.UNSUPPORTED:
        fail(f"Don't know how to setup for shell {identity}. PR welcome!")

    return grep_or_add(rc_path(shell, settings), activation_snippet(shell, direnv_bin))


def direnv_asdf_integration(settings: Settings) -> bool:
    """Install the `use asdf` function into direnv's lib directory."""
    return grep_or_add(use_asdf_path(settings), USE_ASDF_SNIPPET)
