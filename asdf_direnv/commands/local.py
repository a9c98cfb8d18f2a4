"""
Local command - pin tool versions for the current directory.
"""

from __future__ import annotations

from pathlib import Path

import typer

from asdf_direnv.core import Settings, load_settings
from asdf_direnv.files import grep_or_add
from asdf_direnv.models import CommandError
from asdf_direnv.runner import maybe_run_cmd, run_cmd
from asdf_direnv.status import fail

ENVRC = ".envrc"
USE_ASDF = "use asdf"


def pin_tool(plugin: str, version: str, settings: Settings, directory: Path) -> None:
    """Install `plugin` at `version`, pin it here and let direnv load it."""
    asdf = settings.asdf_command

    # Fails harmlessly when the plugin is already added
    maybe_run_cmd([asdf, "plugin-add", plugin])
    run_cmd([asdf, "install", plugin, version])
    run_cmd([asdf, "local", plugin, version])

    grep_or_add(directory / ENVRC, USE_ASDF)
    run_cmd([settings.direnv_command, "allow"])


def local(
    pairs: list[str] = typer.Argument(
        ..., metavar="TOOL VERSION [TOOL VERSION ...]", help="Tool/version pairs to pin"
    ),
):
    """
    Install and pin tool versions for this directory, and enable direnv.

    At least one TOOL VERSION pair is required; running with no arguments
    is a usage error.

    Examples:
        asdf-direnv local nodejs 18.0.0
        asdf-direnv local python 3.12.1 golang 1.22.0
    """
    settings = load_settings()
    directory = Path.cwd()

    remaining = list(pairs)
    while remaining:
        plugin = remaining.pop(0)
        if not remaining:
            fail(f"Please specify a version for {plugin}.")
        version = remaining.pop(0)

        try:
            pin_tool(plugin, version, settings, directory)
        except CommandError as exc:
            raise typer.Exit(code=1) from exc
