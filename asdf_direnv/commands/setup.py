"""
Setup command - hook direnv into the user's shell through asdf.

Steps, each fatal on failure:
1. find asdf on PATH
2. install/locate direnv at the requested version
3. append the direnv hook to the shell startup file
4. install `use asdf` into direnv's lib directory
"""

from __future__ import annotations

import logging

import typer

from asdf_direnv.core import load_settings
from asdf_direnv.integration import direnv_asdf_integration, direnv_shell_integration
from asdf_direnv.status import check_for
from asdf_direnv.toolchain import asdf_bin_in_path, installed_direnv

logger = logging.getLogger(__name__)


def print_usage(default_shell: str) -> None:
    typer.echo("Usage: asdf direnv setup [--shell SHELL] [--version VERSION]")
    typer.echo("")
    typer.echo(
        f"SHELL: one of bash, zsh, or fish. If not specified, defaults to {default_shell}"
    )
    typer.echo("VERSION: one of system, latest, or x.y.z")


def setup(
    shell: str = typer.Option(
        None, "--shell", help="bash, zsh or fish (default: $SHELL)"
    ),
    version: str = typer.Option(
        None, "--version", help="direnv version: system, latest, or x.y.z"
    ),
):
    """
    Install direnv via asdf and hook it into your shell.
    """
    settings = load_settings()
    if shell is None:
        shell = settings.shell

    if not version:
        typer.echo("Please specify a version using --version")
        typer.echo("")
        print_usage(shell)
        raise typer.Exit(code=1)

    logger.debug("setup shell=%r version=%r", shell, version)

    check_for(
        "asdf",
        asdf_bin_in_path,
        settings,
        failure="Make sure you have asdf installed. Follow instructions at https://asdf-vm.com",
    )
    direnv_bin = check_for(
        "direnv",
        installed_direnv,
        version,
        settings,
        failure=(
            "An installation of direnv is required to continue. "
            "See https://github.com/asdf-community/asdf-direnv"
        ),
    )
    check_for(
        "direnv shell integration",
        direnv_shell_integration,
        shell,
        direnv_bin,
        settings,
        failure="direnv shell hook must be installed. See https://direnv.net/docs/hook.html",
    )
    check_for(
        "direnv asdf integration",
        direnv_asdf_integration,
        settings,
        failure=(
            "asdf-direnv function must be installed on direnvrc. "
            "See https://github.com/asdf-community/asdf-direnv"
        ),
    )
