#!/usr/bin/env python3
"""asdf-direnv CLI - Main entry point.

Commands:
- setup: install direnv via asdf and hook it into the shell
- local: pin tool versions for the current directory
"""

import typer

from asdf_direnv.commands.local import local
from asdf_direnv.commands.setup import setup
from asdf_direnv.core import VERSION, load_settings
from asdf_direnv.logging_utils import get_logger

app = typer.Typer(
    name="asdf-direnv",
    help="asdf-direnv: glue between the asdf version manager and direnv",
    add_completion=False,  # Disable --install-completion/--show-completion clutter
    no_args_is_help=True,
)


@app.callback()
def _configure():
    get_logger("asdf_direnv", load_settings())


app.command(name="setup")(setup)
app.command(name="local")(local)


@app.command()
def version():
    """Show asdf-direnv version."""
    typer.echo(f"asdf-direnv version {VERSION}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
