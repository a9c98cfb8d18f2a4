"""Locate asdf and install or locate direnv through it."""

from __future__ import annotations

import logging
import os
from pathlib import Path
import shutil

from .core import Settings
from .runner import run_cmd
from .status import ok

logger = logging.getLogger(__name__)

SYSTEM_VERSIONS = ("system", "SYSTEM", "")
LATEST_VERSIONS = ("latest", "LATEST")


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def asdf_bin_in_path(settings: Settings) -> Path | None:
    """Return the asdf executable found on PATH, or None."""
    found = shutil.which(settings.asdf_command)
    if found is None:
        logger.debug("%s not found on PATH", settings.asdf_command)
        return None

    path = Path(found)
    if not _is_executable(path):
        return None
    ok(f"Found asdf at {path}")
    return path


def parse_latest_installed(listing: str) -> str | None:
    """
    Pick the newest version out of `asdf list direnv` output.

    asdf lists versions oldest first, one per line, and marks the current
    one with a leading '*'.
    """
    entries = [line.replace(" ", "").lstrip("*") for line in listing.splitlines()]
    entries = [entry for entry in entries if entry]
    return entries[-1] if entries else None


def _which_direnv(version: str, settings: Settings) -> Path | None:
    result = run_cmd(
        [settings.asdf_command, "which", settings.direnv_command],
        env={"ASDF_DIRENV_VERSION": version},
        capture=True,
    )
    found = result.stdout.strip()
    return Path(found) if found else None


def installed_direnv(version: str, settings: Settings) -> Path | None:
    """
    Install (if needed) and resolve the direnv binary for `version`.

    `version` is "system" (or empty) for the system direnv, "latest" for
    the newest release, or an exact version such as "2.32.1". Returns the
    executable path, or None when nothing usable was found. Failed asdf
    calls raise CommandError.
    """
    asdf, direnv = settings.asdf_command, settings.direnv_command

    if version in SYSTEM_VERSIONS:
        resolved = "system"
    elif version in LATEST_VERSIONS:
        run_cmd([asdf, "install", direnv, "latest"])
        # ASDF_DIRENV_VERSION=latest is not understood by `asdf which`
        listing = run_cmd([asdf, "list", direnv], capture=True).stdout
        resolved = parse_latest_installed(listing)
        if resolved is None:
            logger.debug("no installed %s versions listed", direnv)
            return None
    else:
        run_cmd([asdf, "install", direnv, version])
        resolved = version

    direnv_bin = _which_direnv(resolved, settings)
    if direnv_bin is None or not _is_executable(direnv_bin):
        logger.debug("resolved %s is not executable: %s", direnv, direnv_bin)
        return None

    ok(f"Found direnv at {direnv_bin}")
    return direnv_bin
