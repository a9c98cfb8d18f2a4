from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path

VERSION = "0.3.0"


@dataclass(frozen=True)
class Settings:
    home: Path
    config_home: Path
    shell: str = ""
    debug: bool = False
    log_level: str = "WARNING"
    asdf_command: str = "asdf"
    direnv_command: str = "direnv"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from the process environment (or the given mapping).

    XDG_CONFIG_HOME wins over ~/.config, and ASDF_DIRENV_DEBUG forces
    debug logging regardless of ASDF_DIRENV_LOG_LEVEL.
    """
    if environ is None:
        environ = os.environ

    home = Path(environ.get("HOME") or Path.home())
    config_home = environ.get("XDG_CONFIG_HOME")
    debug = bool(environ.get("ASDF_DIRENV_DEBUG"))
    log_level = "DEBUG" if debug else environ.get("ASDF_DIRENV_LOG_LEVEL", "WARNING")

    return Settings(
        home=home,
        config_home=Path(config_home) if config_home else home / ".config",
        shell=environ.get("SHELL", ""),
        debug=debug,
        log_level=log_level.upper(),
    )
