"""
Run external commands with a one-line console trace.

run_cmd is the strict variant: a non-zero exit is reported and raised as
CommandError. maybe_run_cmd is the best-effort variant: the status is
returned but never acted upon, for steps that are expected to fail on a
second run (e.g. adding an asdf plugin that is already there).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
import os
import shlex
import subprocess

from .models import CommandError, CommandResult
from .status import hmm, ok, say

logger = logging.getLogger(__name__)

# Exit statuses a POSIX shell reports for a command it cannot find or run
NOT_FOUND_STATUS = 127
NOT_EXECUTABLE_STATUS = 126


def command_line(args: Sequence[str], env: Mapping[str, str] | None = None) -> str:
    """Render a command the way it would be typed, env overrides first."""
    prefix = [f"{key}={value}" for key, value in (env or {}).items()]
    return shlex.join([*prefix, *args])


def _run_command(
    args: Sequence[str],
    env: Mapping[str, str] | None = None,
    capture: bool = False,
) -> CommandResult:
    """Execute a command and return structured result."""
    run_env = None
    if env:
        run_env = {**os.environ, **env}

    logger.debug("exec %s (env overrides: %s)", list(args), dict(env or {}))
    try:
        proc = subprocess.run(
            list(args),
            check=False,
            env=run_env,
            stdout=subprocess.PIPE if capture else None,
            text=True,
        )
    except FileNotFoundError:
        logger.debug("command not found: %s", args[0])
        return CommandResult(args=list(args), exit_code=NOT_FOUND_STATUS)
    except OSError as exc:
        # not executable, bad interpreter, ENOEXEC
        logger.debug("cannot execute %s: %s", args[0], exc)
        return CommandResult(args=list(args), exit_code=NOT_EXECUTABLE_STATUS)

    logger.debug("exit %d from %s", proc.returncode, args[0])
    stdout = proc.stdout if capture and proc.stdout is not None else ""
    return CommandResult(args=list(args), exit_code=proc.returncode, stdout=stdout)


def run_cmd(
    args: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
    capture: bool = False,
) -> CommandResult:
    """Run a strict step. Raises CommandError on a non-zero exit."""
    say(f"▶ {command_line(args, env)} # ...  ", end="")
    result = _run_command(args, env=env, capture=capture)
    if result.ok:
        ok()
        return result

    hmm(f"Failed with status {result.exit_code}")
    raise CommandError(result)


def maybe_run_cmd(
    args: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Run a best-effort step. The returned result may carry a failure."""
    say(f"▶ {command_line(args, env)} # ...  ", end="")
    result = _run_command(args, env=env)
    if not result.ok:
        logger.debug("ignoring status %d from %s", result.exit_code, args[0])
    ok()
    return result
