"""
Console status reporting.

Every line goes to stderr so that stdout stays clean for callers that
capture it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from rich.console import Console
import typer

from .models import CommandError

console = Console(stderr=True, highlight=False, soft_wrap=True)

T = TypeVar("T")


def say(text: str, *, end: str = "\n") -> None:
    console.print(text, end=end, markup=False, emoji=False)


def ok(message: str = "") -> None:
    """Report success and carry on."""
    say(f"✔️  {message}" if message else "✔️")


def hmm(message: str = "") -> bool:
    """Report a warning. Returns False so callers can propagate it."""
    say(f"❗️ {message}" if message else "❗️")
    return False


def fail(message: str = "") -> NoReturn:
    """Report a fatal condition and terminate with status 1."""
    say(f"❌  {message}" if message else "❌")
    raise typer.Exit(code=1)


def check_for(
    name: str, step: Callable[..., T], *args: Any, failure: str = ""
) -> T:
    """Run a setup step, turning a falsy result or a failed command into fail()."""
    say(f"Checking for {name}...")
    try:
        result = step(*args)
    except CommandError:
        fail(failure)
    if not result:
        fail(failure)
    return result
