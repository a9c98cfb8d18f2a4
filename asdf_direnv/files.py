"""
Idempotent edits to shell and direnv config files.

Files are compared and appended as bytes: rc files are not guaranteed to
be UTF-8, and their existing contents are never decoded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .status import fail, ok, say

logger = logging.getLogger(__name__)


def modifying(path: Path, content: str) -> None:
    """Append content (plus a newline) to path, reporting the edit."""
    say(f"✍  Modifying {path} ", end="")
    data = content.encode("utf-8") + b"\n"
    try:
        existing = path.read_bytes() if path.exists() else b""
        with path.open("ab") as f:
            # Don't glue our first line onto an unterminated last line
            if existing and not existing.endswith(b"\n"):
                f.write(b"\n")
            f.write(data)
    except OSError as exc:
        logger.debug("append to %s failed: %s", path, exc)
        fail(str(exc))
    logger.debug("appended %d bytes to %s", len(data), path)
    ok()


def grep_or_add(path: str | Path, content: str) -> bool:
    """
    Make sure `content` is present in `path`, appending it if not.

    Presence is a substring test on the whole block, so a file whose text
    already contains the block (even inside a longer line) is left alone.
    """
    path = Path(path)
    content = content.rstrip("\n")

    if path.is_file():
        try:
            existing = path.read_bytes()
        except OSError as exc:
            logger.debug("could not read %s: %s", path, exc)
            existing = b""
        if content.encode("utf-8") in existing:
            ok(f"{path} looks fine")
            return True

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        fail(f"Could not create {path.parent}: {exc}")
    modifying(path, content)
    return True
