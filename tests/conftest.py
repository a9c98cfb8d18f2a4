from pathlib import Path
import subprocess
import sys

import pytest

# Ensure repo root is importable as a package root (for `asdf_direnv.*`).
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def hermetic_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Autouse: each test runs in its own tmp cwd, with HOME and XDG dirs inside tmp.
    """
    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.setenv("SHELL", "/bin/bash")
    monkeypatch.delenv("ASDF_DIRENV_DEBUG", raising=False)
    monkeypatch.delenv("ASDF_DIRENV_LOG_LEVEL", raising=False)
    monkeypatch.chdir(project)
    return tmp_path


class FakeRun:
    """Stand-in for subprocess.run that records argv and replays canned results."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.envs: list[dict | None] = []
        self._responses: dict[tuple[str, ...], tuple[int, str]] = {}

    def respond(self, args, returncode=0, stdout=""):
        self._responses[tuple(args)] = (returncode, stdout)

    def __call__(self, args, check=False, env=None, stdout=None, text=True, **kwargs):
        self.calls.append(list(args))
        self.envs.append(env)
        returncode, out = self._responses.get(tuple(args), (0, ""))
        return subprocess.CompletedProcess(
            args, returncode, stdout=out if stdout is not None else None
        )


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    fake = FakeRun()
    monkeypatch.setattr("asdf_direnv.runner.subprocess.run", fake)
    return fake


@pytest.fixture
def direnv_bin(tmp_path: Path) -> Path:
    """An executable file standing in for an asdf-installed direnv."""
    path = tmp_path / "installs" / "direnv" / "2.32.1" / "bin" / "direnv"
    path.parent.mkdir(parents=True)
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(0o755)
    return path
