"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from rmd.safety.models import PromptKind
from rmd.safety.trash import TrashStore


class ScriptedPrompt:
    """Prompt stand-in that replays canned answers and records calls."""

    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[PromptKind, str]] = []

    def __call__(self, kind: PromptKind, path: str) -> str:
        self.calls.append((kind, path))
        if not self.answers:
            msg = f"Unexpected prompt for {path}"
            raise AssertionError(msg)
        return self.answers.pop(0)


@pytest.fixture
def make_prompt() -> type[ScriptedPrompt]:
    """Factory for scripted prompts: ``make_prompt("Y", "n")``."""
    return ScriptedPrompt


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the XDG directories into tmp_path.

    Returns:
        The fake home directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return home


@pytest.fixture
def workdir(tmp_path: Path, isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Working directory for relative paths, with an isolated environment."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def trash_store(tmp_path: Path) -> TrashStore:
    """Initialized trash store under tmp_path."""
    store = TrashStore(tmp_path / "Trash")
    store.ensure()
    return store
