from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console

from skills_cli.core.skills import Skill
from skills_cli.picker import TerminalMode


class FakeSession:
    """Stands in for TerminalSession; records the terminal mode it would set."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self.mode = TerminalMode()
        self.history: list[TerminalMode] = [self.mode]

    def __enter__(self) -> "FakeSession":
        self.mode = TerminalMode(raw=True, cursor_visible=False)
        self.history.append(self.mode)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.mode = TerminalMode()
        self.history.append(self.mode)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("SKILLS_CLI_CONFIG_DIR", str(tmp_path / "user-config"))
    for name in ("SKILLS_REPO", "SKILLS_BRANCH", "GH_TOKEN", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), force_terminal=True, width=120, color_system=None)


@pytest.fixture()
def sessions() -> list[FakeSession]:
    return []


@pytest.fixture()
def session_factory(sessions: list[FakeSession]):
    def factory(console: Console) -> FakeSession:
        session = FakeSession(console)
        sessions.append(session)
        return session

    return factory


@pytest.fixture()
def make_skill():
    def factory(name: str, description: str = "A skill", raw: str | None = None) -> Skill:
        raw = raw if raw is not None else f"---\nname: {name}\ndescription: {description}\n---\n# {name}\n"
        return Skill(name=name, description=description, url=f"https://example.test/{name}/SKILL.md", raw=raw)

    return factory
