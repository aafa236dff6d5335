"""Editors that skills can be installed into."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skills_cli.picker import Item


class UnknownEditorError(RuntimeError):
    """Raised when an editor id is not in the registry."""


@dataclass(frozen=True)
class Editor:
    id: str
    name: str
    icon: str
    config_dir: str
    skill_dir: str

    @property
    def display_name(self) -> str:
        return f"{self.icon} {self.name}"

    def detect(self, project_dir: Path) -> bool:
        return (project_dir / self.config_dir).exists()


EDITORS: tuple[Editor, ...] = (
    Editor("cursor", "Cursor", "📝", ".cursor", ".cursor/rules"),
    Editor("claude-code", "Claude Code", "🤖", ".claude", ".claude/skills"),
    Editor("codex", "Codex (OpenAI)", "🧬", ".codex", ".codex/skills"),
)


def find_editor(editor_id: str) -> Editor:
    wanted = editor_id.strip().lower()
    for editor in EDITORS:
        if editor.id == wanted:
            return editor
    available = ", ".join(editor.id for editor in EDITORS)
    raise UnknownEditorError(f'Unknown editor "{editor_id}". Available: {available}')


def detect_editors(project_dir: Path) -> list[Editor]:
    return [editor for editor in EDITORS if editor.detect(project_dir)]


def editor_items(project_dir: Path) -> list[Item]:
    """Picker items for every known editor, flagging the detected ones."""
    items = []
    for editor in EDITORS:
        status = "● detected" if editor.detect(project_dir) else "○"
        items.append(Item(label=editor.display_name, value=editor, hint=f"{status}  → {editor.skill_dir}/"))
    return items


__all__ = ["EDITORS", "Editor", "UnknownEditorError", "detect_editors", "editor_items", "find_editor"]
