"""``skills install`` command: pick an editor and skills, then install them."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from skills_cli.cli import ui
from skills_cli.cli.commands.common import fetch_skills, load_config_or_exit
from skills_cli.cli.ui import StepTracker
from skills_cli.core.editors import Editor, UnknownEditorError, detect_editors, editor_items, find_editor
from skills_cli.core.installer import InstallOutcome, install_skill
from skills_cli.core.skills import Skill, match_skills, skill_items
from skills_cli.picker import TerminalUnavailableError, select_many, select_one


def resolve_editor(editor_id: str | None, project_dir: Path) -> Editor:
    """Pick the editor from the flag/config, a single detection, or the user."""
    if editor_id:
        return find_editor(editor_id)

    detected = detect_editors(project_dir)
    if len(detected) == 1:
        editor = detected[0]
        ui.info(f"Detected [bold]{editor.display_name}[/bold] [dim](found {editor.config_dir}/)[/dim]")
        return editor
    if detected:
        names = ", ".join(editor.display_name for editor in detected)
        ui.info(f"Detected multiple editors: {names}")

    return select_one("Select your editor", editor_items(project_dir), console=ui.console)


def choose_skills(skills: list[Skill], name: str | None) -> list[Skill]:
    if name:
        found = match_skills(skills, name)
        if not found:
            ui.error(f'No skill matching "{escape(name)}" found.')
            ui.info(f"Available: {escape(', '.join(skill.name for skill in skills))}")
            raise typer.Exit(1)
        return found

    selected = select_many("Select skills to install", skill_items(skills), console=ui.console)
    if not selected:
        ui.warn("No skills selected. Exiting.")
        raise typer.Exit(0)
    return selected


def install_all(skills: list[Skill], editor: Editor, project_dir: Path) -> StepTracker:
    target_dir = project_dir / editor.skill_dir
    target_dir.mkdir(parents=True, exist_ok=True)

    ui.console.print()
    ui.info(f"Installing to [dim]{escape(str(target_dir))}[/dim]\n")

    tracker = StepTracker("Install skills")
    for skill in skills:
        tracker.add(skill.name, escape(skill.name))

    for skill in skills:
        try:
            outcome = install_skill(skill, target_dir)
        except OSError as exc:
            tracker.error(skill.name, escape(str(exc)))
            continue
        if outcome is InstallOutcome.UNCHANGED:
            tracker.skip(skill.name, "already up to date")
        elif outcome is InstallOutcome.UPDATED:
            tracker.complete(skill.name, "updated existing file")
        else:
            tracker.complete(skill.name, f"{escape(skill.name)}/SKILL.md")

    ui.console.print(tracker.render())
    return tracker


def install(
    name: Optional[str] = typer.Argument(
        None,
        help="Install every skill whose name contains NAME instead of picking interactively",
    ),
    editor: Optional[str] = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor to install into (cursor, claude-code, codex)",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        help="GitHub token (defaults to GH_TOKEN or GITHUB_TOKEN)",
    ),
) -> None:
    """Install skills into the current project's editor directory."""
    project_dir = Path.cwd()
    ui.title("skills")
    config = load_config_or_exit(project_dir)

    try:
        chosen = resolve_editor(editor or config.editor, project_dir)
        ui.success(f"Using [bold]{chosen.display_name}[/bold] → [dim]{chosen.skill_dir}/[/dim]")

        if not (project_dir / chosen.config_dir).exists():
            ui.warn(f"[bold]{chosen.config_dir}/[/bold] not found, will be created")

        ui.console.print()
        skills = fetch_skills(config, token)
        selected = choose_skills(skills, name)
    except UnknownEditorError as exc:
        ui.error(escape(str(exc)))
        raise typer.Exit(1)
    except TerminalUnavailableError as exc:
        ui.error(escape(str(exc)))
        ui.info("Pass --editor and a skill name to install without prompts.")
        raise typer.Exit(1)

    tracker = install_all(selected, chosen, project_dir)
    if tracker.failed:
        ui.error("Some skills could not be installed.")
        raise typer.Exit(1)

    ui.console.print(f"\n[bold green]  Done![/bold green] [dim]Skills installed to {chosen.skill_dir}/[/dim]\n")
