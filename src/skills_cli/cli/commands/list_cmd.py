"""``skills list`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from skills_cli.cli import ui
from skills_cli.cli.commands.common import fetch_skills, load_config_or_exit


def list_skills(
    token: Optional[str] = typer.Option(
        None,
        "--token",
        help="GitHub token (defaults to GH_TOKEN or GITHUB_TOKEN)",
    ),
) -> None:
    """List all skills available in the skills repository."""
    config = load_config_or_exit(Path.cwd())
    skills = fetch_skills(config, token)

    for skill in skills:
        ui.console.print(f"  [bold]{escape(skill.name)}[/bold]")
        ui.console.print(f"  [dim]{escape(skill.description)}[/dim]\n")
