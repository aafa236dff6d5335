"""Helpers shared by the skills-cli commands."""

from __future__ import annotations

from pathlib import Path

import httpx
import typer
from rich.markup import escape

from skills_cli.cli import ui
from skills_cli.core.config import SkillsConfig, SkillsConfigError, load_config
from skills_cli.core.github import GitHubClient, GitHubError
from skills_cli.core.skills import Skill, discover_skills


def load_config_or_exit(project_dir: Path) -> SkillsConfig:
    try:
        return load_config(project_dir)
    except SkillsConfigError as exc:
        ui.error(escape(str(exc)))
        raise typer.Exit(1)


def fetch_skills(config: SkillsConfig, token: str | None = None) -> list[Skill]:
    """Discover skills or exit: 1 when GitHub cannot be read, 0 when it has none."""
    ui.info("Fetching available skills from GitHub...")
    try:
        with GitHubClient(config, token=token) as github:
            skills = discover_skills(github)
    except (GitHubError, httpx.HTTPError) as exc:
        ui.error(f"Failed to fetch skills: {escape(str(exc))}")
        ui.info("Make sure you have internet access and the repo is public.")
        raise typer.Exit(1)

    if not skills:
        ui.warn("No skills found in the repository.")
        raise typer.Exit(0)

    ui.info(f"Found [bold]{len(skills)}[/bold] skill(s)\n")
    return skills
