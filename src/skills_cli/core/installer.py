"""Write skills into an editor's skill directory."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from skills_cli.core.config import SKILL_FILENAME
from skills_cli.core.skills import Skill

logger = logging.getLogger(__name__)


class InstallOutcome(Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


def skill_path(skill: Skill, target_dir: Path) -> Path:
    """Keep the repository layout: ``<target_dir>/<name>/SKILL.md``."""
    return target_dir / skill.name / SKILL_FILENAME


def install_skill(skill: Skill, target_dir: Path) -> InstallOutcome:
    """Install ``skill`` under ``target_dir``; identical files are left alone."""
    path = skill_path(skill, target_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    outcome = InstallOutcome.CREATED
    if path.exists():
        if path.read_text(encoding="utf-8") == skill.raw:
            logger.debug("%s already up to date", path)
            return InstallOutcome.UNCHANGED
        outcome = InstallOutcome.UPDATED

    path.write_text(skill.raw, encoding="utf-8")
    logger.info("Wrote %s (%s)", path, outcome.value)
    return outcome


__all__ = ["InstallOutcome", "install_skill", "skill_path"]
