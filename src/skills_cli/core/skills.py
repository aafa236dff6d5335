"""Discover skills published in a GitHub repository.

A skill is a top-level directory of the repository that contains a
``SKILL.md`` file. Adding a directory to the repository makes the skill
available without releasing a new version of this tool.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from ruamel.yaml import YAML

from skills_cli.core.config import SKILL_FILENAME, SKIP_DIRS
from skills_cli.core.github import GitHubClient, GitHubError
from skills_cli.picker import Item

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description"

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---", re.DOTALL)
_DESCRIPTION_LINE_RE = re.compile(r"description:\s*(.+)")
_HEADING_RE = re.compile(r"^#\s+(.+)", re.MULTILINE)


@dataclass(frozen=True)
class Skill:
    name: str
    description: str
    url: str
    raw: str


def parse_frontmatter(content: str) -> Optional[Dict[str, Any]]:
    """Parse YAML frontmatter from a markdown document.

    Args:
        content: File content

    Returns:
        Frontmatter dict if present and valid, None otherwise
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return None

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(match.group(1))
    except Exception:
        return None
    return data if isinstance(data, dict) else None


def extract_description(content: str) -> str:
    """Return the skill description from its SKILL.md content.

    Preference order: frontmatter ``description``, the first level-one
    heading, then a placeholder.
    """
    frontmatter = parse_frontmatter(content)
    if frontmatter is not None:
        description = frontmatter.get("description")
        if description is not None and str(description).strip():
            return str(description).strip()
    else:
        # Frontmatter that is not valid YAML can still carry a usable line
        match = _FRONTMATTER_RE.match(content)
        if match:
            line = _DESCRIPTION_LINE_RE.search(match.group(1))
            if line:
                return line.group(1).strip()

    heading = _HEADING_RE.search(content)
    if heading:
        return heading.group(1).strip()
    return NO_DESCRIPTION


def _load_skill(github: GitHubClient, directory: str) -> Skill | None:
    listing = github.get_json(f"contents/{directory}")
    has_skill_md = any(
        entry.get("name") == SKILL_FILENAME and entry.get("type") == "file"
        for entry in listing
        if isinstance(entry, dict)
    )
    if not has_skill_md:
        return None

    path = f"{directory}/{SKILL_FILENAME}"
    raw = github.get_raw(path)
    return Skill(name=directory, description=extract_description(raw), url=github.raw_url(path), raw=raw)


def discover_skills(github: GitHubClient) -> list[Skill]:
    """List every skill in the repository, sorted by name.

    Failing to list the repository root raises; a skill directory that cannot
    be read is skipped.
    """
    contents = github.get_json("contents")
    if not isinstance(contents, list):
        raise GitHubError("Unexpected response listing repository contents")

    directories = [
        entry["name"]
        for entry in contents
        if isinstance(entry, dict) and entry.get("type") == "dir" and entry.get("name") not in SKIP_DIRS
    ]

    skills = []
    for directory in directories:
        try:
            skill = _load_skill(github, directory)
        except (GitHubError, httpx.HTTPError) as exc:
            logger.debug("Skipping %s: %s", directory, exc)
            continue
        if skill is not None:
            skills.append(skill)

    return sorted(skills, key=lambda skill: skill.name.lower())


def match_skills(skills: list[Skill], query: str) -> list[Skill]:
    needle = query.lower()
    return [skill for skill in skills if needle in skill.name.lower()]


def skill_items(skills: list[Skill]) -> list[Item]:
    return [Item(label=skill.name, value=skill, hint=skill.description) for skill in skills]


__all__ = [
    "NO_DESCRIPTION",
    "Skill",
    "discover_skills",
    "extract_description",
    "match_skills",
    "parse_frontmatter",
    "skill_items",
]
