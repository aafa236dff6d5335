"""Configuration for skills-cli.

Settings are merged from, lowest to highest precedence:

1. Built-in defaults
2. User config: ``config.yaml`` under the platformdirs user config dir
   (override with ``SKILLS_CLI_CONFIG_DIR``)
3. Project config: ``.skills.yaml`` in the project directory
4. Environment: ``SKILLS_REPO`` (``owner/repo``) and ``SKILLS_BRANCH``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

from platformdirs import user_config_dir
from ruamel.yaml import YAML

logger = logging.getLogger(__name__)

APP_NAME = "skills-cli"
PROJECT_CONFIG_NAME = ".skills.yaml"
USER_AGENT = "skills-cli"

SKIP_DIRS = frozenset({".git", ".github", "bin", "node_modules", ".vscode", ".cursor"})
SKILL_FILENAME = "SKILL.md"


class SkillsConfigError(RuntimeError):
    """Raised when a configuration file cannot be parsed or validated."""


@dataclass(frozen=True)
class SkillsConfig:
    owner: str = "Tzyito"
    repo: str = "Skills"
    branch: str = "main"
    editor: str | None = None

    @property
    def api_base(self) -> str:
        return f"https://api.github.com/repos/{self.owner}/{self.repo}"

    @property
    def raw_base(self) -> str:
        return f"https://raw.githubusercontent.com/{self.owner}/{self.repo}/{self.branch}"


def user_config_path() -> Path:
    if env_dir := os.environ.get("SKILLS_CLI_CONFIG_DIR"):
        return Path(env_dir) / "config.yaml"
    return Path(user_config_dir(APP_NAME)) / "config.yaml"


def _read_yaml(path: Path) -> dict:
    yaml = YAML(typ="safe")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except Exception as exc:
        raise SkillsConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SkillsConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def _merge(config: SkillsConfig, data: dict, source: Path) -> SkillsConfig:
    known = {f.name for f in fields(SkillsConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown config key(s) in %s: %s", source, ", ".join(unknown))

    updates = {}
    for key in known & set(data):
        value = data[key]
        if value is not None and not isinstance(value, str):
            raise SkillsConfigError(f"Config key '{key}' in {source} must be a string")
        updates[key] = value.strip() if isinstance(value, str) else value
    return replace(config, **updates)


def _apply_env(config: SkillsConfig) -> SkillsConfig:
    if repo_value := os.environ.get("SKILLS_REPO", "").strip():
        owner, sep, repo = repo_value.partition("/")
        if not sep or not owner or not repo:
            raise SkillsConfigError(f"SKILLS_REPO must look like 'owner/repo', got '{repo_value}'")
        config = replace(config, owner=owner, repo=repo)
    if branch := os.environ.get("SKILLS_BRANCH", "").strip():
        config = replace(config, branch=branch)
    return config


def load_config(project_dir: Path | None = None) -> SkillsConfig:
    """Load the effective configuration for ``project_dir`` (cwd by default)."""
    project_dir = project_dir or Path.cwd()
    config = SkillsConfig()

    for path in (user_config_path(), project_dir / PROJECT_CONFIG_NAME):
        if path.is_file():
            logger.debug("Loading config from %s", path)
            config = _merge(config, _read_yaml(path), path)

    return _apply_env(config)


__all__ = [
    "PROJECT_CONFIG_NAME",
    "SKILL_FILENAME",
    "SKIP_DIRS",
    "SkillsConfig",
    "SkillsConfigError",
    "USER_AGENT",
    "load_config",
    "user_config_path",
]
