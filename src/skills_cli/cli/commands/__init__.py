"""CLI command modules for skills-cli."""

from .install import install
from .list_cmd import list_skills

__all__ = ["install", "list_skills"]
