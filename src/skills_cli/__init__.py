"""
skills-cli - install agent skills from GitHub into your editor.

Usage:
    skills                   # Interactive mode: pick editor & skills
    skills list              # List all available skills
    skills install <name>    # Install matching skills directly
    skills install -e codex  # Skip the editor prompt
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from skills_cli.cli.commands import install, list_skills

__version__ = "1.0.0"

app = typer.Typer(
    name="skills",
    help="Install agent skills from GitHub into your editor's skill directory",
    add_completion=False,
    invoke_without_command=True,
)

app.command("install")(install)
app.command("list")(list_skills)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run the interactive installer when no subcommand is provided."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        install(name=None, editor=None, token=None)


def main():
    app()


if __name__ == "__main__":
    main()
