"""Shell commands - integrate aws-login into the shell environment."""

from pathlib import Path

import click

from aws_login.commands.common import handle_result
from aws_login.lib.adapters import ADAPTERS
from aws_login.workflows import shell as shell_workflow

shell_option = click.option(
    "--shell",
    "-s",
    "shell_name",
    required=True,
    type=click.Choice(sorted(ADAPTERS), case_sensitive=False),
    help="Shell to integrate with",
)


@click.group()
def shell() -> None:
    """Integrate aws-login with your shell.

    The integration wraps aws-login in a shell function so that commands
    like `pick` can change environment variables of the shell itself.
    """
    pass


@shell.command("init")
@shell_option
def init(shell_name: str) -> None:
    """Print the shell code that wraps aws-login.

    \b
    Examples:
      eval "$(aws-login shell init --shell bash)"
      aws-login shell init --shell fish | source
    """
    click.echo(handle_result(shell_workflow.init_script(shell_name)))


@shell.command("install")
@shell_option
@click.option(
    "--init",
    "startup",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Startup script to modify (e.g. ~/.bashrc)",
)
def install(shell_name: str, startup: Path | None) -> None:
    """Load the wrapper from the shell's startup script.

    \b
    Examples:
      aws-login shell install --shell bash
      aws-login shell install --shell zsh --init ~/.zshrc.local
    """
    target, changed = handle_result(shell_workflow.install(shell_name, startup))

    if not changed:
        click.echo(f"The integration is already installed in {target}.")
        return

    click.secho(f"Installed the integration in {target}", fg="green", bold=True)
    click.echo("Start a new shell (or source the file) to use it.")
