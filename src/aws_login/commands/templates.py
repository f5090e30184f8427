"""Templates commands - inspect local profile templates."""

import click

from aws_login.commands.common import (
    echo_key_value,
    echo_section,
    handle_result,
    json_option,
    to_json,
)
from aws_login.lib import paths
from aws_login.models import render_setting
from aws_login.workflows import templates as templates_workflow


@click.group("templates")
def templates_group() -> None:
    """Inspect the local profile templates."""
    pass


@templates_group.command("list")
def list_templates() -> None:
    """List the local profile templates."""
    path = paths.templates_path()
    collection = handle_result(templates_workflow.load(path))

    if not collection:
        click.echo(f"No profile templates in {path}")
        click.echo()
        click.echo("Download some with: aws-login pull <url>")
        return

    for name, template in sorted(collection.items()):
        flags = [] if template.enabled else ["disabled"]
        if template.extends:
            flags.append(f"extends {template.extends}")
        suffix = f" ({', '.join(flags)})" if flags else ""
        click.echo(f"  {name}{suffix}")


@templates_group.command("show")
@click.argument("name")
@json_option
def show(name: str, as_json: bool) -> None:
    """Show the resolved settings of template NAME."""
    settings = handle_result(templates_workflow.show(paths.templates_path(), name))

    if as_json:
        click.echo(to_json(settings))
        return

    echo_section(name)
    for key, value in sorted(settings.items()):
        echo_key_value(key, render_setting(value), indent=1)
