"""Pull command - download profile templates from a URL."""

import click

from aws_login.commands.common import handle_result
from aws_login.lib import paths, templates, term
from aws_login.models import Resolution
from aws_login.workflows import pull as pull_workflow


@click.command()
@click.argument("url")
@click.option(
    "--resolve",
    type=click.Choice([r.value for r in Resolution]),
    default=None,
    help="What to do with existing local templates (asked if omitted)",
)
def pull(url: str, resolve: str | None) -> None:
    """Download profile templates from URL.

    If local templates already exist, choose how to combine them:

    \b
      cancel   keep the local templates, discard the download
      merge    keep local templates, remote ones replace those with the same name
      replace  discard all local templates

    Merging replaces whole templates; settings of one template are never
    combined.

    \b
    Examples:
      aws-login pull https://example.com/templates.json
      aws-login pull https://example.com/templates.json --resolve merge
    """
    path = paths.templates_path()
    remote = handle_result(pull_workflow.fetch_templates(url))
    local = handle_result(templates.load(path))

    resolution = Resolution(resolve) if resolve else None
    if local and resolution is None:
        resolution = handle_result(
            term.select_labeled(
                "What would you like to do with the existing templates?",
                [(r.description, r) for r in Resolution],
            )
        )

    outcome = handle_result(pull_workflow.store(path, local, remote, resolution))

    if not outcome.saved:
        click.echo("The download was cancelled; local templates are unchanged.")
        return

    click.secho(f"Saved {outcome.count} profile templates to {path}", fg="green", bold=True)
