"""Pick command - create and/or select the shell's active AWS CLI profile."""

import click

from aws_login.commands.common import (
    get_handoff,
    handle_result,
    make_context,
    print_manual,
    region_option,
)
from aws_login.lib import paths, templates, term
from aws_login.workflows import profile as profile_workflow


@click.command()
@click.argument("name", required=False)
@region_option
def pick(name: str | None, region: str | None) -> None:
    """Select the AWS CLI profile used by this shell.

    Offers enabled profile templates together with the profiles the AWS CLI
    already knows. A profile created from a template is written to the AWS
    CLI configuration first. The choice is exported as AWS_PROFILE.

    \b
    Examples:
      aws-login pick
      aws-login pick dev
    """
    handoff = get_handoff()
    ctx = make_context(region, None)
    collection = handle_result(templates.load(paths.templates_path()))
    available = handle_result(profile_workflow.choices(ctx, collection, name))

    if name is None:
        name = handle_result(term.select("Please select a profile to use:", available.names))

    activation = handle_result(
        profile_workflow.activate(name, collection, available.existing, handoff)
    )

    if activation.created:
        click.echo(f"Created the AWS CLI profile '{name}'.", err=True)

    if not activation.emitted:
        print_manual(activation.statements)
