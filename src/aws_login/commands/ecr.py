"""ECR command - configure docker for the Elastic Container Registry."""

import click

from aws_login.commands.common import aws_options, handle_result, make_context
from aws_login.workflows import ecr as ecr_workflow


@click.command()
@aws_options
def ecr(region: str | None, profile: str | None) -> None:
    """Log docker in to the account's ECR registry."""
    ctx = make_context(region, profile)
    registry = handle_result(ecr_workflow.login(ctx))
    click.secho(f"Docker is logged in to {registry}", fg="green", bold=True, err=True)
