"""RDS command - generate IAM auth tokens for RDS Proxy."""

import click

from aws_login.commands.common import aws_options, handle_result, make_context
from aws_login.lib import term
from aws_login.workflows import rds as rds_workflow


@click.command()
@click.argument("username")
@click.option("--port", type=int, default=None, help="Database port (required unless PostgreSQL)")
@aws_options
def rds(username: str, port: int | None, region: str | None, profile: str | None) -> None:
    """Print an IAM auth token for USERNAME on an RDS Proxy."""
    ctx = make_context(region, profile)
    proxies = handle_result(rds_workflow.proxies(ctx))
    proxy = handle_result(
        term.select_labeled("Please select an RDS Proxy:", [(p.name, p) for p in proxies])
    )

    if proxy.require_tls:
        click.secho("Warning: This connection requires TLS to be used.", fg="yellow", err=True)

    click.echo(handle_result(rds_workflow.token(ctx, proxy, username, port)))
