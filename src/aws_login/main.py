"""aws-login CLI entry point."""

import logging

import click

from aws_login import __version__
from aws_login.commands import ecr, eks, pick, pull, rds, shell, sso, templates_group


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr; stdout may be evaluated by the shell."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # botocore is chatty at DEBUG
    for name in ("botocore", "boto3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="aws-login")
@click.option("--debug", is_flag=True, envvar="AWS_LOGIN_DEBUG", help="Print debug messages")
def cli(debug: bool) -> None:
    """Simplify logging into AWS accounts and services.

    A wrapper around the AWS CLI that merges related commands into single
    subcommands and creates profiles from shared templates.
    """
    _configure_logging(debug)


# Register subcommands
cli.add_command(pick)
cli.add_command(pick, name="profile")
cli.add_command(pull)
cli.add_command(templates_group)
cli.add_command(shell)
cli.add_command(sso)
cli.add_command(ecr)
cli.add_command(eks)
cli.add_command(rds)


if __name__ == "__main__":
    cli()
