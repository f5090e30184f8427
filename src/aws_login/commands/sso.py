"""SSO command - authenticate with IAM Identity Center."""

import click

from aws_login.commands.common import (
    aws_options,
    get_handoff,
    handle_result,
    make_context,
    print_manual,
)
from aws_login.lib.sso import DeviceAuthorization
from aws_login.workflows import sso as sso_workflow


def _show_authorization(auth: DeviceAuthorization) -> None:
    click.echo("Opening a browser to authorize this device...", err=True)
    click.echo(f"Verification URL: {auth.verification_uri}", err=True)
    click.secho(f"Verification code: {auth.user_code}", bold=True, err=True)
    click.launch(auth.verification_uri)


@click.command()
@aws_options
@click.option(
    "--export",
    "export",
    is_flag=True,
    help="Export role credentials to the shell instead of using the AWS CLI cache",
)
def sso(region: str | None, profile: str | None, export: bool) -> None:
    """Log in to AWS using SSO.

    Configures the profile for SSO first if it lacks any of sso_account_id,
    sso_region, sso_role_name or sso_start_url.

    With --export, authorizes this device directly and exports
    AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and AWS_SESSION_TOKEN to the
    shell. Nothing is written to disk.

    \b
    Examples:
      aws-login sso
      aws-login sso --profile dev --export
    """
    ctx = make_context(region, profile)

    if not export:
        handle_result(sso_workflow.login(ctx))
        return

    handoff = get_handoff()
    statements = handle_result(
        sso_workflow.export_credentials(ctx, handoff, notify=_show_authorization),
        success_message="Authorized.",
    )

    if handoff is None:
        print_manual(statements)
