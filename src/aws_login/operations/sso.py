"""SSO operations - profile checks, AWS CLI login, role credentials."""

from dataclasses import dataclass

from botocore.exceptions import ClientError

from aws_login.lib import run
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import AwsApiError, RunError
from aws_login.lib.result import Err, Ok, Result
from aws_login.operations.profile import get_setting

# Profile settings required to log in via SSO.
REQUIRED_SETTINGS = (
    "sso_account_id",
    "sso_region",
    "sso_role_name",
    "sso_start_url",
)


@dataclass(frozen=True, slots=True)
class RoleCredentials:
    """Temporary credentials for an SSO role."""

    access_key_id: str
    secret_access_key: str
    session_token: str


def read_settings(ctx: AwsContext) -> Result[dict[str, str | None], RunError]:
    """Read the SSO settings of the active profile."""
    settings: dict[str, str | None] = {}
    for key in REQUIRED_SETTINGS:
        match get_setting(ctx, key):
            case Err() as e:
                return e
            case Ok(value):
                settings[key] = value
    return Ok(settings)


def configure(ctx: AwsContext) -> Result[None, RunError]:
    """Run the interactive `aws configure sso`."""
    return run.pass_through(run.aws_command(ctx, "configure", "sso"))


def login(ctx: AwsContext) -> Result[None, RunError]:
    """Run `aws sso login` for the active profile."""
    return run.pass_through(run.aws_command(ctx, "sso", "login"))


def role_credentials(
    ctx: AwsContext,
    sso_region: str,
    access_token: str,
    account_id: str,
    role_name: str,
) -> Result[RoleCredentials, AwsApiError]:
    """Exchange an SSO access token for role credentials."""
    try:
        response = ctx.sso(sso_region).get_role_credentials(
            roleName=role_name,
            accountId=account_id,
            accessToken=access_token,
        )
    except ClientError as e:
        return Err(AwsApiError("GetRoleCredentials", str(e)))

    creds = response["roleCredentials"]
    return Ok(
        RoleCredentials(
            access_key_id=creds["accessKeyId"],
            secret_access_key=creds["secretAccessKey"],
            session_token=creds["sessionToken"],
        )
    )
