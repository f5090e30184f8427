"""AWS CLI profile operations - list, read and create profiles via `aws configure`."""

from aws_login.lib import run
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import ExternalCommandError, RunError
from aws_login.lib.result import Err, Ok, Result, map_ok
from aws_login.models import Settings, render_setting


def list_profiles(ctx: AwsContext) -> Result[list[str], RunError]:
    """Names of the profiles already known to the AWS CLI."""
    return map_ok(
        run.output(run.aws_command(ctx, "configure", "list-profiles")),
        lambda out: out.split(),
    )


def get_setting(ctx: AwsContext, key: str) -> Result[str | None, RunError]:
    """Read one setting of the active profile, or None if it is not set.

    `aws configure get` exits with status 1 when the key is missing.
    """
    match run.output(run.aws_command(ctx, "configure", "get", key)):
        case Ok(out):
            return Ok(out.strip() or None)
        case Err(ExternalCommandError(status=1)):
            return Ok(None)
        case Err() as e:
            return e


def create_profile(name: str, settings: Settings) -> Result[None, RunError]:
    """Write each setting into a (new) AWS CLI profile."""
    for key, value in settings.items():
        cmd = ["aws", "--profile", name, "configure", "set", key, render_setting(value)]
        match run.output(cmd):
            case Err() as e:
                return e
            case Ok(_):
                pass
    return Ok(None)
