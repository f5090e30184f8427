"""ECR operations - registry address, login password, docker login."""

import base64

from botocore.exceptions import BotoCoreError, ClientError

from aws_login.lib import run
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import AwsApiError, RegionUnknownError, RunError
from aws_login.lib.result import Err, Ok, Result


def registry_uri(ctx: AwsContext) -> Result[str, AwsApiError | RegionUnknownError]:
    """Private registry address for the session's account and region."""
    region = ctx.session_region
    if not region:
        return Err(RegionUnknownError(ctx.profile))

    try:
        account_id = ctx.account_id
    except (BotoCoreError, ClientError) as e:
        return Err(AwsApiError("GetCallerIdentity", str(e)))

    return Ok(f"{account_id}.dkr.ecr.{region}.amazonaws.com")


def login_password(ctx: AwsContext) -> Result[str, AwsApiError]:
    """Password for `docker login` (the token is base64 of AWS:<password>)."""
    try:
        response = ctx.ecr.get_authorization_token()
    except (BotoCoreError, ClientError) as e:
        return Err(AwsApiError("GetAuthorizationToken", str(e)))

    token = response["authorizationData"][0]["authorizationToken"]
    _, _, password = base64.b64decode(token).decode("utf-8").partition(":")
    return Ok(password)


def docker_login(registry: str, password: str) -> Result[None, RunError]:
    """Log docker in to the registry, passing the password on stdin."""
    cmd = ["docker", "login", "--username", "AWS", "--password-stdin", registry]
    return run.pass_through(cmd, input=password)
