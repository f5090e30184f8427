"""ECR workflow - log docker in to the account's private registry."""

from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    AwsApiError,
    ExternalCommandError,
    ProgramNotFoundError,
    RegionUnknownError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.operations.ecr import docker_login, login_password, registry_uri

type EcrLoginError = AwsApiError | RegionUnknownError | ProgramNotFoundError | ExternalCommandError


def login(ctx: AwsContext) -> Result[str, EcrLoginError]:
    """Configure docker for ECR. Returns the registry address."""
    match registry_uri(ctx):
        case Err() as e:
            return e
        case Ok(registry):
            pass

    match login_password(ctx):
        case Err() as e:
            return e
        case Ok(password):
            pass

    match docker_login(registry, password):
        case Err() as e:
            return e
        case Ok(_):
            return Ok(registry)
