"""RDS workflows - IAM authentication tokens for RDS Proxy."""

from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import AwsApiError, NoProxiesError, PortRequiredError
from aws_login.lib.result import Err, Ok, Result
from aws_login.operations.rds import Proxy, generate_token, list_proxies

# Only PostgreSQL proxies get a default port.
DEFAULT_PORTS = {"POSTGRESQL": 5432}


def proxies(ctx: AwsContext) -> Result[list[Proxy], AwsApiError | NoProxiesError]:
    """Available proxies, failing if there are none."""
    match list_proxies(ctx):
        case Err() as e:
            return e
        case Ok([]):
            return Err(NoProxiesError(ctx.session_region))
        case Ok(found):
            return Ok(found)


def token(
    ctx: AwsContext, proxy: Proxy, username: str, port: int | None = None
) -> Result[str, AwsApiError | PortRequiredError]:
    """Generate an auth token, defaulting the port from the engine."""
    if port is None:
        port = DEFAULT_PORTS.get(proxy.engine)
        if port is None:
            return Err(PortRequiredError(proxy.engine))
    return generate_token(ctx, proxy, port, username)
