"""RDS Proxy operations - list proxies, generate IAM auth tokens."""

from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError

from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import AwsApiError
from aws_login.lib.result import Err, Ok, Result


@dataclass(frozen=True, slots=True)
class Proxy:
    """An available RDS Proxy."""

    name: str
    endpoint: str
    engine: str
    require_tls: bool


def list_proxies(ctx: AwsContext) -> Result[list[Proxy], AwsApiError]:
    """Proxies with status `available`, sorted by name."""
    proxies: list[Proxy] = []
    try:
        for page in ctx.rds.get_paginator("describe_db_proxies").paginate():
            for raw in page["DBProxies"]:
                if raw.get("Status") != "available":
                    continue
                proxies.append(
                    Proxy(
                        name=raw["DBProxyName"],
                        endpoint=raw["Endpoint"],
                        engine=raw["EngineFamily"],
                        require_tls=raw.get("RequireTLS", False),
                    )
                )
    except (BotoCoreError, ClientError) as e:
        return Err(AwsApiError("DescribeDBProxies", str(e)))
    return Ok(sorted(proxies, key=lambda p: p.name))


def generate_token(
    ctx: AwsContext, proxy: Proxy, port: int, username: str
) -> Result[str, AwsApiError]:
    """Presign an IAM authentication token for the proxy endpoint."""
    try:
        token = ctx.rds.generate_db_auth_token(
            DBHostname=proxy.endpoint,
            Port=port,
            DBUsername=username,
        )
    except (BotoCoreError, ClientError) as e:
        return Err(AwsApiError("GenerateDBAuthToken", str(e)))
    return Ok(token)
