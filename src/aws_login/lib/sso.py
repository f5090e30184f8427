"""IAM Identity Center device authorization.

Flow:
1. RegisterClient - a public OIDC client for this tool
2. StartDeviceAuthorization - yields a user code and verification URL
3. CreateToken, polled every `interval` seconds until the user approves,
   denies, or the authorization expires
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from botocore.exceptions import ClientError

from aws_login.lib.errors import AuthDeniedError, AuthError, AuthExpiredError, AwsApiError
from aws_login.lib.result import Err, Ok, Result

if TYPE_CHECKING:
    from mypy_boto3_sso_oidc import SSOOIDCClient

logger = logging.getLogger(__name__)

CLIENT_NAME = "aws-login"
GRANT_TYPE = "urn:ietf:params:oauth:grant-type:device_code"
DEFAULT_INTERVAL = 5
SLOW_DOWN_STEP = 5


@dataclass(frozen=True, slots=True)
class DeviceAuthorization:
    """A pending device authorization."""

    start_url: str
    client_id: str
    client_secret: str
    device_code: str
    user_code: str
    verification_uri: str
    expires_in: int
    interval: int


def start(
    oidc: SSOOIDCClient, start_url: str
) -> Result[DeviceAuthorization, AwsApiError]:
    """Register a client and start a device authorization."""
    try:
        client = oidc.register_client(clientName=CLIENT_NAME, clientType="public")
        auth = oidc.start_device_authorization(
            clientId=client["clientId"],
            clientSecret=client["clientSecret"],
            startUrl=start_url,
        )
    except ClientError as e:
        return Err(AwsApiError(e.operation_name, str(e)))

    return Ok(
        DeviceAuthorization(
            start_url=start_url,
            client_id=client["clientId"],
            client_secret=client["clientSecret"],
            device_code=auth["deviceCode"],
            user_code=auth["userCode"],
            verification_uri=auth.get("verificationUriComplete") or auth["verificationUri"],
            expires_in=auth["expiresIn"],
            interval=auth.get("interval") or DEFAULT_INTERVAL,
        )
    )


def poll_for_token(
    oidc: SSOOIDCClient,
    auth: DeviceAuthorization,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> Result[str, AuthError]:
    """Poll CreateToken until the authorization resolves.

    Returns the access token, or AuthDeniedError / AuthExpiredError. The
    loop is bounded by the authorization's expiry.
    """
    deadline = clock() + auth.expires_in
    interval = auth.interval

    while clock() + interval <= deadline:
        sleep(interval)
        try:
            response = oidc.create_token(
                clientId=auth.client_id,
                clientSecret=auth.client_secret,
                grantType=GRANT_TYPE,
                deviceCode=auth.device_code,
            )
        except ClientError as e:
            match e.response["Error"]["Code"]:
                case "AuthorizationPendingException":
                    continue
                case "SlowDownException":
                    interval += SLOW_DOWN_STEP
                    logger.debug("Asked to slow down, polling every %ds", interval)
                    continue
                case "AccessDeniedException":
                    return Err(AuthDeniedError(auth.start_url))
                case "ExpiredTokenException":
                    return Err(AuthExpiredError(auth.start_url))
                case _:
                    return Err(AwsApiError("CreateToken", str(e)))

        return Ok(response["accessToken"])

    return Err(AuthExpiredError(auth.start_url))
