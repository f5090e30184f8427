"""SSO workflows - log in through the AWS CLI or export role credentials."""

import logging
import time
from collections.abc import Callable

from aws_login.lib import shell
from aws_login.lib import sso as device
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    AuthDeniedError,
    AuthExpiredError,
    AwsApiError,
    ExternalCommandError,
    ProgramNotFoundError,
    ShellWriteError,
    SsoNotConfiguredError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.lib.sso import DeviceAuthorization
from aws_login.models import SetVar, ShellHandoff, Statement
from aws_login.operations import sso as sso_ops

logger = logging.getLogger(__name__)

type LoginError = ProgramNotFoundError | ExternalCommandError
type ExportError = (
    ProgramNotFoundError
    | ExternalCommandError
    | SsoNotConfiguredError
    | AwsApiError
    | AuthDeniedError
    | AuthExpiredError
    | ShellWriteError
)


def _missing(settings: dict[str, str | None]) -> tuple[str, ...]:
    return tuple(key for key, value in settings.items() if not value)


def login(ctx: AwsContext) -> Result[bool, LoginError]:
    """Log in via `aws sso login`, configuring the profile first if needed.

    Returns Ok(True) if the profile had to be configured.
    """
    match sso_ops.read_settings(ctx):
        case Err() as e:
            return e
        case Ok(settings):
            pass

    if missing := _missing(settings):
        logger.debug("Profile lacks %s, running configure sso", ", ".join(missing))
        match sso_ops.configure(ctx):
            case Err() as e:
                return e
            case Ok(_):
                return Ok(True)

    match sso_ops.login(ctx):
        case Err() as e:
            return e
        case Ok(_):
            return Ok(False)


def export_credentials(
    ctx: AwsContext,
    handoff: ShellHandoff | None,
    notify: Callable[[DeviceAuthorization], None],
    sleep: Callable[[float], None] = time.sleep,
) -> Result[tuple[Statement, ...], ExportError]:
    """Authorize this device and export role credentials to the shell.

    1. Read the profile's SSO settings
    2. Start a device authorization and hand it to `notify` (show code, open browser)
    3. Poll until approved, denied or expired
    4. Fetch role credentials and emit them through the shell handoff

    Credentials only ever go to the handoff; nothing is written to disk.
    """
    match sso_ops.read_settings(ctx):
        case Err() as e:
            return e
        case Ok(settings):
            pass

    if missing := _missing(settings):
        return Err(SsoNotConfiguredError(ctx.profile, missing))

    sso_region = settings["sso_region"] or ""
    oidc = ctx.sso_oidc(sso_region)

    match device.start(oidc, settings["sso_start_url"] or ""):
        case Err() as e:
            return e
        case Ok(auth):
            notify(auth)

    match device.poll_for_token(oidc, auth, sleep=sleep):
        case Err() as e:
            return e
        case Ok(token):
            pass

    match sso_ops.role_credentials(
        ctx,
        sso_region,
        token,
        settings["sso_account_id"] or "",
        settings["sso_role_name"] or "",
    ):
        case Err() as e:
            return e
        case Ok(creds):
            pass

    statements: tuple[Statement, ...] = (
        SetVar("AWS_ACCESS_KEY_ID", creds.access_key_id),
        SetVar("AWS_SECRET_ACCESS_KEY", creds.secret_access_key),
        SetVar("AWS_SESSION_TOKEN", creds.session_token),
    )

    if handoff is not None:
        match shell.emit(handoff, statements):
            case Err() as e:
                return e
            case Ok(_):
                pass

    return Ok(statements)
