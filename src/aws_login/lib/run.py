"""External program execution (aws, docker).

`output` captures stdout for parsing; `pass_through` lets the program talk
to the terminal directly. Both return Result types and never retry.
"""

import logging
import shutil
import subprocess
from collections.abc import Sequence

from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import ExternalCommandError, ProgramNotFoundError, RunError
from aws_login.lib.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def aws_command(ctx: AwsContext, *args: str) -> list[str]:
    """Build an `aws` command line carrying the context's profile and region."""
    cmd = ["aws"]
    if ctx.profile:
        cmd.extend(["--profile", ctx.profile])
    if ctx.region:
        cmd.extend(["--region", ctx.region])
    cmd.extend(args)
    return cmd


def _check_program(cmd: Sequence[str]) -> ProgramNotFoundError | None:
    if shutil.which(cmd[0]) is None:
        return ProgramNotFoundError(cmd[0])
    return None


def output(cmd: Sequence[str], input: str | None = None) -> Result[str, RunError]:
    """Run a program and return its stdout.

    stderr is captured and returned verbatim in the error on failure.
    """
    if missing := _check_program(cmd):
        return Err(missing)

    logger.debug("Running: %s", " ".join(cmd))
    completed = subprocess.run(list(cmd), capture_output=True, text=True, input=input)
    if completed.returncode != 0:
        return Err(ExternalCommandError(tuple(cmd), completed.returncode, completed.stderr))
    return Ok(completed.stdout)


def pass_through(cmd: Sequence[str], input: str | None = None) -> Result[None, RunError]:
    """Run a program attached to the terminal.

    Its output goes straight to the user, so the error carries no stderr.
    """
    if missing := _check_program(cmd):
        return Err(missing)

    logger.debug("Running: %s", " ".join(cmd))
    completed = subprocess.run(list(cmd), input=input, text=True)
    if completed.returncode != 0:
        return Err(ExternalCommandError(tuple(cmd), completed.returncode, ""))
    return Ok(None)
