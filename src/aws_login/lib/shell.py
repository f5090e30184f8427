"""Shell emission channel - pass environment changes back to the parent shell.

A child process cannot change its parent's environment. The shell wrapper
(see lib/adapters.py) creates a temporary file, passes its path in
AWS_LOGIN_SCRIPT and the statement dialect in AWS_LOGIN_SHELL, runs
aws-login, then evaluates the file in its own process if it is not empty.

This module only appends to that file. It never truncates, renames or
deletes it; the wrapper owns it.
"""

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from aws_login.lib.errors import ShellWriteError, UnsupportedShellError
from aws_login.lib.result import Err, Ok, Result
from aws_login.models import SetVar, ShellHandoff, ShellKind, Statement, UnsetVar

logger = logging.getLogger(__name__)

SCRIPT_ENV = "AWS_LOGIN_SCRIPT"
SHELL_ENV = "AWS_LOGIN_SHELL"


def _posix_quote(value: str) -> str:
    return "'" + value.replace("'", "'\\''") + "'"


def _fish_quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _powershell_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def render(statement: Statement, kind: ShellKind) -> str:
    """Render one statement as a single line of shell code."""
    match kind, statement:
        case ShellKind.POSIX, SetVar(name, value):
            return f"export {name}={_posix_quote(value)}"
        case ShellKind.POSIX, UnsetVar(name):
            return f"unset {name}"
        case ShellKind.FISH, SetVar(name, value):
            return f"set -gx {name} {_fish_quote(value)}"
        case ShellKind.FISH, UnsetVar(name):
            return f"set -e {name}"
        case ShellKind.POWERSHELL, SetVar(name, value):
            return f"$env:{name} = {_powershell_quote(value)}"
        case ShellKind.POWERSHELL, UnsetVar(name):
            return f"Remove-Item Env:{name} -ErrorAction SilentlyContinue"
    raise ValueError(f"Cannot render {statement!r} for {kind}")


def get_handoff(
    environ: Mapping[str, str] | None = None,
) -> Result[ShellHandoff | None, UnsupportedShellError]:
    """Read the handoff set up by the shell wrapper.

    Ok(None) means aws-login was not started through a wrapper.
    """
    env = os.environ if environ is None else environ

    path = env.get(SCRIPT_ENV, "")
    if not path:
        return Ok(None)

    tag = env.get(SHELL_ENV) or ShellKind.POSIX.value
    try:
        kind = ShellKind(tag)
    except ValueError:
        return Err(UnsupportedShellError(tag))

    logger.debug("Shell handoff: %s (%s)", path, kind)
    return Ok(ShellHandoff(Path(path), kind))


def emit(handoff: ShellHandoff, statements: Iterable[Statement]) -> Result[None, ShellWriteError]:
    """Append statements to the handoff file.

    Each statement is written and flushed as a complete line, so a failure
    part way through leaves only whole statements behind. Emitting nothing
    leaves the file empty.
    """
    lines = [render(statement, handoff.kind) for statement in statements]
    if not lines:
        return Ok(None)

    logger.debug("Emitting %d statements to %s", len(lines), handoff.path)
    try:
        with handoff.path.open("a", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")
                handle.flush()
    except OSError as e:
        return Err(ShellWriteError(handoff.path, str(e)))

    return Ok(None)
