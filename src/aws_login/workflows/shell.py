"""Shell integration workflows - render and install wrappers."""

import shutil
from pathlib import Path

from aws_login.lib import adapters
from aws_login.lib.errors import ShellInstallError, UnsupportedShellError
from aws_login.lib.result import Err, Ok, Result, map_ok


def program_path() -> str:
    """Absolute path of the aws-login executable, if it is on PATH."""
    return shutil.which(adapters.PROGRAM_NAME) or adapters.PROGRAM_NAME


def init_script(shell: str, program: str | None = None) -> Result[str, UnsupportedShellError]:
    """Wrapper code for a shell, to be evaluated at shell startup."""
    return map_ok(
        adapters.get_adapter(shell),
        lambda adapter: adapters.render_wrapper(adapter, program or program_path()),
    )


def install(
    shell: str, startup: Path | None = None
) -> Result[tuple[Path, bool], UnsupportedShellError | ShellInstallError]:
    """Hook the wrapper into a startup script.

    Returns the startup script path and whether it was changed.
    """
    match adapters.get_adapter(shell):
        case Err() as e:
            return e
        case Ok(adapter):
            pass

    target = startup or adapter.default_startup()
    match adapters.install(adapter, target):
        case Err() as e:
            return e
        case Ok(changed):
            return Ok((target, changed))
