"""Shell adapters - per-shell wrappers that drive the emission channel.

Every wrapper implements the same protocol:

1. create a uniquely named temporary file
2. pass its path (AWS_LOGIN_SCRIPT) and the dialect tag (AWS_LOGIN_SHELL)
   to the child process
3. run the real program with the original arguments
4. capture its exit status
5. evaluate the file in the current shell if it is not empty
6. delete the file
7. return the captured status

bash, zsh and POSIX sh read the POSIX dialect; fish and PowerShell each
read their own.
"""

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from aws_login.lib import shell
from aws_login.lib.errors import ShellInstallError, UnsupportedShellError
from aws_login.lib.result import Err, Ok, Result
from aws_login.lib.storage import file
from aws_login.models import ShellKind

logger = logging.getLogger(__name__)

PROGRAM_NAME = "aws-login"

# Presence of this line in a startup script means the hook is installed.
INSTALLED_COMMENT = "# Integrate aws-login into the shell environment."


@dataclass(frozen=True)
class Adapter:
    """How aws-login integrates with one shell."""

    shell: str
    function: str
    dialect: ShellKind
    source: str
    startup: tuple[str, ...]
    hook: str

    def default_startup(self) -> Path:
        """Startup script the hook is installed into by default."""
        return Path.home().joinpath(*self.startup)

    def hook_line(self, program: str = PROGRAM_NAME) -> str:
        """Line that loads the wrapper when the shell starts."""
        return self.hook.replace("{PROGRAM}", program).replace("{SHELL}", self.shell)


_POSIX_HOOK = 'eval "$({PROGRAM} shell init --shell {SHELL})"'

ADAPTERS: dict[str, Adapter] = {
    "bash": Adapter(
        shell="bash",
        function=PROGRAM_NAME,
        dialect=ShellKind.POSIX,
        source="posix.sh",
        startup=(".bashrc",),
        hook=_POSIX_HOOK,
    ),
    "zsh": Adapter(
        shell="zsh",
        function=PROGRAM_NAME,
        dialect=ShellKind.POSIX,
        source="posix.sh",
        startup=(".zshrc",),
        hook=_POSIX_HOOK,
    ),
    # POSIX sh does not allow dashes in function names.
    "posix": Adapter(
        shell="posix",
        function="aws_login",
        dialect=ShellKind.POSIX,
        source="posix.sh",
        startup=(".profile",),
        hook=_POSIX_HOOK,
    ),
    "fish": Adapter(
        shell="fish",
        function=PROGRAM_NAME,
        dialect=ShellKind.FISH,
        source="fish.fish",
        startup=(".config", "fish", "config.fish"),
        hook="{PROGRAM} shell init --shell {SHELL} | source",
    ),
    "powershell": Adapter(
        shell="powershell",
        function=PROGRAM_NAME,
        dialect=ShellKind.POWERSHELL,
        source="powershell.ps1",
        startup=(".config", "powershell", "Microsoft.PowerShell_profile.ps1"),
        hook="Invoke-Expression (& {PROGRAM} shell init --shell {SHELL} | Out-String)",
    ),
}


def get_adapter(name: str) -> Result[Adapter, UnsupportedShellError]:
    """Look up the adapter for a shell name."""
    adapter = ADAPTERS.get(name.lower())
    if adapter is None:
        return Err(UnsupportedShellError(name))
    return Ok(adapter)


def _wrapper_source(name: str) -> str:
    return resources.files("aws_login.data").joinpath("shell", name).read_text(encoding="utf-8")


def render_wrapper(adapter: Adapter, program: str) -> str:
    """Fill in the wrapper source for a shell.

    program is the path of the real executable the wrapper invokes.
    """
    return (
        _wrapper_source(adapter.source)
        .replace("{FUNCTION}", adapter.function)
        .replace("{PROGRAM}", program)
        .replace("{SCRIPT_VAR}", shell.SCRIPT_ENV)
        .replace("{SHELL_VAR}", shell.SHELL_ENV)
        .replace("{DIALECT}", adapter.dialect.value)
    )


def is_installed(startup: Path) -> bool:
    """Check if the startup script already loads the wrapper."""
    return file.contains(startup, INSTALLED_COMMENT)


def install(
    adapter: Adapter,
    startup: Path,
    program: str = PROGRAM_NAME,
) -> Result[bool, ShellInstallError]:
    """Add the hook to a startup script.

    Returns Ok(False) if it was already there, Ok(True) if it was added.
    """
    try:
        if is_installed(startup):
            logger.debug("Hook already present in %s", startup)
            return Ok(False)

        logger.debug("Adding hook for %s to %s", adapter.shell, startup)
        file.append_line(startup, f"\n{INSTALLED_COMMENT}")
        file.append_line(startup, adapter.hook_line(program))
    except OSError as e:
        return Err(ShellInstallError(startup, str(e)))

    return Ok(True)
