"""Shared CLI utilities.

Common options, AwsContext creation, error handling, output formatting.
"""

import json
import sys
from collections.abc import Callable, Iterable
from typing import Any, NoReturn, ParamSpec, TypeVar

import click

from aws_login.lib import shell
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    AuthDeniedError,
    AuthExpiredError,
    AwsApiError,
    ClusterNotFoundError,
    CyclicExtendsError,
    DownloadError,
    ExternalCommandError,
    NoClustersError,
    NoProfilesError,
    NoProxiesError,
    PortRequiredError,
    ProgramNotFoundError,
    RegionUnknownError,
    SelectionCancelledError,
    ShellInstallError,
    ShellWriteError,
    SsoNotConfiguredError,
    TemplateFileCorruptError,
    TemplateFileReadError,
    TemplateFileWriteError,
    UnknownTemplateError,
    UnsupportedShellError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.models import ShellHandoff, ShellKind, Statement

# Type variables for decorators
P = ParamSpec("P")
T = TypeVar("T")


# Common CLI options as decorators
def region_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --region/-r option."""
    return click.option(
        "--region",
        "-r",
        default=None,
        help="AWS region (defaults to the profile's region)",
    )(fn)


def profile_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --profile/-p option."""
    return click.option(
        "--profile",
        "-p",
        default=None,
        help="AWS CLI profile (defaults to AWS_PROFILE)",
    )(fn)


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def aws_options(fn: Callable[P, T]) -> Callable[P, T]:
    """Add all AWS-related options (region, profile)."""
    fn = region_option(fn)
    fn = profile_option(fn)
    return fn


def make_context(region: str | None, profile: str | None) -> AwsContext:
    """Create AwsContext from CLI options."""
    return AwsContext(region=region, profile=profile)


def handle_result(result: Result[T, Any], success_message: str | None = None) -> T:
    """Handle a Result, exiting on error with appropriate message.

    On Ok: returns the value, optionally prints success message
    On Err: prints error and exits non-zero
    """
    match result:
        case Ok(value):
            if success_message:
                click.secho(success_message, fg="green", bold=True, err=True)
            return value
        case Err(error):
            handle_error(error)


def handle_error(error: Any) -> NoReturn:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(_exit_code(error))


def _exit_code(error: Any) -> int:
    """External failures keep the program's own status."""
    match error:
        case ExternalCommandError(status=status) if status > 0:
            return status
        case _:
            return 1


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case UnknownTemplateError(name, None):
            return f"The profile template '{name}' does not exist."

        case UnknownTemplateError(name, referenced_by):
            return (
                f"The profile template '{name}' does not exist "
                f"(extended by '{referenced_by}')."
            )

        case CyclicExtendsError(chain):
            return f"The profile templates extend each other in a cycle: {' -> '.join(chain)}"

        case TemplateFileCorruptError(source, reason):
            return f"The profile templates in {source} are invalid: {reason}"

        case TemplateFileReadError(path, reason):
            return f"Could not read the profile templates from {path}: {reason}"

        case TemplateFileWriteError(path, reason):
            return f"Could not save the profile templates to {path}: {reason}"

        case DownloadError(url, reason):
            return f"Could not download the profile templates from {url}: {reason}"

        case ShellWriteError(path, reason):
            return f"Could not write to the shell script {path}: {reason}"

        case UnsupportedShellError(name):
            return f"The shell '{name}' is not supported. Supported: bash, fish, posix, powershell, zsh."

        case ShellInstallError(path, reason):
            return f"Could not update the shell startup script {path}: {reason}"

        case ProgramNotFoundError(program):
            return f"The program '{program}' could not be found in PATH."

        case ExternalCommandError(command, status, stderr):
            detail = stderr.strip()
            summary = f"'{' '.join(command[:3])}' exited with status {status}."
            return f"{summary}\n{detail}" if detail else summary

        case AwsApiError(operation, reason):
            return f"{operation} failed: {reason}"

        case AuthExpiredError(start_url):
            return f"The device authorization for {start_url} expired. Run the command again."

        case AuthDeniedError(start_url):
            return f"The device authorization for {start_url} was denied."

        case SsoNotConfiguredError(profile, missing):
            name = profile or "the active profile"
            return (
                f"SSO is not configured for {name} (missing: {', '.join(missing)}). "
                "Run 'aws-login sso' first."
            )

        case NoProfilesError():
            return "There are no profiles available to choose from. Run 'aws-login pull <url>' first."

        case SelectionCancelledError():
            return "The selection was cancelled."

        case RegionUnknownError(profile):
            name = profile or "the active profile"
            return f"The region could not be determined for {name}. Use --region."

        case NoClustersError(region):
            return f"No EKS clusters are available in {region or 'the default region'}."

        case ClusterNotFoundError(cluster):
            return f"The EKS cluster '{cluster}' is not available."

        case NoProxiesError(region):
            return f"No RDS proxies are available in {region or 'the default region'}."

        case PortRequiredError(engine):
            return f"The database port is required for {engine} engines. Use --port."

        case _:
            return str(error)


def get_handoff() -> ShellHandoff | None:
    """The shell handoff for this invocation, exiting if it is unusable."""
    return handle_result(shell.get_handoff())


def print_manual(statements: Iterable[Statement]) -> None:
    """Tell the user how to apply statements the shell could not receive."""
    click.secho(
        "aws-login is not integrated into the shell environment "
        "(see 'aws-login shell install --help').",
        fg="yellow",
        err=True,
    )
    click.echo("Please run the following shell code manually:\n", err=True)
    for statement in statements:
        click.echo(shell.render(statement, ShellKind.POSIX))


def to_json(obj: Any) -> str:
    """Convert object to JSON string."""
    return json.dumps(obj, indent=2, sort_keys=True)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")


def echo_section(title: str) -> None:
    """Print a section header."""
    click.echo()
    click.secho(title, bold=True)
    click.echo("-" * len(title))
