"""Error types for aws-login.

All errors are frozen dataclasses - no exceptions in business logic.
Pattern match on these in the CLI layer to provide user-friendly messages.
"""

from dataclasses import dataclass
from pathlib import Path

# =============================================================================
# Template Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class UnknownTemplateError:
    """A template name is not in the collection.

    referenced_by is set when the name came from another template's extends.
    """

    name: str
    referenced_by: str | None = None


@dataclass(frozen=True, slots=True)
class CyclicExtendsError:
    """The extends chain revisits a template. The last name is the revisited one."""

    chain: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TemplateFileCorruptError:
    """The template document is not valid."""

    source: str
    reason: str


@dataclass(frozen=True, slots=True)
class TemplateFileReadError:
    """The template file exists but could not be read."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class TemplateFileWriteError:
    """The template file could not be written."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class DownloadError:
    """A remote template document could not be downloaded."""

    url: str
    reason: str


# =============================================================================
# Shell Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class ShellWriteError:
    """The handoff script file could not be written."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class UnsupportedShellError:
    """The shell (or handoff dialect) is not supported."""

    shell: str


@dataclass(frozen=True, slots=True)
class ShellInstallError:
    """The shell startup script could not be updated."""

    path: Path
    reason: str


# =============================================================================
# External Command Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class ProgramNotFoundError:
    """An external program is not on PATH."""

    program: str


@dataclass(frozen=True, slots=True)
class ExternalCommandError:
    """An external program exited with a non-zero status."""

    command: tuple[str, ...]
    status: int
    stderr: str


@dataclass(frozen=True, slots=True)
class AwsApiError:
    """An AWS API call failed."""

    operation: str
    reason: str


# =============================================================================
# Authentication Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class AuthExpiredError:
    """The device authorization expired before it was approved."""

    start_url: str


@dataclass(frozen=True, slots=True)
class AuthDeniedError:
    """The device authorization was denied."""

    start_url: str


@dataclass(frozen=True, slots=True)
class SsoNotConfiguredError:
    """The profile is missing settings required for SSO."""

    profile: str | None
    missing: tuple[str, ...]


# =============================================================================
# Selection Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class NoProfilesError:
    """Neither templates nor AWS CLI profiles are available."""


@dataclass(frozen=True, slots=True)
class SelectionCancelledError:
    """The user aborted an interactive prompt."""

    prompt: str


@dataclass(frozen=True, slots=True)
class RegionUnknownError:
    """No region was given and none is configured for the profile."""

    profile: str | None


@dataclass(frozen=True, slots=True)
class NoClustersError:
    """No EKS clusters are available."""

    region: str | None


@dataclass(frozen=True, slots=True)
class ClusterNotFoundError:
    """The requested EKS cluster is not available."""

    cluster: str


@dataclass(frozen=True, slots=True)
class NoProxiesError:
    """No RDS proxies are available."""

    region: str | None


@dataclass(frozen=True, slots=True)
class PortRequiredError:
    """The proxy engine has no default port."""

    engine: str


# =============================================================================
# Type Aliases for Error Unions
# =============================================================================

type ResolveError = UnknownTemplateError | CyclicExtendsError
type TemplateLoadError = TemplateFileReadError | TemplateFileCorruptError
type RunError = ProgramNotFoundError | ExternalCommandError
type AuthError = AuthExpiredError | AuthDeniedError | AwsApiError
