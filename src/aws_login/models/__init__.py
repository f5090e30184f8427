"""aws-login data models.

Pure data structures. Parsing and storage live in lib/templates.py,
the shell dialects live in lib/shell.py.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

# A setting value is one of a closed set of scalar kinds. bool is listed
# first because it is a subclass of int.
type SettingValue = bool | int | str
type Settings = dict[str, SettingValue]

_VAR_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def render_setting(value: SettingValue) -> str:
    """Render a setting value the way the AWS CLI config file expects it."""
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case str():
            return value


@dataclass(frozen=True)
class Template:
    """A named, reusable set of AWS CLI profile settings.

    `enabled` only controls whether the template is offered for selection.
    It has no effect on templates reached through `extends`.
    """

    name: str
    settings: Settings = field(default_factory=dict)
    enabled: bool = True
    extends: str | None = None


type TemplateCollection = dict[str, Template]


class Strategy(StrEnum):
    """How a pulled collection is combined with the local one."""

    MERGE = "merge"
    REPLACE = "replace"


class Resolution(StrEnum):
    """What to do with existing local templates when pulling."""

    CANCEL = "cancel"
    MERGE = "merge"
    REPLACE = "replace"

    @property
    def strategy(self) -> Strategy | None:
        match self:
            case Resolution.MERGE:
                return Strategy.MERGE
            case Resolution.REPLACE:
                return Strategy.REPLACE
            case Resolution.CANCEL:
                return None

    @property
    def description(self) -> str:
        match self:
            case Resolution.CANCEL:
                return "Cancel the download."
            case Resolution.MERGE:
                return "Merge with the existing templates."
            case Resolution.REPLACE:
                return "Replace the existing templates."


class ShellKind(StrEnum):
    """Dialect of the statements written to the handoff file."""

    POSIX = "posix"
    FISH = "fish"
    POWERSHELL = "powershell"


@dataclass(frozen=True)
class SetVar:
    """Set and export an environment variable in the parent shell."""

    name: str
    value: str

    def __post_init__(self) -> None:
        if not _VAR_NAME.match(self.name):
            raise ValueError(f"Invalid environment variable name: {self.name!r}")


@dataclass(frozen=True)
class UnsetVar:
    """Remove an environment variable from the parent shell."""

    name: str

    def __post_init__(self) -> None:
        if not _VAR_NAME.match(self.name):
            raise ValueError(f"Invalid environment variable name: {self.name!r}")


type Statement = SetVar | UnsetVar


@dataclass(frozen=True)
class ShellHandoff:
    """Temporary script file owned by the invoking shell wrapper."""

    path: Path
    kind: ShellKind = ShellKind.POSIX
