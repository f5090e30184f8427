"""Profile workflows - choose, create and activate AWS CLI profiles."""

import logging
from dataclasses import dataclass

from aws_login.lib import resolver, shell
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    CyclicExtendsError,
    ExternalCommandError,
    NoProfilesError,
    ProgramNotFoundError,
    ShellWriteError,
    UnknownTemplateError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.models import SetVar, ShellHandoff, Statement, TemplateCollection
from aws_login.operations.profile import create_profile, list_profiles

logger = logging.getLogger(__name__)

PROFILE_ENV = "AWS_PROFILE"

type ChoicesError = NoProfilesError | ProgramNotFoundError | ExternalCommandError
type ActivateError = (
    UnknownTemplateError
    | CyclicExtendsError
    | ProgramNotFoundError
    | ExternalCommandError
    | ShellWriteError
)


@dataclass(frozen=True, slots=True)
class ProfileChoices:
    """Profiles the user can pick from."""

    existing: tuple[str, ...]
    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Activation:
    """Outcome of activating a profile.

    emitted is False when aws-login runs outside a shell wrapper; the
    statements then have to be applied by hand.
    """

    profile: str
    created: bool
    statements: tuple[Statement, ...]
    emitted: bool


def choices(
    ctx: AwsContext, collection: TemplateCollection, name: str | None = None
) -> Result[ProfileChoices, ChoicesError]:
    """Enabled templates plus existing AWS CLI profiles, sorted and de-duplicated.

    An empty list is only an error when the user has to pick from it, i.e.
    when no `name` was given.
    """
    match list_profiles(ctx):
        case Err() as e:
            return e
        case Ok(existing):
            pass

    names = sorted(set(resolver.enabled_names(collection)) | set(existing))
    if name is None and not names:
        return Err(NoProfilesError())

    return Ok(ProfileChoices(existing=tuple(existing), names=tuple(names)))


def activate(
    name: str,
    collection: TemplateCollection,
    existing: tuple[str, ...],
    handoff: ShellHandoff | None,
) -> Result[Activation, ActivateError]:
    """Make `name` the active profile of the calling shell.

    1. Create the AWS CLI profile from its resolved template if it does not exist
    2. Emit AWS_PROFILE=<name> through the shell handoff
    """
    created = False
    if name not in existing:
        match resolver.resolve(collection, name):
            case Err() as e:
                return e
            case Ok(settings):
                pass

        logger.debug("Creating AWS CLI profile %s", name)
        match create_profile(name, settings):
            case Err() as e:
                return e
            case Ok(_):
                created = True

    statements: tuple[Statement, ...] = (SetVar(PROFILE_ENV, name),)

    if handoff is not None:
        match shell.emit(handoff, statements):
            case Err() as e:
                return e
            case Ok(_):
                pass

    return Ok(Activation(name, created, statements, emitted=handoff is not None))
