"""Template inspection workflows."""

from pathlib import Path

from aws_login.lib import resolver, templates
from aws_login.lib.errors import ResolveError, TemplateLoadError
from aws_login.lib.result import Err, Ok, Result
from aws_login.models import Settings, TemplateCollection


def load(path: Path) -> Result[TemplateCollection, TemplateLoadError]:
    """Load the local templates."""
    return templates.load(path)


def show(path: Path, name: str) -> Result[Settings, TemplateLoadError | ResolveError]:
    """Resolved settings of one local template."""
    match templates.load(path):
        case Err() as e:
            return e
        case Ok(collection):
            return resolver.resolve(collection, name)
