"""Pull workflows - download templates and combine them with the local ones."""

from dataclasses import dataclass
from pathlib import Path

from aws_login.lib import templates
from aws_login.lib.errors import DownloadError, TemplateFileCorruptError, TemplateFileWriteError
from aws_login.lib.merge import merge
from aws_login.lib.result import Err, Ok, Result, flat_map
from aws_login.models import Resolution, TemplateCollection
from aws_login.operations.download import fetch

type FetchError = DownloadError | TemplateFileCorruptError


@dataclass(frozen=True, slots=True)
class PullOutcome:
    """What happened to the local templates."""

    resolution: Resolution | None
    saved: bool
    count: int


def fetch_templates(url: str) -> Result[TemplateCollection, FetchError]:
    """Download and parse a template document."""
    return flat_map(fetch(url), lambda text: templates.parse(text, url))


def store(
    path: Path,
    local: TemplateCollection,
    remote: TemplateCollection,
    resolution: Resolution | None,
) -> Result[PullOutcome, TemplateFileWriteError]:
    """Persist pulled templates.

    Without local templates the remote ones are saved as is and resolution
    is ignored. Otherwise resolution decides: CANCEL keeps the local file
    untouched, MERGE lets remote templates replace local ones of the same
    name (whole templates, never individual settings), REPLACE drops all
    local templates.
    """
    if not local:
        result = remote
        resolution = None
    else:
        if resolution is None:
            raise ValueError("A resolution is required when local templates exist")
        strategy = resolution.strategy
        if strategy is None:
            return Ok(PullOutcome(resolution, saved=False, count=len(local)))
        result = merge(local, remote, strategy)

    match templates.save(path, result):
        case Err() as e:
            return e
        case Ok(_):
            return Ok(PullOutcome(resolution, saved=True, count=len(result)))
