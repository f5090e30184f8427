"""Template resolution - flatten an extends chain into one settings map.

Resolution walks from the named template toward its root ancestor, then
applies settings root first so the most-derived template wins each key:

    base  {region: us-east-1, output: json}
    team  extends base {output: table}
    dev   extends team {role_session_name: dev}

    resolve(dev) == {region: us-east-1, output: table, role_session_name: dev}
"""

import logging

from aws_login.lib.errors import CyclicExtendsError, ResolveError, UnknownTemplateError
from aws_login.lib.result import Err, Ok, Result
from aws_login.models import Settings, Template, TemplateCollection

logger = logging.getLogger(__name__)


def ancestry(collection: TemplateCollection, name: str) -> Result[list[Template], ResolveError]:
    """Return the chain from `name` to its root ancestor, `name` first.

    Fails on the first revisited name instead of building the whole chain.
    """
    if name not in collection:
        return Err(UnknownTemplateError(name))

    chain = [collection[name]]
    visited = {name}

    while (parent := chain[-1].extends) is not None:
        if parent in visited:
            return Err(CyclicExtendsError(tuple(t.name for t in chain) + (parent,)))
        if parent not in collection:
            return Err(UnknownTemplateError(parent, referenced_by=chain[-1].name))
        visited.add(parent)
        chain.append(collection[parent])

    return Ok(chain)


def resolve(collection: TemplateCollection, name: str) -> Result[Settings, ResolveError]:
    """Compute the effective settings for a template.

    `enabled` is ignored here; disabled ancestors still contribute.
    """
    match ancestry(collection, name):
        case Err() as e:
            return e
        case Ok(chain):
            pass

    settings: Settings = {}
    for template in reversed(chain):
        settings.update(template.settings)

    logger.debug(
        "Resolved %s through %s: %d settings",
        name,
        " -> ".join(t.name for t in chain),
        len(settings),
    )
    return Ok(settings)


def enabled_names(collection: TemplateCollection) -> list[str]:
    """Names of templates offered for selection, sorted."""
    return sorted(name for name, template in collection.items() if template.enabled)
