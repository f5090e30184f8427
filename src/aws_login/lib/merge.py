"""Combine a pulled template collection with the local one."""

from aws_login.models import Strategy, TemplateCollection


def merge(
    local: TemplateCollection,
    remote: TemplateCollection,
    strategy: Strategy,
) -> TemplateCollection:
    """Combine two collections into a new one.

    REPLACE returns the remote templates only. MERGE keeps every local
    template and adds the remote ones; when both define a name, the remote
    template replaces the local one entirely. Settings of a single template
    are never merged key by key.

    Inheritance is not checked here. A dangling `extends` surfaces when the
    template is resolved.
    """
    match strategy:
        case Strategy.REPLACE:
            return dict(remote)
        case Strategy.MERGE:
            return {**local, **remote}
