"""Template store - parse, load and save profile template documents.

Document format:

    {
      "base": {"enabled": false, "settings": {"region": "us-east-1"}},
      "dev": {"extends": "base", "settings": {"role_session_name": "dev"}}
    }

`enabled` defaults to true, `extends` is optional, `settings` is required
and maps keys to strings, integers or booleans.
"""

import json
import logging
from pathlib import Path
from typing import Any

from aws_login.lib.errors import (
    TemplateFileCorruptError,
    TemplateFileReadError,
    TemplateFileWriteError,
    TemplateLoadError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.lib.storage import file
from aws_login.models import SettingValue, Template, TemplateCollection

logger = logging.getLogger(__name__)


class _InvalidDocument(Exception):
    pass


def _setting_value(template: str, key: str, value: Any) -> SettingValue:
    match value:
        case bool() | int() | str():
            return value
        case _:
            kind = "null" if value is None else type(value).__name__
            raise _InvalidDocument(
                f"template '{template}': setting '{key}' must be a string, integer or boolean, "
                f"not {kind}"
            )


def _template(name: str, raw: Any) -> Template:
    if not isinstance(raw, dict):
        raise _InvalidDocument(f"template '{name}' must be an object")

    enabled = raw.get("enabled", True)
    if not isinstance(enabled, bool):
        raise _InvalidDocument(f"template '{name}': 'enabled' must be a boolean")

    extends = raw.get("extends")
    if extends is not None and not isinstance(extends, str):
        raise _InvalidDocument(f"template '{name}': 'extends' must be a string")

    if "settings" not in raw:
        raise _InvalidDocument(f"template '{name}' has no 'settings'")
    settings = raw["settings"]
    if not isinstance(settings, dict):
        raise _InvalidDocument(f"template '{name}': 'settings' must be an object")

    return Template(
        name=name,
        settings={key: _setting_value(name, key, value) for key, value in settings.items()},
        enabled=enabled,
        extends=extends,
    )


def parse(text: str, source: str) -> Result[TemplateCollection, TemplateFileCorruptError]:
    """Parse a template document.

    source names where the text came from (a path or URL) for error messages.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(TemplateFileCorruptError(source, str(e)))

    if not isinstance(raw, dict):
        return Err(TemplateFileCorruptError(source, "the document must be a JSON object"))

    try:
        collection = {name: _template(name, value) for name, value in raw.items()}
    except _InvalidDocument as e:
        return Err(TemplateFileCorruptError(source, str(e)))

    logger.debug("Parsed %d templates from %s", len(collection), source)
    return Ok(collection)


def to_document(collection: TemplateCollection) -> str:
    """Serialize a collection back to the document format."""
    raw: dict[str, dict[str, Any]] = {}
    for name in sorted(collection):
        template = collection[name]
        entry: dict[str, Any] = {"enabled": template.enabled}
        if template.extends is not None:
            entry["extends"] = template.extends
        entry["settings"] = dict(template.settings)
        raw[name] = entry
    return json.dumps(raw, indent=2) + "\n"


def load(path: Path) -> Result[TemplateCollection, TemplateLoadError]:
    """Load templates from a file.

    A missing file is an empty collection. A corrupt file is reported and
    left as is.
    """
    logger.debug("Reading templates from %s", path)
    try:
        text = file.read(path)
    except UnicodeDecodeError as e:
        return Err(TemplateFileCorruptError(str(path), str(e)))
    except OSError as e:
        return Err(TemplateFileReadError(path, str(e)))

    if text is None:
        return Ok({})
    return parse(text, str(path))


def save(path: Path, collection: TemplateCollection) -> Result[None, TemplateFileWriteError]:
    """Write templates to a file, creating parent directories."""
    logger.debug("Writing %d templates to %s", len(collection), path)
    try:
        file.write(path, to_document(collection))
    except OSError as e:
        return Err(TemplateFileWriteError(path, str(e)))
    return Ok(None)
