"""XDG-compliant paths for CLI data."""

import os
from pathlib import Path

APP_NAME = "aws-login"

TEMPLATES_ENV = "AWS_LOGIN_TEMPLATES"


def config_dir() -> Path:
    """~/.config/aws-login/ (%APPDATA%/AWS Login/ on Windows)"""
    if os.name == "nt" and "APPDATA" in os.environ:
        return Path(os.environ["APPDATA"]) / "AWS Login"
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_NAME


def templates_path() -> Path:
    """Profile templates file, overridable with AWS_LOGIN_TEMPLATES."""
    override = os.environ.get(TEMPLATES_ENV)
    if override:
        return Path(override)
    return config_dir() / "templates.json"
