"""Shared pytest fixtures for aws-login tests."""

from pathlib import Path

import pytest

from aws_login.models import ShellHandoff, ShellKind, Template, TemplateCollection


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell integration and profile out of tests."""
    for name in ("AWS_LOGIN_SCRIPT", "AWS_LOGIN_SHELL", "AWS_LOGIN_TEMPLATES", "AWS_PROFILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Mock AWS credentials for moto and stubbed clients."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))


@pytest.fixture
def temp_xdg_dirs(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, Path]:
    """Point the config directory at a temporary location."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))

    return {
        "config": config_dir,
        "templates": config_dir / "aws-login" / "templates.json",
        "base": tmp_path,
    }


@pytest.fixture
def handoff(tmp_path: Path) -> ShellHandoff:
    """An empty handoff file, as created by the shell wrapper."""
    path = tmp_path / "aws-login-script"
    path.touch()
    return ShellHandoff(path, ShellKind.POSIX)


@pytest.fixture
def sample_collection() -> TemplateCollection:
    """A disabled base template extended by an enabled one."""
    return {
        "base": Template(name="base", enabled=False, settings={"region": "us-east-1"}),
        "dev": Template(name="dev", extends="base", settings={"role": "ReadOnly"}),
    }
