"""Tests for the SSO, ECR, EKS and RDS workflows."""

import base64
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from botocore.stub import Stubber
from moto import mock_aws

from aws_login.lib import sso as device
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    AuthDeniedError,
    ClusterNotFoundError,
    NoClustersError,
    NoProxiesError,
    PortRequiredError,
    RegionUnknownError,
    SsoNotConfiguredError,
)
from aws_login.lib.result import Err, Ok, unwrap
from aws_login.lib.sso import DeviceAuthorization
from aws_login.models import ShellHandoff
from aws_login.operations import ecr as ecr_ops
from aws_login.operations import sso as sso_ops
from aws_login.operations.rds import Proxy
from aws_login.workflows import ecr as ecr_workflow
from aws_login.workflows import eks as eks_workflow
from aws_login.workflows import rds as rds_workflow
from aws_login.workflows import sso as sso_workflow

SSO_SETTINGS = {
    "sso_account_id": "123456789012",
    "sso_region": "us-east-1",
    "sso_role_name": "ReadOnly",
    "sso_start_url": "https://example.awsapps.com/start",
}

AUTH = DeviceAuthorization(
    start_url=SSO_SETTINGS["sso_start_url"],
    client_id="client",
    client_secret="secret",
    device_code="device",
    user_code="ABCD-EFGH",
    verification_uri="https://device.sso.us-east-1.amazonaws.com/",
    expires_in=600,
    interval=5,
)


@pytest.fixture
def mocked_aws(aws_credentials: None) -> Iterator[None]:
    """Mock AWS services with moto."""
    with mock_aws():
        yield


class TestSsoLogin:
    """Tests for sso login through the AWS CLI."""

    def test_configures_incomplete_profile(self) -> None:
        settings = {**SSO_SETTINGS, "sso_role_name": None}
        with (
            patch.object(sso_ops, "read_settings", return_value=Ok(settings)),
            patch.object(sso_ops, "configure", return_value=Ok(None)) as configure,
            patch.object(sso_ops, "login") as login,
        ):
            assert sso_workflow.login(AwsContext(profile="dev")) == Ok(True)

        configure.assert_called_once()
        login.assert_not_called()

    def test_logs_in_configured_profile(self) -> None:
        with (
            patch.object(sso_ops, "read_settings", return_value=Ok(SSO_SETTINGS)),
            patch.object(sso_ops, "configure") as configure,
            patch.object(sso_ops, "login", return_value=Ok(None)) as login,
        ):
            assert sso_workflow.login(AwsContext(profile="dev")) == Ok(False)

        configure.assert_not_called()
        login.assert_called_once()


class TestSsoExport:
    """Tests for exporting role credentials."""

    def test_emits_credentials(self, aws_credentials: None, handoff: ShellHandoff) -> None:
        notify = MagicMock()
        creds = sso_ops.RoleCredentials("AKIA", "secret'key", "session")
        with (
            patch.object(sso_ops, "read_settings", return_value=Ok(SSO_SETTINGS)),
            patch.object(device, "start", return_value=Ok(AUTH)),
            patch.object(device, "poll_for_token", return_value=Ok("token")),
            patch.object(sso_ops, "role_credentials", return_value=Ok(creds)) as role_credentials,
        ):
            result = sso_workflow.export_credentials(AwsContext(profile="dev"), handoff, notify)

        assert isinstance(result, Ok)
        notify.assert_called_once_with(AUTH)
        role_credentials.assert_called_once()
        assert role_credentials.call_args.args[1:] == ("us-east-1", "token", "123456789012", "ReadOnly")
        assert handoff.path.read_text() == (
            "export AWS_ACCESS_KEY_ID='AKIA'\n"
            "export AWS_SECRET_ACCESS_KEY='secret'\\''key'\n"
            "export AWS_SESSION_TOKEN='session'\n"
        )

    def test_unconfigured_profile(self, handoff: ShellHandoff) -> None:
        notify = MagicMock()
        settings = {**SSO_SETTINGS, "sso_start_url": None, "sso_region": None}
        with patch.object(sso_ops, "read_settings", return_value=Ok(settings)):
            result = sso_workflow.export_credentials(AwsContext(profile="dev"), handoff, notify)

        assert result == Err(SsoNotConfiguredError("dev", ("sso_region", "sso_start_url")))
        notify.assert_not_called()

    def test_denied_emits_nothing(self, aws_credentials: None, handoff: ShellHandoff) -> None:
        error = AuthDeniedError(SSO_SETTINGS["sso_start_url"])
        with (
            patch.object(sso_ops, "read_settings", return_value=Ok(SSO_SETTINGS)),
            patch.object(device, "start", return_value=Ok(AUTH)),
            patch.object(device, "poll_for_token", return_value=Err(error)),
            patch.object(sso_ops, "role_credentials") as role_credentials,
        ):
            result = sso_workflow.export_credentials(AwsContext(), handoff, MagicMock())

        assert result == Err(error)
        role_credentials.assert_not_called()
        assert handoff.path.read_text() == ""


class TestEcr:
    """Tests for ECR login."""

    def test_registry_uri(self, mocked_aws: None) -> None:
        ctx = AwsContext(region="eu-west-1")
        assert ecr_ops.registry_uri(ctx) == Ok("123456789012.dkr.ecr.eu-west-1.amazonaws.com")

    def test_registry_uri_without_region(
        self, aws_credentials: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("AWS_DEFAULT_REGION")
        monkeypatch.delenv("AWS_REGION", raising=False)
        assert ecr_ops.registry_uri(AwsContext(profile=None)) == Err(RegionUnknownError(None))

    def test_login_password_decodes_token(self, aws_credentials: None) -> None:
        ctx = AwsContext(region="us-east-1")
        token = base64.b64encode(b"AWS:secret-password").decode()
        with Stubber(ctx.ecr) as stubber:
            stubber.add_response(
                "get_authorization_token",
                {"authorizationData": [{"authorizationToken": token}]},
            )
            assert ecr_ops.login_password(ctx) == Ok("secret-password")

    def test_login_hands_password_to_docker(self) -> None:
        with (
            patch.object(ecr_workflow, "registry_uri", return_value=Ok("r.example")),
            patch.object(ecr_workflow, "login_password", return_value=Ok("pw")),
            patch.object(ecr_workflow, "docker_login", return_value=Ok(None)) as docker_login,
        ):
            assert ecr_workflow.login(AwsContext()) == Ok("r.example")

        docker_login.assert_called_once_with("r.example", "pw")

    def test_docker_login_uses_stdin(self) -> None:
        with patch("aws_login.lib.run.pass_through", return_value=Ok(None)) as pass_through:
            ecr_ops.docker_login("r.example", "pw")

        cmd = pass_through.call_args.args[0]
        assert "--password-stdin" in cmd
        assert "pw" not in cmd
        assert pass_through.call_args.kwargs == {"input": "pw"}


class TestEks:
    """Tests for EKS cluster selection."""

    def test_lists_sorted_clusters(self, mocked_aws: None) -> None:
        ctx = AwsContext(region="us-east-1")
        for name in ("beta", "alpha"):
            ctx.eks.create_cluster(
                name=name,
                roleArn="arn:aws:iam::123456789012:role/eks",
                resourcesVpcConfig={"subnetIds": []},
            )

        assert eks_workflow.clusters(ctx) == Ok(["alpha", "beta"])

    def test_no_clusters(self, mocked_aws: None) -> None:
        assert eks_workflow.clusters(AwsContext(region="us-east-1")) == Err(
            NoClustersError("us-east-1")
        )

    def test_configure_unknown_cluster(self) -> None:
        with patch.object(eks_workflow, "update_kubeconfig") as update:
            result = eks_workflow.configure(AwsContext(), "gamma", ["alpha"])

        assert result == Err(ClusterNotFoundError("gamma"))
        update.assert_not_called()

    def test_configure_cluster(self) -> None:
        ctx = AwsContext(region="us-east-1")
        with patch("aws_login.lib.run.pass_through", return_value=Ok(None)) as pass_through:
            assert eks_workflow.configure(ctx, "alpha", ["alpha"]) == Ok(None)

        pass_through.assert_called_once_with(
            ["aws", "--region", "us-east-1", "eks", "update-kubeconfig", "--name", "alpha"]
        )


def _proxy(name: str, status: str = "available", engine: str = "POSTGRESQL") -> dict[str, object]:
    return {
        "DBProxyName": name,
        "Endpoint": f"{name}.proxy-abc.us-east-1.rds.amazonaws.com",
        "EngineFamily": engine,
        "RequireTLS": True,
        "Status": status,
    }


class TestRds:
    """Tests for RDS Proxy tokens."""

    def test_lists_available_proxies(self, aws_credentials: None) -> None:
        ctx = AwsContext(region="us-east-1")
        with Stubber(ctx.rds) as stubber:
            stubber.add_response(
                "describe_db_proxies",
                {"DBProxies": [_proxy("zeta"), _proxy("alpha", engine="MYSQL"), _proxy("new", "creating")]},
            )
            found = unwrap(rds_workflow.proxies(ctx))

        assert [p.name for p in found] == ["alpha", "zeta"]
        assert found[0].engine == "MYSQL"
        assert found[0].require_tls is True

    def test_no_proxies(self, aws_credentials: None) -> None:
        ctx = AwsContext(region="us-east-1")
        with Stubber(ctx.rds) as stubber:
            stubber.add_response("describe_db_proxies", {"DBProxies": []})
            assert rds_workflow.proxies(ctx) == Err(NoProxiesError("us-east-1"))

    def test_postgresql_default_port(self) -> None:
        proxy = Proxy("db", "db.example", "POSTGRESQL", False)
        with patch.object(rds_workflow, "generate_token", return_value=Ok("tok")) as generate:
            assert rds_workflow.token(AwsContext(), proxy, "alice") == Ok("tok")

        assert generate.call_args.args[2] == 5432

    def test_other_engines_need_port(self) -> None:
        proxy = Proxy("db", "db.example", "MYSQL", False)
        assert rds_workflow.token(AwsContext(), proxy, "alice") == Err(PortRequiredError("MYSQL"))

    def test_explicit_port(self) -> None:
        proxy = Proxy("db", "db.example", "MYSQL", False)
        with patch.object(rds_workflow, "generate_token", return_value=Ok("tok")) as generate:
            rds_workflow.token(AwsContext(), proxy, "alice", port=3306)

        assert generate.call_args.args[2] == 3306

    def test_generates_presigned_token(self, aws_credentials: None) -> None:
        proxy = Proxy("db", "db.proxy.us-east-1.rds.amazonaws.com", "POSTGRESQL", True)
        token = unwrap(rds_workflow.token(AwsContext(region="us-east-1"), proxy, "alice"))

        assert token.startswith("db.proxy.us-east-1.rds.amazonaws.com:5432/?")
        assert "Action=connect" in token
        assert "DBUser=alice" in token
