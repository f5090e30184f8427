"""AWS session and client management.

AwsContext is created once per command from the --profile/--region options
and passed to operations. Clients are created lazily on first access.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

import boto3

if TYPE_CHECKING:
    from mypy_boto3_ecr import ECRClient
    from mypy_boto3_eks import EKSClient
    from mypy_boto3_rds import RDSClient
    from mypy_boto3_sso import SSOClient
    from mypy_boto3_sso_oidc import SSOOIDCClient
    from mypy_boto3_sts import STSClient


@dataclass
class AwsContext:
    """AWS session and clients for one command.

    Example:
        ctx = AwsContext(region="us-east-1", profile="dev")
        ctx.eks.list_clusters()
    """

    region: str | None = None
    profile: str | None = None

    @cached_property
    def session(self) -> boto3.Session:
        """Boto3 session configured with region and profile."""
        return boto3.Session(region_name=self.region, profile_name=self.profile)

    @cached_property
    def session_region(self) -> str | None:
        """Region from the options, or from the profile configuration."""
        return self.region or self.session.region_name

    @cached_property
    def sts(self) -> STSClient:
        """STS client."""
        return self.session.client("sts")

    @cached_property
    def ecr(self) -> ECRClient:
        """ECR client."""
        return self.session.client("ecr")

    @cached_property
    def eks(self) -> EKSClient:
        """EKS client."""
        return self.session.client("eks")

    @cached_property
    def rds(self) -> RDSClient:
        """RDS client."""
        return self.session.client("rds")

    def sso(self, region: str) -> SSOClient:
        """SSO portal client for the Identity Center region.

        Uses a profile-less session; the portal API authenticates with the
        access token, not with profile credentials.
        """
        return boto3.Session().client("sso", region_name=region)

    def sso_oidc(self, region: str) -> SSOOIDCClient:
        """SSO OIDC client for the Identity Center region."""
        return boto3.Session().client("sso-oidc", region_name=region)

    @cached_property
    def account_id(self) -> str:
        """AWS account ID for the current session."""
        return self.sts.get_caller_identity()["Account"]
