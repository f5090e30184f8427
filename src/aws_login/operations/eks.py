"""EKS operations - list clusters, write kubeconfig."""

from botocore.exceptions import BotoCoreError, ClientError

from aws_login.lib import run
from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import AwsApiError, RunError
from aws_login.lib.result import Err, Ok, Result


def list_clusters(ctx: AwsContext) -> Result[list[str], AwsApiError]:
    """Names of the EKS clusters in the session's region."""
    clusters: list[str] = []
    try:
        for page in ctx.eks.get_paginator("list_clusters").paginate():
            clusters.extend(page["clusters"])
    except (BotoCoreError, ClientError) as e:
        return Err(AwsApiError("ListClusters", str(e)))
    return Ok(sorted(clusters))


def update_kubeconfig(ctx: AwsContext, cluster: str) -> Result[None, RunError]:
    """Have the AWS CLI add the cluster to the kubeconfig."""
    return run.pass_through(run.aws_command(ctx, "eks", "update-kubeconfig", "--name", cluster))
