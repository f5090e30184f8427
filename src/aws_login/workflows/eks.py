"""EKS workflows - pick a cluster and configure kubectl for it."""

from aws_login.lib.aws import AwsContext
from aws_login.lib.errors import (
    AwsApiError,
    ClusterNotFoundError,
    ExternalCommandError,
    NoClustersError,
    ProgramNotFoundError,
)
from aws_login.lib.result import Err, Ok, Result
from aws_login.operations.eks import list_clusters, update_kubeconfig

type UpdateError = ClusterNotFoundError | ProgramNotFoundError | ExternalCommandError


def clusters(ctx: AwsContext) -> Result[list[str], AwsApiError | NoClustersError]:
    """Clusters available to the session, failing if there are none."""
    match list_clusters(ctx):
        case Err() as e:
            return e
        case Ok([]):
            return Err(NoClustersError(ctx.session_region))
        case Ok(names):
            return Ok(names)


def configure(ctx: AwsContext, cluster: str, available: list[str]) -> Result[None, UpdateError]:
    """Add the cluster to the kubeconfig if it is one of the available clusters."""
    if cluster not in available:
        return Err(ClusterNotFoundError(cluster))
    return update_kubeconfig(ctx, cluster)
