"""EKS command - configure kubectl for an Elastic Kubernetes Service cluster."""

import click

from aws_login.commands.common import aws_options, handle_result, make_context
from aws_login.lib import term
from aws_login.workflows import eks as eks_workflow


@click.command()
@click.argument("cluster", required=False)
@aws_options
def eks(cluster: str | None, region: str | None, profile: str | None) -> None:
    """Add an EKS cluster to the kubeconfig.

    Prompts for CLUSTER if it is not given.
    """
    ctx = make_context(region, profile)
    available = handle_result(eks_workflow.clusters(ctx))

    if cluster is None:
        cluster = handle_result(term.select("Please select an EKS cluster to set up:", available))

    handle_result(eks_workflow.configure(ctx, cluster, available))
