"""Operations layer - atomic calls into external tools that return Result types."""

from aws_login.operations.download import fetch
from aws_login.operations.ecr import docker_login, login_password, registry_uri
from aws_login.operations.eks import list_clusters, update_kubeconfig
from aws_login.operations.profile import create_profile, get_setting, list_profiles
from aws_login.operations.rds import generate_token, list_proxies
from aws_login.operations.sso import configure, login, read_settings, role_credentials

__all__ = [
    # profile
    "list_profiles",
    "get_setting",
    "create_profile",
    # download
    "fetch",
    # sso
    "read_settings",
    "configure",
    "login",
    "role_credentials",
    # ecr
    "registry_uri",
    "login_password",
    "docker_login",
    # eks
    "list_clusters",
    "update_kubeconfig",
    # rds
    "list_proxies",
    "generate_token",
]
