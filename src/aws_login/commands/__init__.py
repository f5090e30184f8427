"""Commands layer - CLI facade over workflows."""

from aws_login.commands.ecr import ecr
from aws_login.commands.eks import eks
from aws_login.commands.pick import pick
from aws_login.commands.pull import pull
from aws_login.commands.rds import rds
from aws_login.commands.shell import shell
from aws_login.commands.sso import sso
from aws_login.commands.templates import templates_group

__all__ = [
    "pick",
    "pull",
    "templates_group",
    "shell",
    "sso",
    "ecr",
    "eks",
    "rds",
]
