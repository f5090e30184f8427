"""Workflows layer - orchestrate operations into user intents."""

from aws_login.workflows import ecr, eks, profile, pull, rds, shell, sso, templates

__all__ = [
    "profile",
    "pull",
    "templates",
    "shell",
    "sso",
    "ecr",
    "eks",
    "rds",
]
