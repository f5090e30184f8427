"""Interactive terminal prompts."""

from collections.abc import Sequence
from typing import TypeVar

import questionary

from aws_login.lib.errors import SelectionCancelledError
from aws_login.lib.result import Err, Ok, Result

T = TypeVar("T")


def select(prompt: str, choices: Sequence[str]) -> Result[str, SelectionCancelledError]:
    """Ask the user to pick one of choices."""
    answer = questionary.select(prompt, choices=list(choices)).ask()
    if answer is None:
        return Err(SelectionCancelledError(prompt))
    return Ok(answer)


def select_labeled(
    prompt: str, choices: Sequence[tuple[str, T]]
) -> Result[T, SelectionCancelledError]:
    """Ask the user to pick a value shown under a label."""
    answer = questionary.select(
        prompt,
        choices=[questionary.Choice(label, value=value) for label, value in choices],
    ).ask()
    if answer is None:
        return Err(SelectionCancelledError(prompt))
    return Ok(answer)
