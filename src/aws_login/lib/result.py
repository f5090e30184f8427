"""Result type for error handling without exceptions.

Business logic returns `Ok(value)` or `Err(error)`; callers pattern match:

    match resolver.resolve(collection, name):
        case Ok(settings):
            ...
        case Err(error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success case containing a value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error case containing an error."""

    error: E


type Result[T, E] = Ok[T] | Err[E]


def map_ok(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Apply f to the value if Ok, otherwise return the Err unchanged."""
    match result:
        case Ok(value):
            return Ok(f(value))
        case Err() as e:
            return e


def flat_map(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain another fallible step onto an Ok value."""
    match result:
        case Ok(value):
            return f(value)
        case Err() as e:
            return e


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from Ok, or raise ValueError if Err.

    Meant for tests and for results that cannot fail by construction.
    """
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise ValueError(f"Called unwrap on Err: {error}")

