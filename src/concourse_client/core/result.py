"""Result types for railway-oriented validation.

Validation checks return a Result instead of raising so that the failing
reasons of several fields can be collected into one ValidationError.

Usage:
    def check_positive(value: int) -> Result[int, str]:
        if value <= 0:
            return Failure(error="must be positive")
        return Success(value=value)

    match chain(5, (check_positive,)):
        case Success(value=value):
            ...
        case Failure(error=reason):
            ...
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Success[T]:
    """A check passed.

    Attributes:
        value: The checked value, passed on to the next check.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure[E]:
    """A check failed.

    Attributes:
        error: Why it failed (for validation, the text after the field label).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]


def chain[T, E](
    value: T, steps: Iterable[Callable[[T], Result[T, E]]]
) -> Result[T, E]:
    """Run steps in order, feeding each success into the next.

    Stops at the first Failure and returns it; otherwise returns the last
    Success (or Success(value) when there are no steps).
    """
    result: Result[T, E] = Success(value=value)
    for step in steps:
        result = step(result.value)
        if isinstance(result, Failure):
            return result
    return result
