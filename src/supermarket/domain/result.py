"""Result pipeline: sequence fallible steps without raising exceptions.

A ``Result`` is either a ``Success`` carrying a value or a ``Failure``
carrying an error message.  Steps are composed with plain functions
(``map_result``, ``and_then``, ``ensure``, ``fold``) rather than methods,
so a pipeline reads top to bottom::

    result = to_result(repo.find(product_id), "not found")
    result = ensure(result, lambda p: p.quantity > 0, "empty")
    return fold(result, on_success=..., on_failure=...)

Once a pipeline has failed every later step is skipped and the original
failure is returned unchanged, so at most one error is surfaced and no
step ever runs against invalid state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    error: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


# --- Constructors -------------------------------------------------------------


def success(value: T = None) -> Success[T]:
    return Success(value)


def failure(error: str) -> Failure:
    return Failure(error)


def to_result(value: T | None, error: str) -> Result[T]:
    """Turn an optional value into a Result; ``None`` becomes *error*."""
    if value is None:
        return Failure(error)
    return Success(value)


# --- Combinators --------------------------------------------------------------


def combine(*results: Result[Any]) -> Result[tuple]:
    """Succeed with the tuple of all values, or return the first failure.

    Every argument is inspected in order; only the first failure is
    reported even when several inputs failed.
    """
    for result in results:
        if isinstance(result, Failure):
            return result
    return Success(tuple(result.value for result in results))


def map_result(result: Result[T], f: Callable[[T], U]) -> Result[U]:
    """Transform the success value; a failure passes through untouched."""
    if isinstance(result, Failure):
        return result
    return Success(f(result.value))


def and_then(result: Result[T], f: Callable[[T], Result[U] | U]) -> Result[U]:
    """Run the next step on success.

    *f* may return a Result (which is returned as is) or a plain value
    (which is wrapped in ``Success``).
    """
    if isinstance(result, Failure):
        return result
    outcome = f(result.value)
    if isinstance(outcome, (Success, Failure)):
        return outcome
    return Success(outcome)


def ensure(
    result: Result[T], predicate: Callable[[T], bool], error: str
) -> Result[T]:
    """Fail with *error* when a successful value does not satisfy *predicate*."""
    if isinstance(result, Failure):
        return result
    if not predicate(result.value):
        return Failure(error)
    return result


def fold(
    result: Result[T],
    on_success: Callable[[T], R],
    on_failure: Callable[[str], R],
) -> R:
    """Terminal step: collapse a Result into a single output shape."""
    if isinstance(result, Failure):
        return on_failure(result.error)
    return on_success(result.value)


def pipe(result: Result[Any], *steps: Callable[[Result[Any]], Result[Any]]) -> Result[Any]:
    """Thread *result* through single-argument *steps* in order."""
    for step in steps:
        result = step(result)
    return result
