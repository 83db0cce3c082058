"""
Result type returned by the auth gate and ownership guard.

A result is either `Ok(value)` or `Err(error)`. Callers check which one they
got with `isinstance`, or call `unwrap()` to get the value and let the error
propagate as an exception.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from tinyapp.errors import TinyAppError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: TinyAppError


Result = Union[Ok[T], Err]


def unwrap(result: "Result[T]") -> T:
    """Return the Ok value or raise the Err's error"""
    if isinstance(result, Err):
        raise result.error
    return result.value
