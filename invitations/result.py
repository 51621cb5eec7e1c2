"""
Result objects for the invitation list domain.

Domain operations and use cases return either ``Success(value)`` or
``Failure(error)`` instead of raising for expected business conditions
(duplicate names, unknown households, mismatched RSVP rosters).
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)
F = TypeVar("F", bound=Exception)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def map(self, func: Callable[[T], U]) -> "Success[U]":
        return Success(func(self.value))

    def map_error(self, func: Callable) -> "Success[T]":
        return self

    def and_then(self, func: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def map(self, func: Callable) -> "Failure[E]":
        return self

    def map_error(self, func: Callable[[E], F]) -> "Failure[F]":
        return Failure(func(self.error))

    def and_then(self, func: Callable) -> "Failure[E]":
        return self

    def unwrap(self):
        """Raise the carried problem. Only used at adapter edges and in tests."""
        raise self.error


Result: TypeAlias = Union[Success[T], Failure[E]]
