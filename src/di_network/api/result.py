"""
Result Module

Single-shot outcome passed to completion callbacks.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation finished and produced ``value``."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, transform: Callable[[T], U]) -> "Success[U]":
        """Return a new Success holding ``transform(value)``."""
        return Success(transform(self.value))


@dataclass(frozen=True)
class Failure:
    """Operation failed with ``error``."""
    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    def map(self, transform: Callable[[Any], Any]) -> "Failure":
        # Errors pass through untouched
        return self


Result = Union[Success[T], Failure]
Completion = Callable[[Result], None]
