"""Core type definitions for retryfn."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class StrategyKind(str, Enum):
    """Built-in backoff strategy kinds."""

    IMMEDIATE = "immediate"
    CONSTANT = "constant"
    EXPONENTIAL = "exponential"


class AsyncBackend(str, Enum):
    """Suspend primitives available to the async retry loop."""

    ASYNCIO = "asyncio"
    ANYIO = "anyio"


@dataclass(frozen=True)
class RetryOp:
    """Inspection into the current state of a retry loop.

    Passed to the operation on every attempt.
    """

    retries: int = 0
    """Number of attempts that returned ``Retry`` so far."""

    total_delay: timedelta = field(default_factory=timedelta)
    """Total time slept between attempts so far."""


@dataclass(frozen=True)
class Retry:
    """Try again after the next delay."""


@dataclass(frozen=True)
class Err(Generic[E]):
    """Stop and report failure with ``error``."""

    error: E


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Stop and return ``value``."""

    value: T


RetryResult = Union[Ok[T], Err[E], Retry]
