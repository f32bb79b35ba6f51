"""Backoff strategy base class and duration helpers."""

from abc import ABC, abstractmethod
from datetime import timedelta
from itertools import islice
from typing import Iterator, Union

from retryfn.core.exceptions import ConfigurationError

DelayLike = Union[timedelta, int, float]


def as_delay(value: DelayLike) -> timedelta:
    """Normalize a delay to a timedelta.

    Numbers are read as seconds.

    Raises:
        ConfigurationError: If the delay is negative or not a duration
    """
    if isinstance(value, timedelta):
        delay = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        delay = timedelta(seconds=value)
    else:
        raise ConfigurationError(
            f"Delay must be a timedelta or a number of seconds, got {type(value).__name__}"
        )

    if delay < timedelta(0):
        raise ConfigurationError(f"Delay must not be negative: {delay}")
    return delay


class BackoffStrategy(ABC):
    """Produces the delays a retry loop sleeps between attempts.

    Strategies are iterators: every draw advances internal position, and the
    only way to start over is to build a new instance. Built-in strategies
    never end on their own; use ``take`` for a finite schedule.
    """

    def __iter__(self) -> Iterator[timedelta]:
        return self

    @abstractmethod
    def __next__(self) -> timedelta:
        """Return the next delay."""
        ...

    def take(self, n: int) -> Iterator[timedelta]:
        """Limit the strategy to its next ``n`` delays.

        Args:
            n: Maximum number of delays to draw

        Returns:
            Finite iterator sharing position with this strategy
        """
        if n < 0:
            raise ConfigurationError(f"Cannot take a negative number of delays: {n}")
        return islice(self, n)


class FixedDurationMixin:
    """Alternate constructors taking a single duration in a given unit."""

    @classmethod
    def from_millis(cls, millis: int):
        return cls(timedelta(milliseconds=millis))

    @classmethod
    def from_secs(cls, secs: int):
        return cls(timedelta(seconds=secs))

    @classmethod
    def from_micros(cls, micros: int):
        return cls(timedelta(microseconds=micros))

    @classmethod
    def from_nanos(cls, nanos: int):
        # timedelta resolution is one microsecond
        return cls(timedelta(microseconds=nanos / 1000))


def saturating_add(total: timedelta, delay: timedelta) -> timedelta:
    """Add two delays, saturating to ``timedelta.max`` on overflow."""
    try:
        return total + delay
    except OverflowError:
        return timedelta.max
