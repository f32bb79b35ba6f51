"""Exponential backoff.

Starting at some time, each delay multiplies the previous one by a base::

    base = 2, start = 2ms  |----|--------|----------------|

up to an optional maximum duration. Note that the first delay drawn is
already ``initial * base``; the initial value itself is never yielded.

Example:
    >>> s = ExponentialBackoff.from_millis(100)
    >>> [d.total_seconds() for d in s.take(3)]
    [0.2, 0.4, 0.8]
"""

from datetime import timedelta
from typing import Optional

from retryfn.core.exceptions import ConfigurationError

from .base import BackoffStrategy, DelayLike, FixedDurationMixin, as_delay


class ExponentialBackoff(FixedDurationMixin, BackoffStrategy):
    """Geometrically growing delays with an optional ceiling."""

    def __init__(
        self,
        initial: DelayLike,
        base: int = 2,
        max_delay: Optional[DelayLike] = None,
    ):
        """Initialize exponential backoff.

        Args:
            initial: Starting duration, multiplied by ``base`` before first use
            base: Integer multiplier applied on every draw (default 2)
            max_delay: Ceiling for yielded delays, or None for no cap
        """
        self.current = as_delay(initial)
        self.base = 2
        self.max_delay: Optional[timedelta] = None
        self.with_base(base)
        if max_delay is not None:
            self.with_max(max_delay)

    def with_base(self, base: int) -> "ExponentialBackoff":
        """Set the multiplier; 2 is the default."""
        if isinstance(base, bool) or not isinstance(base, int) or base < 1:
            raise ConfigurationError(f"Exponential base must be a positive integer: {base!r}")
        self.base = base
        return self

    def with_max(self, max_delay: DelayLike) -> "ExponentialBackoff":
        """Set the maximum delay the series will yield."""
        self.max_delay = as_delay(max_delay)
        return self

    def __next__(self) -> timedelta:
        try:
            nxt = self.current * self.base
        except OverflowError:
            nxt = timedelta.max
        self.current = nxt

        if self.max_delay is not None and self.max_delay <= nxt:
            return self.max_delay
        return nxt

    def __repr__(self) -> str:
        return (
            f"ExponentialBackoff(current={self.current!r}, base={self.base}, "
            f"max_delay={self.max_delay!r})"
        )
