"""Constant backoff.

Sets a constant amount of time between each retry::

    |---|---|---|---|

Example:
    >>> s = ConstantBackoff.from_millis(100)
    >>> next(s), next(s)
    (datetime.timedelta(microseconds=100000), datetime.timedelta(microseconds=100000))
"""

from datetime import timedelta

from .base import BackoffStrategy, DelayLike, FixedDurationMixin, as_delay


class ConstantBackoff(FixedDurationMixin, BackoffStrategy):
    """Yield the same configured delay forever."""

    def __init__(self, duration: DelayLike):
        """Initialize constant backoff.

        Args:
            duration: Delay between attempts, timedelta or seconds
        """
        self.duration = as_delay(duration)

    def __next__(self) -> timedelta:
        return self.duration

    def __repr__(self) -> str:
        return f"ConstantBackoff({self.duration!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstantBackoff):
            return NotImplemented
        return self.duration == other.duration

    def __hash__(self) -> int:
        return hash((ConstantBackoff, self.duration))
