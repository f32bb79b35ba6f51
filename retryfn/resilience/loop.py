"""Retry control loop shared by the sync and async drivers.

A driver walks ``RetryLoop.attempts()``, runs the operation with the given
``RetryOp`` and hands the outcome to ``settle``. When ``settle`` returns a
delay, the driver sleeps for it (blocking or suspending) and reports back
with ``advance``. When the attempts run out, ``exhausted`` raises.
"""

import logging
import threading
from datetime import timedelta
from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

from retryfn.core.exceptions import FailedAttempt, IteratorEnded
from retryfn.core.types import Err, Ok, Retry, RetryOp
from retryfn.strategy.base import DelayLike, as_delay, saturating_add

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sleep_seconds(delay: timedelta) -> float:
    """Seconds to sleep for a delay, clamped to what sleep primitives accept.

    Saturated delays (``timedelta.max``) exceed the platform timeout limit.
    """
    return min(delay.total_seconds(), threading.TIMEOUT_MAX)


class RetryLoop(Generic[T]):
    """State of a single retry invocation: attempt count and total delay."""

    def __init__(self, strategy: Iterable[DelayLike]):
        self._delays = iter(strategy)
        self.count = 0
        self.total_delay = timedelta(0)
        self._value: Optional[T] = None

    @property
    def value(self) -> Optional[T]:
        """Success value, set once ``settle`` has seen ``Ok``."""
        return self._value

    def attempts(self) -> Iterator[Tuple[timedelta, RetryOp]]:
        """Yield (delay, context) for each attempt the strategy allows."""
        for delay in self._delays:
            yield as_delay(delay), RetryOp(retries=self.count, total_delay=self.total_delay)

    def settle(self, outcome: Any, delay: timedelta) -> Optional[timedelta]:
        """Branch on an attempt's outcome.

        Returns:
            The delay to sleep for on ``Retry``, or None on ``Ok``

        Raises:
            FailedAttempt: If the outcome is ``Err``
            TypeError: If the outcome is not a retry result
        """
        if isinstance(outcome, Retry):
            logger.debug(f"Attempt {self.count + 1} asked to retry, sleeping {delay}")
            return delay

        if isinstance(outcome, Ok):
            if self.count:
                logger.debug(f"Succeeded after {self.count} retries")
            self._value = outcome.value
            return None

        if isinstance(outcome, Err):
            logger.warning(
                f"Giving up after {self.count} retries "
                f"(total delay {self.total_delay}): {outcome.error}"
            )
            failure = FailedAttempt(self.count, self.total_delay, outcome.error)
            if isinstance(outcome.error, BaseException):
                raise failure from outcome.error
            raise failure

        raise TypeError(
            f"Operation must return Retry, Ok or Err, got {type(outcome).__name__}"
        )

    def advance(self, delay: timedelta) -> None:
        """Record a completed sleep."""
        self.total_delay = saturating_add(self.total_delay, delay)
        self.count += 1

    def exhausted(self) -> IteratorEnded:
        """Build the error for a strategy that ran out of delays."""
        logger.warning(
            f"Backoff strategy exhausted after {self.count} retries "
            f"(total delay {self.total_delay})"
        )
        return IteratorEnded(self.count, self.total_delay)
