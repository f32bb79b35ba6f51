"""Blocking retry loop."""

import time
from typing import Any, Callable, Iterable, TypeVar

from retryfn.core.types import RetryOp, RetryResult
from retryfn.strategy import Immediate
from retryfn.strategy.base import DelayLike

from .loop import RetryLoop, sleep_seconds

T = TypeVar("T")


def retry(
    strategy: Iterable[DelayLike],
    operation: Callable[[RetryOp], RetryResult[T, Any]],
) -> T:
    """Retry a function on the delays of a backoff strategy.

    The calling thread sleeps for each delay the operation asks to retry on.

    Args:
        strategy: Backoff strategy or any iterable of delays
        operation: Called with a RetryOp per attempt; returns Ok, Err or Retry

    Returns:
        Value carried by the operation's ``Ok``

    Raises:
        FailedAttempt: If the operation returned ``Err``
        IteratorEnded: If the strategy ran out while the operation kept retrying

    Example:
        ```python
        def poll(op: RetryOp) -> RetryResult[int, str]:
            if op.retries >= 3:
                return Ok(5)
            return Retry()

        assert retry(ConstantBackoff.from_millis(100), poll) == 5
        ```
    """
    loop: RetryLoop[T] = RetryLoop(strategy)
    for delay, op in loop.attempts():
        pause = loop.settle(operation(op), delay)
        if pause is None:
            return loop.value  # type: ignore[return-value]
        time.sleep(sleep_seconds(pause))
        loop.advance(pause)
    raise loop.exhausted()


def retry_immediate(operation: Callable[[RetryOp], RetryResult[T, Any]]) -> T:
    """Retry with no wait in between attempts.

    Equivalent to ``retry(Immediate(), operation)``.
    """
    return retry(Immediate(), operation)
