"""Non-blocking retry loop.

The loop suspends the calling task between attempts instead of blocking a
thread. Which primitive performs the suspension is pluggable: pass any
``async def sleep(seconds)`` as ``sleep``, or pick a bundled one by name with
``get_sleeper``. When omitted, the configured default backend is used.

Example:
    ```python
    async def fetch(op: RetryOp) -> RetryResult[bytes, str]:
        try:
            return Ok(await client.get(url))
        except ConnectionError:
            return Retry() if op.retries < 5 else Err("unreachable")

    body = await retry(ExponentialBackoff.from_millis(100), fetch)
    ```
"""

import asyncio
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, TypeVar, Union

import anyio

from retryfn.core.config import get_config
from retryfn.core.exceptions import ConfigurationError
from retryfn.core.types import AsyncBackend, RetryOp, RetryResult
from retryfn.strategy.base import DelayLike

from .loop import RetryLoop, sleep_seconds

T = TypeVar("T")

Sleeper = Callable[[float], Awaitable[Any]]

SLEEPERS: Dict[AsyncBackend, Sleeper] = {
    AsyncBackend.ASYNCIO: asyncio.sleep,
    AsyncBackend.ANYIO: anyio.sleep,
}


def get_sleeper(backend: Union[AsyncBackend, str, None] = None) -> Sleeper:
    """Resolve a suspend primitive by backend name.

    Args:
        backend: Backend name, or None for the configured default

    Returns:
        Coroutine function taking a number of seconds

    Raises:
        ConfigurationError: If the backend is unknown
    """
    if backend is None:
        backend = get_config().async_backend
    try:
        return SLEEPERS[AsyncBackend(backend)]
    except ValueError:
        raise ConfigurationError(
            f"Unknown async backend {backend!r}, expected one of "
            f"{', '.join(b.value for b in AsyncBackend)}"
        )


async def retry(
    strategy: Iterable[DelayLike],
    operation: Callable[[RetryOp], Awaitable[RetryResult[T, Any]]],
    sleep: Optional[Sleeper] = None,
) -> T:
    """Retry an async function on the delays of a backoff strategy.

    Each attempt is awaited to completion before the next one starts.

    Args:
        strategy: Backoff strategy or any iterable of delays
        operation: Async function called with a RetryOp per attempt
        sleep: Suspend primitive, defaults to the configured backend

    Returns:
        Value carried by the operation's ``Ok``

    Raises:
        FailedAttempt: If the operation returned ``Err``
        IteratorEnded: If the strategy ran out while the operation kept retrying
    """
    if sleep is None:
        sleep = get_sleeper()

    loop: RetryLoop[T] = RetryLoop(strategy)
    for delay, op in loop.attempts():
        pause = loop.settle(await operation(op), delay)
        if pause is None:
            return loop.value  # type: ignore[return-value]
        await sleep(sleep_seconds(pause))
        loop.advance(pause)
    raise loop.exhausted()


async def retry_fn(
    strategy: Iterable[DelayLike],
    fn: Callable[..., Awaitable[RetryResult[T, Any]]],
    *args: Any,
    sleep: Optional[Sleeper] = None,
    **kwargs: Any,
) -> T:
    """Retry an async function that takes no retry context.

    ``fn`` is awaited again with the same arguments on every attempt.

    Args:
        strategy: Backoff strategy or any iterable of delays
        fn: Async function returning Ok, Err or Retry
        *args: Positional arguments for function
        sleep: Suspend primitive, defaults to the configured backend
        **kwargs: Keyword arguments for function

    Returns:
        Value carried by the function's ``Ok``
    """

    async def operation(op: RetryOp) -> RetryResult[T, Any]:
        return await fn(*args, **kwargs)

    return await retry(strategy, operation, sleep=sleep)


retry_asyncio = partial(retry, sleep=asyncio.sleep)
retry_anyio = partial(retry, sleep=anyio.sleep)
