"""Retry loops: blocking and non-blocking.

- ``retry`` / ``retry_immediate``: block the calling thread between attempts
- ``retry_async`` / ``retry_fn_async``: suspend the calling task between
  attempts using a pluggable sleep (asyncio or anyio bundled)
"""

from .aio import SLEEPERS, get_sleeper, retry_anyio, retry_asyncio
from .aio import retry as retry_async
from .aio import retry_fn as retry_fn_async
from .loop import RetryLoop
from .sync import retry, retry_immediate

__all__ = [
    "RetryLoop",
    "retry",
    "retry_immediate",
    "retry_async",
    "retry_fn_async",
    "retry_asyncio",
    "retry_anyio",
    "get_sleeper",
    "SLEEPERS",
]
