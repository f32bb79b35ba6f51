"""Immediate backoff: no wait between attempts."""

from datetime import timedelta

from .base import BackoffStrategy

ZERO = timedelta(0)


class Immediate(BackoffStrategy):
    """Yield a zero-length delay forever."""

    def __next__(self) -> timedelta:
        return ZERO

    def __repr__(self) -> str:
        return "Immediate()"
