"""Backoff strategies that drive retry timing."""

from .base import BackoffStrategy, DelayLike, as_delay, saturating_add
from .constant import ConstantBackoff
from .exponential import ExponentialBackoff
from .immediate import Immediate

__all__ = [
    "BackoffStrategy",
    "DelayLike",
    "as_delay",
    "saturating_add",
    "Immediate",
    "ConstantBackoff",
    "ExponentialBackoff",
]
