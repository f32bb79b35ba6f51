"""Core infrastructure for retryfn."""

from .config import GlobalConfig, config, get_config, reload_config
from .exceptions import (
    ConfigurationError,
    FailedAttempt,
    IteratorEnded,
    RetryError,
    RetryFnError,
    ValidationError,
)
from .models import BackoffPolicy
from .types import AsyncBackend, Err, Ok, Retry, RetryOp, RetryResult, StrategyKind

__all__ = [
    # Types
    "RetryOp",
    "RetryResult",
    "Retry",
    "Ok",
    "Err",
    "StrategyKind",
    "AsyncBackend",
    # Exceptions
    "RetryFnError",
    "ConfigurationError",
    "ValidationError",
    "RetryError",
    "FailedAttempt",
    "IteratorEnded",
    # Models
    "BackoffPolicy",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
]
