"""retryfn - Retry fallible operations with pluggable backoff."""

from .core import (
    AsyncBackend,
    # Models
    BackoffPolicy,
    ConfigurationError,
    Err,
    FailedAttempt,
    # Config
    GlobalConfig,
    IteratorEnded,
    Ok,
    Retry,
    RetryError,
    # Exceptions
    RetryFnError,
    # Types
    RetryOp,
    RetryResult,
    StrategyKind,
    ValidationError,
    config,
    get_config,
    reload_config,
)
from .resilience import (
    get_sleeper,
    retry,
    retry_anyio,
    retry_async,
    retry_asyncio,
    retry_fn_async,
    retry_immediate,
)
from .strategy import (
    BackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    Immediate,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
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
    # Strategies
    "BackoffStrategy",
    "Immediate",
    "ConstantBackoff",
    "ExponentialBackoff",
    # Retry loops
    "retry",
    "retry_immediate",
    "retry_async",
    "retry_fn_async",
    "retry_asyncio",
    "retry_anyio",
    "get_sleeper",
    # Models
    "BackoffPolicy",
    # Config
    "GlobalConfig",
    "config",
    "get_config",
    "reload_config",
]
