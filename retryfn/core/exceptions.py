"""Custom exceptions for retryfn."""

from datetime import timedelta
from typing import Any


class RetryFnError(Exception):
    """Base exception for all retryfn errors."""

    pass


class ConfigurationError(RetryFnError):
    """Raised when a strategy, policy or backend is configured incorrectly."""

    pass


class ValidationError(RetryFnError):
    """Raised when a policy definition fails validation."""

    pass


class RetryError(RetryFnError):
    """Raised when a retry loop ends without success.

    Attributes:
        tries: Number of attempts that asked to be retried
        total_delay: Cumulative time slept between attempts
    """

    def __init__(self, message: str, tries: int, total_delay: timedelta):
        self.tries = tries
        self.total_delay = total_delay
        super().__init__(message)


class FailedAttempt(RetryError):
    """The operation reported a terminal failure.

    ``err`` is the value the operation returned inside ``Err``, unmodified.
    """

    def __init__(self, tries: int, total_delay: timedelta, err: Any):
        self.err = err
        super().__init__(
            f"failed with {err}, tries {tries} total delay {total_delay}",
            tries,
            total_delay,
        )


class IteratorEnded(RetryError):
    """The backoff strategy ran out of delays while the operation kept retrying."""

    def __init__(self, tries: int, total_delay: timedelta):
        super().__init__(
            f"iterator ended, retries {tries}, total delay {total_delay}",
            tries,
            total_delay,
        )
