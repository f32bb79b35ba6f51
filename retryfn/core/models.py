"""Declarative backoff policy models."""

from datetime import timedelta
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from retryfn.strategy import (
    BackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    Immediate,
)

from .types import StrategyKind


class BackoffPolicy(BaseModel):
    """Backoff strategy definition, as loaded from a policy file."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Policy identifier")
    kind: StrategyKind = Field(..., description="Strategy kind")
    delay_ms: int = Field(
        default=0,
        ge=0,
        description="Fixed delay (constant) or initial delay (exponential) in ms",
    )
    base: int = Field(default=2, ge=1, description="Exponential multiplier")
    max_delay_ms: Optional[int] = Field(
        default=None, ge=0, description="Ceiling for exponential delays in ms"
    )
    max_retries: Optional[int] = Field(
        default=None, ge=0, description="Truncate the schedule after this many delays"
    )

    @model_validator(mode="after")
    def _check_kind_fields(self) -> "BackoffPolicy":
        if self.kind == StrategyKind.IMMEDIATE and self.delay_ms != 0:
            raise ValueError("delay_ms does not apply to immediate backoff")
        if self.kind != StrategyKind.EXPONENTIAL:
            if self.max_delay_ms is not None:
                raise ValueError("max_delay_ms only applies to exponential backoff")
            if self.base != 2:
                raise ValueError("base only applies to exponential backoff")
        return self

    def build_strategy(self) -> BackoffStrategy:
        """Create a fresh, unbounded strategy for this policy."""
        if self.kind == StrategyKind.IMMEDIATE:
            return Immediate()
        if self.kind == StrategyKind.CONSTANT:
            return ConstantBackoff.from_millis(self.delay_ms)

        strategy = ExponentialBackoff.from_millis(self.delay_ms).with_base(self.base)
        if self.max_delay_ms is not None:
            strategy.with_max(timedelta(milliseconds=self.max_delay_ms))
        return strategy

    def delays(self) -> Iterator[timedelta]:
        """Create a fresh delay schedule, truncated to ``max_retries`` if set."""
        strategy = self.build_strategy()
        if self.max_retries is None:
            return strategy
        return strategy.take(self.max_retries)
