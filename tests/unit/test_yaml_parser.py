"""Unit tests for YAML policy parser."""

import pytest
from datetime import timedelta
from pathlib import Path

from retryfn.core.exceptions import ConfigurationError, ValidationError
from retryfn.core.models import BackoffPolicy
from retryfn.core.types import StrategyKind
from retryfn.parsers import parse_policy, parse_policy_from_dict, validate_policy
from retryfn.strategy import ConstantBackoff, ExponentialBackoff, Immediate

FIXTURES = Path(__file__).parent.parent / "fixtures" / "policies"


class TestYAMLParser:
    """Test YAML policy parser."""

    def test_parse_exponential_policy(self):
        """Test parsing capped exponential policy."""
        policy = parse_policy(FIXTURES / "exponential_capped.yaml")

        assert isinstance(policy, BackoffPolicy)
        assert policy.name == "http_client"
        assert policy.kind == StrategyKind.EXPONENTIAL
        assert policy.delay_ms == 100
        assert policy.base == 10
        assert policy.max_delay_ms == 1_000_000
        assert policy.max_retries is None

    def test_parse_exponential_schedule(self):
        """Parsed exponential policy yields the capped series."""
        strategy = parse_policy(FIXTURES / "exponential_capped.yaml").build_strategy()

        assert isinstance(strategy, ExponentialBackoff)
        assert [d // timedelta(milliseconds=1) for d in strategy.take(6)] == [
            1000,
            10000,
            100000,
            1000000,
            1000000,
            1000000,
        ]

    def test_parse_constant_policy(self):
        """Test parsing limited constant policy."""
        policy = parse_policy(str(FIXTURES / "constant_limited.yaml"))

        assert policy.kind == StrategyKind.CONSTANT
        assert isinstance(policy.build_strategy(), ConstantBackoff)
        assert list(policy.delays()) == [timedelta(milliseconds=250)] * 3

    def test_parse_immediate_policy(self):
        """Test parsing immediate policy."""
        policy = parse_policy(FIXTURES / "immediate.yaml")

        assert policy.name is None
        assert isinstance(policy.build_strategy(), Immediate)
        assert list(policy.delays()) == [timedelta(0)] * 5

    def test_file_not_found(self):
        """Test missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_policy(FIXTURES / "missing.yaml")

        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self):
        """Test malformed YAML raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_policy(FIXTURES / "invalid_yaml.yaml")

        assert "Invalid YAML" in str(exc_info.value)

    def test_invalid_kind(self):
        """Test unknown strategy kind raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            parse_policy(FIXTURES / "invalid_kind.yaml")

        assert "invalid_kind.yaml" in str(exc_info.value)

    def test_validate_policy(self):
        """Test non-raising validation."""
        assert validate_policy(FIXTURES / "constant_limited.yaml") is True
        assert validate_policy(FIXTURES / "invalid_kind.yaml") is False
        assert validate_policy(FIXTURES / "invalid_yaml.yaml") is False
        assert validate_policy(FIXTURES / "missing.yaml") is False

    def test_empty_file(self, tmp_path):
        """Test empty policy file is invalid."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ValidationError):
            parse_policy(path)


class TestParsePolicyFromDict:
    """Test dictionary parsing."""

    def test_valid(self):
        policy = parse_policy_from_dict({"kind": "constant", "delay_ms": 250})

        assert policy.delay_ms == 250

    def test_invalid(self):
        with pytest.raises(ValidationError):
            parse_policy_from_dict({"kind": "constant", "delay_ms": -5})
