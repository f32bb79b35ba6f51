"""YAML backoff policy parser."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from retryfn.core.exceptions import ConfigurationError, ValidationError
from retryfn.core.models import BackoffPolicy


def parse_policy(policy_path: Union[str, Path]) -> BackoffPolicy:
    """Parse backoff policy from YAML file.

    Args:
        policy_path: Path to policy YAML file

    Returns:
        Validated BackoffPolicy

    Raises:
        ConfigurationError: If file not found or invalid YAML
        ValidationError: If policy definition is invalid

    Example:
        >>> policy = parse_policy("policies/http_client.yaml")
        >>> strategy = policy.build_strategy()
    """
    path = Path(policy_path)

    # Check file exists
    if not path.exists():
        raise ConfigurationError(f"Policy file not found: {path}")

    # Read and parse YAML
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Failed to read {path}: {e}")

    try:
        return BackoffPolicy.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid policy definition in {path}:\n{e}")


def validate_policy(policy_path: Union[str, Path]) -> bool:
    """Validate policy definition without raising exceptions.

    Args:
        policy_path: Path to policy YAML file

    Returns:
        True if valid, False otherwise
    """
    try:
        parse_policy(policy_path)
        return True
    except (ConfigurationError, ValidationError):
        return False


def parse_policy_from_dict(data: Dict[str, Any]) -> BackoffPolicy:
    """Parse backoff policy from dictionary.

    Args:
        data: Policy configuration dictionary

    Returns:
        Validated BackoffPolicy

    Raises:
        ValidationError: If policy definition is invalid

    Example:
        >>> policy = parse_policy_from_dict({"kind": "constant", "delay_ms": 250})
        >>> policy.delay_ms
        250
    """
    try:
        return BackoffPolicy.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid policy definition:\n{e}")
