"""Unit tests for structured config validation helpers."""

from __future__ import annotations

import pytest
from omegaconf import ListConfig

from kindred.exceptions import ConfigValidationError
from kindred.structured_configs.validation import (
    validate_nonempty_str,
    validate_sequence,
)


def test_validate_nonempty_str_success() -> None:
    validate_nonempty_str("ok", "field")
    validate_nonempty_str("something", "field", is_none_allowed=True)
    validate_nonempty_str(None, "field", is_none_allowed=True)


def test_validate_nonempty_str_errors() -> None:
    with pytest.raises(ConfigValidationError, match="field must be a string"):
        validate_nonempty_str(123, "field")
    with pytest.raises(ConfigValidationError, match="field must be a string or None"):
        validate_nonempty_str(123, "field", is_none_allowed=True)
    with pytest.raises(ConfigValidationError, match="field must be a non-empty string"):
        validate_nonempty_str("   ", "field")


def test_validate_sequence_success() -> None:
    validate_sequence([1, 2], "field")
    validate_sequence((1, 2), "field", element_type=int)
    validate_sequence(ListConfig(["a", "b"]), "field", element_type=str)
    validate_sequence(None, "field", is_none_allowed=True)


def test_validate_sequence_errors() -> None:
    with pytest.raises(ConfigValidationError, match="field must be a sequence, got"):
        validate_sequence({"a": 1}, "field")
    with pytest.raises(ConfigValidationError, match="field must be a sequence or None"):
        validate_sequence("abc", "field", is_none_allowed=True)
    with pytest.raises(ConfigValidationError, match="field items must be ints"):
        validate_sequence([1, "a"], "field", element_type=int)
