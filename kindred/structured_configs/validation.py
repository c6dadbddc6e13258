"""Validation helper functions for structured configs."""

# pylint: disable=all
# Temporarily disable all pylint checkers during AST traversal to prevent crash.
# The imports checker crashes when resolving kindred package imports due to a bug
# in pylint/astroid: https://github.com/pylint-dev/pylint/issues/10185
# pylint: enable=all
# Re-enable all pylint checkers for the checking phase. This allows other checks
# (code quality, style, undefined names, etc.) to run normally while bypassing
# the problematic imports checker that would crash during AST traversal.

from collections.abc import Sequence
from typing import Any

from kindred.exceptions import ConfigValidationError


def validate_nonempty_str(value: Any, field_name: str, is_none_allowed: bool = False) -> None:
    """Validate that a value is a non-empty string."""
    if is_none_allowed and value is None:
        return
    if not isinstance(value, str):
        allowed_types = "a string or None" if is_none_allowed else "a string"
        raise ConfigValidationError(f"{field_name} must be {allowed_types}, got {type(value)}")
    if not value.strip():
        raise ConfigValidationError(f"{field_name} must be a non-empty string")


def validate_sequence(
    value: Any,
    field_name: str,
    element_type: type | None = None,
    is_none_allowed: bool = False,
) -> None:
    """Validate that a value is a sequence of elements of a given type."""
    if is_none_allowed and value is None:
        return
    if isinstance(value, str) or not isinstance(value, Sequence):
        allowed_types = "a sequence or None" if is_none_allowed else "a sequence"
        raise ConfigValidationError(f"{field_name} must be {allowed_types}, got {type(value)}")
    if element_type is None:
        return
    for item in value:
        if not isinstance(item, element_type):
            raise ConfigValidationError(f"{field_name} items must be {element_type.__name__}s, got {type(item)}")
