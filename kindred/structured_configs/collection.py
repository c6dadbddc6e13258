"""Collection configuration dataclasses."""

# pylint: disable=all
# Temporarily disable all pylint checkers during AST traversal to prevent crash.
# The imports checker crashes when resolving kindred package imports due to a bug
# in pylint/astroid: https://github.com/pylint-dev/pylint/issues/10185
# pylint: enable=all
# Re-enable all pylint checkers for the checking phase. This allows other checks
# (code quality, style, undefined names, etc.) to run normally while bypassing
# the problematic imports checker that would crash during AST traversal.

from dataclasses import dataclass
from typing import Any

from omegaconf import DictConfig

from kindred.exceptions import ConfigValidationError
from kindred.structured_configs.instance import InstanceConfig, validate_instance_config
from kindred.structured_configs.validation import validate_sequence

SET_TARGET = "kindred.data_structures.set.Set"
STACK_TARGET = "kindred.data_structures.stack.Stack"
QUEUE_TARGET = "kindred.data_structures.queue.Queue"
COLLECTION_TARGETS: frozenset[str] = frozenset({SET_TARGET, STACK_TARGET, QUEUE_TARGET})


@dataclass
class SetInstanceConfig(InstanceConfig):
    """Configuration for Set."""

    elements: list[Any] | None = None

    def __init__(self, elements: list[Any] | None = None, _target_: str = SET_TARGET) -> None:
        super().__init__(_target_=_target_)
        self.elements = elements


@dataclass
class StackInstanceConfig(InstanceConfig):
    """Configuration for Stack."""

    elements: list[Any] | None = None

    def __init__(self, elements: list[Any] | None = None, _target_: str = STACK_TARGET) -> None:
        super().__init__(_target_=_target_)
        self.elements = elements


@dataclass
class QueueInstanceConfig(InstanceConfig):
    """Configuration for Queue."""

    elements: list[Any] | None = None

    def __init__(self, elements: list[Any] | None = None, _target_: str = QUEUE_TARGET) -> None:
        super().__init__(_target_=_target_)
        self.elements = elements


def is_collection_target(target: str) -> bool:
    """Check if the target is a collection target."""
    return target in COLLECTION_TARGETS


def is_collection_config(cfg: DictConfig) -> bool:
    """Check if the configuration is a collection instance config."""
    target = cfg.get("_target_", None)
    if isinstance(target, str):
        return is_collection_target(target)
    return False


def validate_collection_instance_config(cfg: DictConfig, expected_target: str | None = None) -> None:
    """Validate a SetInstanceConfig, StackInstanceConfig or QueueInstanceConfig.

    Only the shape of the config is checked here. Whether the initial elements
    share one supported kind is checked by the collection when it is built.

    Args:
        cfg: A DictConfig with _target_ and elements fields (from Hydra).
        expected_target: The expected collection target, if any.
    """
    validate_instance_config(cfg, expected_target=expected_target)
    target = cfg.get("_target_")
    if not is_collection_target(target):
        raise ConfigValidationError(
            f"InstanceConfig._target_ must be one of {sorted(COLLECTION_TARGETS)}, got {target}"
        )
    validate_sequence(cfg.get("elements"), "CollectionInstanceConfig.elements", is_none_allowed=True)
