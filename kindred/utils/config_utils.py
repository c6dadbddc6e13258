"""Config utilities."""

import importlib
from collections.abc import Callable
from typing import Any

import hydra
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import MissingMandatoryValue

from kindred.data_structures.collection import Collection
from kindred.exceptions import ConfigValidationError
from kindred.logger import KINDRED_LOGGER
from kindred.structured_configs.collection import is_collection_target, validate_collection_instance_config

TARGET: str = "_target_"


def get_instance_keys(cfg: DictConfig, *, nested: bool = False) -> list[str]:
    """Get instance keys."""
    instance_keys: list[str] = []
    for key in cfg:
        try:
            value = cfg[key]
        except MissingMandatoryValue:
            continue
        if isinstance(value, DictConfig):
            if TARGET in value:
                instance_keys.append(str(key))
            if TARGET not in value or nested:
                instance_keys.extend([f"{key}.{target}" for target in get_instance_keys(value, nested=nested)])

    return instance_keys


def _validate(
    cfg: DictConfig,
    instance_key: str,
    validate_fn: Callable[[DictConfig], None] | None,
    component_name: str | None = None,
) -> bool:
    if validate_fn is None:
        return True
    config: DictConfig | None = OmegaConf.select(cfg, instance_key, throw_on_missing=True)
    if config is None:
        return False
    try:
        validate_fn(config)
    except ConfigValidationError as e:
        component_prefix = f"[{component_name}] " if component_name else ""
        KINDRED_LOGGER.warning("%serror validating config: %s", component_prefix, e)
        return False
    return True


def filter_instance_keys(
    cfg: DictConfig,
    instance_keys: list[str],
    filter_fn: Callable[[str], bool],
    validate_fn: Callable[[DictConfig], None] | None = None,
    component_name: str | None = None,
) -> list[str]:
    """Filter instance keys by filter function to their targets."""
    filtered_instance_keys: list[str] = []
    for instance_key in instance_keys:
        target = OmegaConf.select(cfg, f"{instance_key}.{TARGET}", throw_on_missing=False)
        if isinstance(target, str) and filter_fn(target) and _validate(cfg, instance_key, validate_fn, component_name):
            filtered_instance_keys.append(instance_key)
    return filtered_instance_keys


def _resolve_target(target_str: str) -> type:
    module_path, _, cls_name = target_str.rpartition(".")
    module = importlib.import_module(module_path)
    return getattr(module, cls_name)


def typed_instantiate[T](config: Any, expected_type: type[T] | str, **kwargs) -> T:
    """Instantiate an object from config with proper typing."""
    if isinstance(expected_type, str):
        expected_type = _resolve_target(expected_type)
    obj = hydra.utils.instantiate(config, **kwargs)
    if not isinstance(obj, expected_type):
        raise ConfigValidationError(f"Expected instance of {expected_type.__name__}, got {type(obj).__name__}")
    return obj


def instantiate_collection(cfg: DictConfig) -> Collection:
    """Validate a collection config and build the collection it describes.

    Initial elements go through the collection's kind check like any other insertion.
    """
    validate_collection_instance_config(cfg)
    return typed_instantiate(cfg, cfg.get(TARGET), _convert_="all")


def instantiate_collections(cfg: DictConfig) -> dict[str, Collection]:
    """Build every valid collection config found in a larger config, keyed by its config path.

    Invalid collection configs are logged and skipped.
    """
    instance_keys = get_instance_keys(cfg, nested=True)
    collection_keys = filter_instance_keys(
        cfg,
        instance_keys,
        is_collection_target,
        validate_fn=validate_collection_instance_config,
        component_name="collections",
    )
    collections: dict[str, Collection] = {}
    for key in collection_keys:
        collections[key] = instantiate_collection(OmegaConf.select(cfg, key))
        KINDRED_LOGGER.debug("Instantiated %s at '%s'", collections[key].name, key)
    return collections
