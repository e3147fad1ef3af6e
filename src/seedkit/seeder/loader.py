from __future__ import annotations

import importlib

from seedkit.exceptions import RegistryLoadError

from .registry import SeederRegistry


def load_registry(path: str) -> SeederRegistry:
    """
    Resolve ``module:attr`` to a registry.

    ``attr`` may name a :class:`SeederRegistry` instance or a zero-argument
    factory returning one.
    """
    module_name, sep, attr = (path or "").partition(":")
    if not sep or not module_name or not attr:
        raise RegistryLoadError(path, "expected 'module:attr'")

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise RegistryLoadError(path, f"{type(e).__name__}: {e}") from e

    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise RegistryLoadError(path, f"attribute '{attr}' not found") from e

    if not isinstance(target, SeederRegistry) and callable(target):
        try:
            target = target()
        except Exception as e:
            raise RegistryLoadError(path, f"{type(e).__name__}: {e}") from e

    if not isinstance(target, SeederRegistry):
        raise RegistryLoadError(
            path, f"resolved to {type(target).__name__}, not SeederRegistry"
        )
    return target
