from .base import BaseSeeder, SeederAction, SeederItem
from .dispatcher import ALL_SELECTOR, DEFAULT_APP_NAME, SeederDispatcher
from .loader import load_registry
from .registry import SeederRegistry

__all__ = [
    "ALL_SELECTOR",
    "DEFAULT_APP_NAME",
    "BaseSeeder",
    "SeederAction",
    "SeederDispatcher",
    "SeederItem",
    "SeederRegistry",
    "load_registry",
]
