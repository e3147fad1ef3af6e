"""Helpers for testing code that registers or runs seeders."""

from __future__ import annotations

from typing import List, Optional

from .base import SeederAction, SeederItem


def recording_action(
    name: str,
    log: Optional[List[str]] = None,
    error: Optional[BaseException] = None,
) -> SeederAction:
    """Build an action that appends ``name`` to ``log`` and then raises ``error`` if given."""

    def action() -> None:
        if log is not None:
            log.append(name)
        if error is not None:
            raise error

    return action


class SeederItemsBuilder:
    """Fluent builder for ``register_many`` input."""

    def __init__(self) -> None:
        self._items: List[SeederItem] = []

    def add(self, name: str, action: SeederAction) -> "SeederItemsBuilder":
        self._items.append(SeederItem(name=name, action=action))
        return self

    def add_recording(
        self,
        name: str,
        log: Optional[List[str]] = None,
        error: Optional[BaseException] = None,
    ) -> "SeederItemsBuilder":
        return self.add(name, recording_action(name, log, error))

    def build(self) -> List[SeederItem]:
        return list(self._items)
