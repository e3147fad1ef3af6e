from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from seedkit.exceptions import (
    DuplicateNameError,
    ExecutionFailedError,
    InvalidActionError,
    InvalidNameError,
    InvalidSeederSpecError,
    NotFoundError,
    RegistrationError,
    SeederError,
)

from .base import SeederAction, SeederItem


SeederSpec = Union[SeederItem, Tuple[str, SeederAction]]


class SeederRegistry:
    """
    Ordered registry of named seeders.

    Registration order is the only ordering: it drives :meth:`list_names`,
    :meth:`run_all` and usage listings. Seeders are never removed or replaced.

    Batch operations stop at the first error and do not undo earlier work:
    seeders registered by :meth:`register_many` before a failure stay
    registered, and side effects of seeders that already ran are kept.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._seeders: List[SeederItem] = []
        self._index: Dict[str, SeederAction] = {}

    def register(self, name: str, action: SeederAction) -> None:
        """Register ``action`` under ``name``.

        Raises:
            InvalidNameError: ``name`` is empty.
            DuplicateNameError: ``name`` is already registered.
            InvalidActionError: ``action`` is not callable.
        """
        if not name:
            raise InvalidNameError(name)
        if name in self._index:
            raise DuplicateNameError(name)
        if not callable(action):
            raise InvalidActionError(name, action)

        self._seeders.append(SeederItem(name=name, action=action))
        self._index[name] = action
        self.logger.info(f"Registered seeder: {name}")

    def register_many(self, seeders: Iterable[SeederSpec]) -> None:
        """Register several seeders in order, stopping at the first failure."""
        for spec in seeders:
            if isinstance(spec, SeederItem):
                name, action = spec.name, spec.action
            elif isinstance(spec, tuple) and len(spec) == 2:
                name, action = spec
            else:
                cause = InvalidSeederSpecError(spec)
                raise RegistrationError(repr(spec), cause) from cause
            try:
                self.register(name, action)
            except SeederError as e:
                raise RegistrationError(name, e) from e

    def seeder(self, name: Optional[str] = None) -> Callable[[SeederAction], SeederAction]:
        """Decorator to register a function, by default under its own name."""

        def decorator(func: SeederAction) -> SeederAction:
            self.register(name or getattr(func, "__name__", ""), func)
            return func

        return decorator

    def list_names(self) -> List[str]:
        return [item.name for item in self._seeders]

    def is_registered(self, name: str) -> bool:
        return name in self._index

    def run_by_name(self, name: str) -> None:
        action = self._index.get(name)
        if action is None:
            raise NotFoundError(name)

        self.logger.info(f"Running seeder: {name}")
        try:
            action()
        except Exception as e:
            self.logger.error(f"Seeder '{name}' failed: {e}")
            raise ExecutionFailedError(name, e) from e
        self.logger.info(f"Seeder '{name}' completed successfully")

    def run_in_order(self, names: Iterable[str]) -> None:
        for name in names:
            self.run_by_name(name)

    def run_all(self) -> None:
        total = len(self._seeders)
        self.logger.info(f"Running all seeders... {total} seeders registered.")
        self.run_in_order(self.list_names())
        self.logger.info("All seeders completed successfully!")

    def __len__(self) -> int:
        return len(self._seeders)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[SeederItem]:
        return iter(list(self._seeders))
