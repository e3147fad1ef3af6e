from __future__ import annotations

import logging
from typing import List, Optional

from seedkit.exceptions import NotFoundError

from .registry import SeederRegistry

ALL_SELECTOR = "all"
DEFAULT_APP_NAME = "seeder"

_BANNER_RULE = "=" * 61
_LIST_RULE = "-" * 41


class SeederDispatcher:
    """Translate a single ``--type`` selector into a registry action.

    The dispatcher shares the registry with its caller and never terminates
    the process: an unrecognised selector raises :class:`NotFoundError` and
    the command-line layer decides the exit status.
    """

    def __init__(
        self,
        registry: SeederRegistry,
        app_name: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.registry = registry
        self.app_name = app_name or DEFAULT_APP_NAME
        self.logger = logger or logging.getLogger(__name__)

    def usage_lines(self) -> List[str]:
        app = self.app_name
        lines = [
            _BANNER_RULE,
            f"DATABASE SEEDER - {app.upper()}",
            _BANNER_RULE,
            "",
            "Usage:",
            f"  {app} --type={ALL_SELECTOR}     # Run all seeders",
            f"  {app} --type=<name>  # Run specific seeder",
            f"  {app}               # Show this help",
            "",
        ]

        names = self.registry.list_names()
        if not names:
            lines.append("No seeders registered yet.")
            return lines

        lines.append("Available seeders (in execution order):")
        lines.append(_LIST_RULE)
        for index, name in enumerate(names, 1):
            lines.append(f"  {index}. {name}")
            lines.append(f"     Command: {app} --type={name}")
            lines.append("")

        lines.append("Quick commands:")
        lines.append(f"  {app} --type={ALL_SELECTOR}     # Run all seeders")
        lines.append(_BANNER_RULE)
        return lines

    def print_usage(self) -> None:
        for line in self.usage_lines():
            self.logger.info(line)

    def execute(self, selector: Optional[str]) -> None:
        """Run the seeder(s) chosen by ``selector``; show usage when it is empty.

        Raises:
            NotFoundError: ``selector`` is neither ``all`` nor a registered name.
            ExecutionFailedError: a seeder raised while running.
        """
        if not selector:
            self.print_usage()
            return

        self.logger.info(f"Starting seeder with type: {selector}")

        if selector == ALL_SELECTOR:
            self.registry.run_all()
            return

        if self.registry.is_registered(selector):
            self.registry.run_by_name(selector)
            return

        self.logger.error(f"Unknown seeder type: {selector}")
        self.logger.info(f"Available seeders: {self.registry.list_names()}")
        self.print_usage()
        raise NotFoundError(selector)
