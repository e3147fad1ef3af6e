from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional

from faker import Faker
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# Success is a normal return; failure is a raised exception.
SeederAction = Callable[[], Any]


@dataclass(frozen=True)
class SeederItem:
    """A named seeder: ``name`` is unique within a registry."""

    name: str
    action: SeederAction


class BaseSeeder(ABC):
    """
    Abstract base class for database seeders.

    Instances are callable with no arguments, so they can be registered
    directly as registry actions. Each call runs :meth:`run` and commits the
    session; on failure the session is rolled back and the error re-raised.

    Attributes:
        name (str): Default registry name for the seeder.
    """

    name: ClassVar[str] = ""

    def __init__(self, session: Session, fake: Optional[Faker] = None):
        self.session = session
        self.fake = fake or Faker()

    @abstractmethod
    def run(self):
        """Execute the seeding logic."""
        pass

    def __call__(self) -> None:
        try:
            self.run()
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def log(self, message: str):
        """Helper to log seeding progress."""
        logger.info(f"[{self.__class__.__name__}] {message}")

    def as_item(self) -> SeederItem:
        return SeederItem(name=self.name or self.__class__.__name__, action=self)
