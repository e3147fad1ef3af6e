from __future__ import annotations

from typing import Optional

from faker import Faker
from sqlalchemy.orm import Session

from seedkit.config import get_settings
from seedkit.seeder import BaseSeeder, SeederRegistry

from .models import Department, User

DEPARTMENTS = (
    ("Engineering", "Product design and development"),
    ("Operations", "Plant and supply chain operations"),
    ("Finance", "Accounting and controlling"),
)

_DEPARTMENT_DESCRIPTIONS = dict(DEPARTMENTS)

# (username, department)
USERS = (
    ("admin", "Engineering"),
    ("system-bot", "Operations"),
    ("analyst", "Finance"),
)


class _DemoSeeder(BaseSeeder):
    def _ensure_department(self, name: str, description: Optional[str] = None) -> Department:
        existing = self.session.query(Department).filter_by(name=name).first()
        if existing:
            return existing

        department = Department(
            name=name,
            description=description or _DEPARTMENT_DESCRIPTIONS.get(name) or self.fake.sentence(),
        )
        self.session.add(department)
        self.session.flush()
        self.log(f"Created department '{name}'.")
        return department


class DepartmentSeeder(_DemoSeeder):
    """Seeds the standard departments."""

    name = "departments"

    def run(self):
        for dept_name, description in DEPARTMENTS:
            if self.session.query(Department).filter_by(name=dept_name).first():
                self.log(f"Department '{dept_name}' already exists. Skipping.")
                continue
            self._ensure_department(dept_name, description)


class UserSeeder(_DemoSeeder):
    """Seeds initial users; missing departments are created on the way."""

    name = "users"

    def run(self):
        for username, dept_name in USERS:
            self._ensure_user(username, dept_name)

    def _ensure_user(self, username: str, dept_name: str) -> User:
        existing = self.session.query(User).filter_by(username=username).first()
        if existing:
            self.log(f"User '{username}' already exists. Skipping.")
            return existing

        department = self._ensure_department(dept_name)
        user = User(
            username=username,
            email=f"{username}@example.com",
            full_name=self.fake.name(),
            is_active=True,
            department_id=department.id,
        )
        self.session.add(user)
        self.log(f"Created user '{username}'.")
        return user


def make_faker(locale: Optional[str] = None, seed: Optional[int] = None) -> Faker:
    settings = get_settings()
    fake = Faker(locale or settings.FAKER_LOCALE)
    seed = seed if seed is not None else settings.FAKER_SEED
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def build_registry(
    session: Optional[Session] = None,
    fake: Optional[Faker] = None,
) -> SeederRegistry:
    """Registry with the demo seeders, ``users`` first, then ``departments``."""
    if session is None:
        from .database import lazy_session

        session = lazy_session()
    fake = fake or make_faker()

    registry = SeederRegistry()
    registry.register_many(
        [
            UserSeeder(session, fake).as_item(),
            DepartmentSeeder(session, fake).as_item(),
        ]
    )
    return registry
