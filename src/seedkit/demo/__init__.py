"""Example seeders: users and departments on SQLAlchemy, filled with Faker."""

from .seeders import DepartmentSeeder, UserSeeder, build_registry

__all__ = ["DepartmentSeeder", "UserSeeder", "build_registry"]
