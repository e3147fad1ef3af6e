from seedkit.exceptions import (
    DuplicateNameError,
    ExecutionFailedError,
    InvalidNameError,
    NotFoundError,
    RegistrationError,
    SeederError,
)
from seedkit.seeder import BaseSeeder, SeederDispatcher, SeederItem, SeederRegistry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BaseSeeder",
    "SeederDispatcher",
    "SeederItem",
    "SeederRegistry",
    "SeederError",
    "InvalidNameError",
    "DuplicateNameError",
    "NotFoundError",
    "RegistrationError",
    "ExecutionFailedError",
]
