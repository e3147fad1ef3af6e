from seedkit.exceptions.handlers import (
    ConfigurationError,
    DuplicateNameError,
    ExecutionFailedError,
    InvalidActionError,
    InvalidNameError,
    InvalidSeederSpecError,
    NotFoundError,
    RegistrationError,
    RegistryLoadError,
    SeederError,
)

__all__ = [
    "SeederError",
    "InvalidNameError",
    "InvalidActionError",
    "InvalidSeederSpecError",
    "DuplicateNameError",
    "NotFoundError",
    "RegistrationError",
    "ExecutionFailedError",
    "RegistryLoadError",
    "ConfigurationError",
]
