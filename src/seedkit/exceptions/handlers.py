from __future__ import annotations

from typing import Any, Dict, Optional


class SeederError(Exception):
    """
    Base exception for registry, dispatch and configuration failures.

    Every error carries:
    - attributes: message/code/details
    - method: to_dict()
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "SEEDER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details: Dict[str, Any] = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class InvalidNameError(SeederError):
    def __init__(self, name: str = "") -> None:
        super().__init__(
            message="seeder name cannot be empty",
            code="INVALID_NAME",
            details={"name": name},
        )
        self.name = name


class InvalidActionError(SeederError):
    def __init__(self, name: str, action: Any) -> None:
        super().__init__(
            message=f"seeder '{name}' action must be callable, got {type(action).__name__}",
            code="INVALID_ACTION",
            details={"name": name, "action_type": type(action).__name__},
        )
        self.name = name


class InvalidSeederSpecError(SeederError):
    def __init__(self, spec: Any) -> None:
        super().__init__(
            message=f"expected SeederItem or (name, action) pair, got {type(spec).__name__}",
            code="INVALID_SPEC",
            details={"spec_type": type(spec).__name__},
        )


class DuplicateNameError(SeederError):
    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"seeder with name '{name}' already exists",
            code="DUPLICATE_NAME",
            details={"name": name},
        )
        self.name = name


class NotFoundError(SeederError):
    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"seeder with name '{name}' not found",
            code="NOT_FOUND",
            details={"name": name},
        )
        self.name = name


class RegistrationError(SeederError):
    """A batch registration stopped at ``name``; earlier items stay registered."""

    def __init__(self, name: str, cause: SeederError) -> None:
        super().__init__(
            message=f"failed to register seeder '{name}': {cause}",
            code="REGISTRATION_FAILED",
            details={"name": name, "reason": cause.code},
        )
        self.name = name
        self.cause = cause


class ExecutionFailedError(SeederError):
    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(
            message=f"seeder '{name}' failed: {cause}",
            code="EXECUTION_FAILED",
            details={"name": name, "error_type": type(cause).__name__},
        )
        self.name = name
        self.cause = cause


class RegistryLoadError(SeederError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            message=f"cannot load seeder registry from '{path}': {reason}",
            code="REGISTRY_LOAD_FAILED",
            details={"path": path},
        )
        self.path = path


class ConfigurationError(SeederError):
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs: Any):
        details: Dict[str, Any] = {"config_key": config_key} if config_key else {}
        details.update(kwargs)
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details=details,
        )
