"""Exceptions raised by the registry."""

from __future__ import annotations

from typing import Any

from .models import describe_identifier


class RegistryError(RuntimeError):
    """Base class for registry failures."""

    def __init__(self, identifier: Any, message: str) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.identifier, self.message))


class NotFoundError(RegistryError, KeyError):
    """Raised when resolving an identifier that has no binding."""

    def __init__(self, identifier: Any) -> None:
        super().__init__(
            identifier,
            f"Service '{describe_identifier(identifier)}' is not registered in the registry",
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.identifier,))


class AlreadyInstantiatedError(RegistryError):
    """Raised when redefining a service that has already been instantiated."""

    def __init__(self, identifier: Any) -> None:
        super().__init__(
            identifier,
            f"Cannot redefine service '{describe_identifier(identifier)}' "
            "after it has been instantiated",
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.identifier,))


class InstantiationError(RegistryError):
    """Raised when a factory fails while producing its service."""

    def __init__(self, identifier: Any, cause: BaseException) -> None:
        super().__init__(
            identifier,
            f"Failed to instantiate service '{describe_identifier(identifier)}': {cause}",
        )
        self.cause = cause

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.identifier, self.cause))


__all__ = [
    "AlreadyInstantiatedError",
    "InstantiationError",
    "NotFoundError",
    "RegistryError",
]
