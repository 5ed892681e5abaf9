"""Minimal service registry with lazy, write-once bindings."""

from .core import (
    AlreadyInstantiatedError,
    InstantiationError,
    NotFoundError,
    Registry,
    RegistryError,
    Token,
    create_registry,
)

__all__ = [
    "AlreadyInstantiatedError",
    "InstantiationError",
    "NotFoundError",
    "Registry",
    "RegistryError",
    "Token",
    "create_registry",
]
