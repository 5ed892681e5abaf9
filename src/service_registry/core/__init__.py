"""Core registry, configuration, and logging utilities."""

from .config import AppSettings, LoggingSettings, RegistrySettings, load_app_settings
from .errors import (
    AlreadyInstantiatedError,
    InstantiationError,
    NotFoundError,
    RegistryError,
)
from .interfaces import ServiceFactory, ServiceResolver
from .logging import configure_logging
from .models import Binding, BindingKind, Token, describe_identifier
from .registry import Registry, create_registry

__all__ = [
    "AlreadyInstantiatedError",
    "AppSettings",
    "Binding",
    "BindingKind",
    "InstantiationError",
    "LoggingSettings",
    "NotFoundError",
    "Registry",
    "RegistryError",
    "RegistrySettings",
    "ServiceFactory",
    "ServiceResolver",
    "Token",
    "configure_logging",
    "create_registry",
    "describe_identifier",
    "load_app_settings",
]
