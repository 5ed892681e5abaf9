"""Service registry with lazy singleton semantics."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from threading import RLock
from typing import Any, TypeVar

from .config import RegistrySettings
from .errors import AlreadyInstantiatedError, InstantiationError, NotFoundError
from .interfaces import ServiceFactory
from .models import Binding, describe_identifier

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class Registry:
    """Map identifiers to values or to factories that are invoked at most once.

    A factory receives the registry itself so it can resolve its own
    dependencies. Once a binding has produced a value it is pinned: further
    registrations for the same identifier are rejected until ``reset``.
    """

    def __init__(self, *, name: str = "default", thread_safe: bool = False) -> None:
        """Initialise registry storage."""
        self.name = name
        self._bindings: dict[Any, Binding] = {}
        self._lock: AbstractContextManager[Any] = (
            RLock() if thread_safe else nullcontext()
        )

    def register(self, identifier: Any, payload: Any) -> None:
        """Bind a factory if ``payload`` is callable, otherwise bind a value."""
        if callable(payload):
            self._bind(identifier, Binding.for_factory(payload))
        else:
            self._bind(identifier, Binding.for_value(payload))

    def register_value(self, identifier: Any, value: Any) -> None:
        """Bind ``identifier`` to ``value`` as-is, even when it is callable."""
        self._bind(identifier, Binding.for_value(value))

    def register_factory(self, identifier: Any, factory: ServiceFactory[T]) -> None:
        """Bind ``identifier`` to a factory invoked on first resolve."""
        if not callable(factory):
            msg = f"Factory for '{describe_identifier(identifier)}' must be callable"
            raise TypeError(msg)
        self._bind(identifier, Binding.for_factory(factory))

    def resolve(self, identifier: Any) -> Any:
        """Resolve a dependency by identifier, invoking its factory once."""
        _check_identifier(identifier)
        with self._lock:
            binding = self._bindings.get(identifier)
            if binding is None:
                raise NotFoundError(identifier)
            if binding.resolved:
                LOGGER.debug("Resolved cached '%s'", describe_identifier(identifier))
                return binding.payload
            return self._instantiate(identifier, binding)

    def try_resolve(self, identifier: Any) -> Any | None:
        """Resolve a dependency if registered; return None otherwise."""
        try:
            return self.resolve(identifier)
        except NotFoundError:
            return None

    def contains(self, identifier: Any) -> bool:
        """Return ``True`` if ``identifier`` has a binding, resolved or not."""
        with self._lock:
            return identifier in self._bindings

    def reset(self) -> None:
        """Drop every binding, including instantiated ones."""
        with self._lock:
            count = len(self._bindings)
            self._bindings.clear()
        LOGGER.info("Registry '%s' reset, dropped %d binding(s)", self.name, count)

    def __contains__(self, identifier: object) -> bool:
        return self.contains(identifier)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __repr__(self) -> str:
        return f"Registry(name={self.name!r}, bindings={len(self._bindings)})"

    def _bind(self, identifier: Any, binding: Binding) -> None:
        _check_identifier(identifier)
        with self._lock:
            existing = self._bindings.get(identifier)
            if existing is not None and existing.resolved:
                raise AlreadyInstantiatedError(identifier)
            self._bindings[identifier] = binding
        LOGGER.debug(
            "Registered %s for '%s' in registry '%s'",
            binding.kind.value,
            describe_identifier(identifier),
            self.name,
        )

    def _instantiate(self, identifier: Any, binding: Binding) -> Any:
        factory = binding.payload
        label = describe_identifier(identifier)
        LOGGER.debug("Instantiating '%s' in registry '%s'", label, self.name)
        try:
            instance = factory(self)
        except Exception as exc:
            # Dependency failures were already logged by the inner resolve.
            if not isinstance(exc, InstantiationError):
                LOGGER.warning("Factory for '%s' failed: %s", label, exc)
            raise InstantiationError(identifier, exc) from exc

        # The factory may have re-entered the registry; only cache into the
        # binding that is still registered for this identifier.
        if self._bindings.get(identifier) is binding:
            binding.payload = instance
            binding.resolved = True
        return instance


def _check_identifier(identifier: Any) -> None:
    if identifier is None:
        raise TypeError("Service identifier must not be None")


def create_registry(settings: RegistrySettings | None = None) -> Registry:
    """Create a new, empty registry configured from ``settings``."""
    registry_settings = settings or RegistrySettings()
    return Registry(
        name=registry_settings.name,
        thread_safe=registry_settings.thread_safe,
    )


__all__ = ["Registry", "create_registry"]
