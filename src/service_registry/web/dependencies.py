"""FastAPI wiring that resolves services from an application registry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request

from service_registry.core.models import describe_identifier
from service_registry.core.registry import Registry

LOGGER = logging.getLogger(__name__)

STATE_ATTRIBUTE = "service_registry"


def install_registry(app: FastAPI, registry: Registry) -> None:
    """Attach ``registry`` to ``app`` so request handlers can resolve from it."""
    setattr(app.state, STATE_ATTRIBUTE, registry)
    LOGGER.debug("Installed registry '%s' on application", registry.name)


def get_registry(request: Request) -> Registry:
    """Return the registry installed on the request's application."""
    registry = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if registry is None:
        raise RuntimeError("No service registry installed on this application")
    if not isinstance(registry, Registry):
        msg = f"Expected a Registry on app.state, got {type(registry).__name__}"
        raise RuntimeError(msg)
    return registry


def provide(identifier: Any) -> Callable[[Request], Any]:
    """Build a dependency that resolves ``identifier`` for each request.

    Usage::

        @app.get("/users")
        def list_users(repo: UserRepo = Depends(provide(UserRepo))) -> ...
    """

    def _dependency(request: Request) -> Any:
        return get_registry(request).resolve(identifier)

    _dependency.__name__ = f"provide_{describe_identifier(identifier)}"
    return _dependency


__all__ = ["get_registry", "install_registry", "provide"]
