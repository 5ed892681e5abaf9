"""Protocol interfaces for code that consumes a registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class ServiceResolver(Protocol):
    """Read side of a registry, as seen by factories."""

    def resolve(self, identifier: Any) -> Any:
        """Return the concrete value bound to ``identifier``."""
        raise NotImplementedError

    def contains(self, identifier: Any) -> bool:
        """Return ``True`` if ``identifier`` has a binding."""
        raise NotImplementedError


ServiceFactory = Callable[[ServiceResolver], T]


__all__ = ["ServiceFactory", "ServiceResolver"]
