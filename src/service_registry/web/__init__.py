"""FastAPI integration for the service registry."""

from .dependencies import get_registry, install_registry, provide

__all__ = ["get_registry", "install_registry", "provide"]
