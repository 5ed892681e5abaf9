"""Core data models used by the registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class BindingKind(str, Enum):
    """How a binding produces its value."""

    VALUE = "value"
    FACTORY = "factory"


class Token:
    """Opaque identifier that only ever equals itself.

    Two tokens created with the same name are still distinct keys, which makes
    them safe to use for services that must not clash with string identifiers.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"Token({self.name})"


@dataclass(slots=True)
class Binding:
    """Record stored for each registered identifier."""

    kind: BindingKind
    payload: Any
    resolved: bool

    @classmethod
    def for_value(cls, value: Any) -> Binding:
        return cls(kind=BindingKind.VALUE, payload=value, resolved=True)

    @classmethod
    def for_factory(cls, factory: Any) -> Binding:
        return cls(kind=BindingKind.FACTORY, payload=factory, resolved=False)


def describe_identifier(identifier: Any) -> str:
    """Return the textual form of an identifier used in messages."""
    if isinstance(identifier, str):
        return identifier
    if isinstance(identifier, type):
        return f"{identifier.__module__}.{identifier.__qualname__}"
    if isinstance(identifier, Token):
        return repr(identifier)
    return str(identifier)


__all__ = ["Binding", "BindingKind", "Token", "describe_identifier"]
