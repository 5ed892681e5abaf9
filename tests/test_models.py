"""Tests for registry data models."""

from __future__ import annotations

from service_registry.core.models import (
    Binding,
    BindingKind,
    Token,
    describe_identifier,
)


class Repository:
    """Placeholder class used as an identifier."""


def test_value_binding_starts_resolved() -> None:
    binding = Binding.for_value(3)

    assert binding.kind is BindingKind.VALUE
    assert binding.resolved
    assert binding.payload == 3


def test_factory_binding_starts_unresolved() -> None:
    factory = lambda r: 3  # noqa: E731
    binding = Binding.for_factory(factory)

    assert binding.kind is BindingKind.FACTORY
    assert not binding.resolved
    assert binding.payload is factory


def test_tokens_compare_by_identity() -> None:
    token = Token("cache")

    assert token == token
    assert Token("cache") != token
    assert len({token, Token("cache")}) == 2


def test_describe_identifier_shapes() -> None:
    assert describe_identifier("config") == "config"
    assert describe_identifier(Token("cache")) == "Token(cache)"
    assert describe_identifier(Repository) == f"{__name__}.Repository"
    assert describe_identifier(42) == "42"
