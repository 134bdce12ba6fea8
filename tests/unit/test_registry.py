"""Unit tests for the task registry."""

from __future__ import annotations

import pytest

from seed_orchestrator.orchestrator.tasks import (
    DuplicateTaskError,
    TaskRegistry,
    UnknownTaskError,
)


def _noop(_context: object) -> None:
    return None


def test_register_and_get(registry: TaskRegistry) -> None:
    registry.register("roles", _noop).register("users", _noop, ["roles"])

    definition = registry.get("users")
    assert definition.name == "users"
    assert definition.dependencies == ("roles",)
    assert definition.body is _noop
    assert "roles" in registry
    assert len(registry) == 2


def test_register_rejects_duplicates(registry: TaskRegistry) -> None:
    registry.register("roles", _noop)

    with pytest.raises(DuplicateTaskError):
        registry.register("roles", lambda _ctx: {"other": True})

    assert registry.get("roles").body is _noop


def test_register_rejects_blank_names(registry: TaskRegistry) -> None:
    with pytest.raises(ValueError):
        registry.register("  ", _noop)


def test_get_unknown_task(registry: TaskRegistry) -> None:
    with pytest.raises(UnknownTaskError) as excinfo:
        registry.get("ghost")

    assert excinfo.value.name == "ghost"
    assert excinfo.value.requested_by is None


def test_names_are_in_registration_order_and_restartable(registry: TaskRegistry) -> None:
    for name in ["users", "roles", "coupons"]:
        registry.register(name, _noop)

    names = registry.names()

    assert list(names) == ["users", "roles", "coupons"]
    assert list(names) == ["users", "roles", "coupons"]
