"""Unit tests for dependency resolution.

These tests assert dependency ordering, deterministic tie-breaking by
declaration order, and that invalid graphs fail before anything runs.
"""

from __future__ import annotations

import random
from unittest.mock import Mock

import pytest

from seed_orchestrator.orchestrator.tasks import (
    CircularDependencyError,
    DependencyResolver,
    Executor,
    TaskRegistry,
    UnknownTaskError,
)


def _noop(_context: object) -> None:
    return None


def _register(registry: TaskRegistry, graph: dict[str, list[str]]) -> DependencyResolver:
    for name, deps in graph.items():
        registry.register(name, _noop, deps)
    return DependencyResolver(registry)


def test_dependencies_precede_dependents(registry: TaskRegistry) -> None:
    resolver = _register(
        registry,
        {
            "roles": [],
            "adminUser": ["roles"],
            "users": ["roles", "adminUser"],
        },
    )

    assert resolver.resolve("users") == ["roles", "adminUser", "users"]


def test_ties_break_by_declaration_order_not_name(registry: TaskRegistry) -> None:
    resolver = _register(
        registry,
        {
            "zeta": [],
            "alpha": [],
            "mid": [],
            "root": ["zeta", "alpha", "mid"],
        },
    )

    assert resolver.resolve("root") == ["zeta", "alpha", "mid", "root"]
    assert resolver.resolve("root") == ["zeta", "alpha", "mid", "root"]


def test_shared_dependency_appears_once(registry: TaskRegistry) -> None:
    resolver = _register(
        registry,
        {
            "base": [],
            "left": ["base"],
            "right": ["base"],
            "top": ["left", "right"],
        },
    )

    assert resolver.resolve("top") == ["base", "left", "right", "top"]


def test_completed_tasks_are_pruned(registry: TaskRegistry) -> None:
    resolver = _register(
        registry,
        {
            "roles": [],
            "adminUser": ["roles"],
            "users": ["roles", "adminUser"],
        },
    )

    assert resolver.resolve("users", completed={"roles"}) == ["adminUser", "users"]
    assert resolver.resolve("users", completed={"roles", "adminUser", "users"}) == []


def test_resolve_all_shares_one_order(registry: TaskRegistry) -> None:
    resolver = _register(
        registry,
        {
            "roles": [],
            "plans": [],
            "coupons": ["roles", "plans"],
            "users": ["roles"],
        },
    )

    assert resolver.resolve_all(["users", "coupons"]) == ["roles", "users", "plans", "coupons"]


def test_cycle_reports_path_in_visitation_order(registry: TaskRegistry) -> None:
    resolver = _register(registry, {"A": ["B"], "B": ["C"], "C": ["A"]})

    with pytest.raises(CircularDependencyError) as excinfo:
        resolver.resolve("A")

    assert excinfo.value.path == ("A", "B", "C", "A")
    assert "A -> B -> C -> A" in str(excinfo.value)


def test_cycle_below_the_root_reports_only_the_cycle(registry: TaskRegistry) -> None:
    resolver = _register(registry, {"root": ["A"], "A": ["B"], "B": ["A"]})

    with pytest.raises(CircularDependencyError) as excinfo:
        resolver.resolve("root")

    assert excinfo.value.path == ("A", "B", "A")


def test_self_dependency_is_a_cycle(registry: TaskRegistry) -> None:
    resolver = _register(registry, {"A": ["A"]})

    with pytest.raises(CircularDependencyError) as excinfo:
        resolver.resolve("A")

    assert excinfo.value.path == ("A", "A")


def test_cycle_is_detected_before_any_body_runs(registry: TaskRegistry) -> None:
    bodies = {name: Mock(return_value={}) for name in ["A", "B", "C"]}
    registry.register("A", bodies["A"], ["B"])
    registry.register("B", bodies["B"], ["C"])
    registry.register("C", bodies["C"], ["A"])

    with pytest.raises(CircularDependencyError):
        Executor(registry).run_task("A")

    for body in bodies.values():
        body.assert_not_called()


def test_unknown_dependency_names_missing_task_and_requester(registry: TaskRegistry) -> None:
    resolver = _register(registry, {"X": ["ghost"]})

    with pytest.raises(UnknownTaskError) as excinfo:
        resolver.resolve("X")

    assert excinfo.value.name == "ghost"
    assert excinfo.value.requested_by == "X"
    assert "ghost" in str(excinfo.value)
    assert "X" in str(excinfo.value)


def test_unknown_root(registry: TaskRegistry) -> None:
    resolver = DependencyResolver(registry)

    with pytest.raises(UnknownTaskError) as excinfo:
        resolver.resolve("ghost")

    assert excinfo.value.requested_by is None


def _random_dag(rng: random.Random, size: int) -> dict[str, list[str]]:
    # Edges only point to lower indices, so the graph is acyclic by construction.
    names = [f"t{i}" for i in range(size)]
    graph: dict[str, list[str]] = {}
    for index, name in enumerate(names):
        candidates = names[:index]
        count = rng.randint(0, min(4, len(candidates)))
        graph[name] = rng.sample(candidates, count)
    order = names[:]
    rng.shuffle(order)
    return {name: graph[name] for name in order}


@pytest.mark.parametrize("seed", range(25))
def test_random_acyclic_graphs_respect_every_edge(seed: int) -> None:
    rng = random.Random(seed)
    graph = _random_dag(rng, size=rng.randint(1, 30))
    registry = TaskRegistry()
    resolver = _register(registry, graph)

    order = resolver.resolve_all(list(registry.names()))

    assert sorted(order) == sorted(graph)
    position = {name: index for index, name in enumerate(order)}
    for name, deps in graph.items():
        for dep in deps:
            assert position[dep] < position[name], f"{dep} must precede {name}"

    for name in graph:
        single = resolver.resolve(name)
        assert single[-1] == name
        assert resolver.resolve(name) == single
