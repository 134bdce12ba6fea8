"""Unit tests for the task executor: ordering, memoization, context sharing and
failure containment."""

from __future__ import annotations

from collections.abc import Mapping
from unittest.mock import Mock

import pytest
from conftest import RecordingReporter

from seed_orchestrator.orchestrator.tasks import (
    CircularDependencyError,
    Executor,
    InvalidTaskResultError,
    MissingPrerequisiteError,
    TaskReentryError,
    TaskRegistry,
    TaskState,
    UnknownTaskError,
    require_context,
)
from seed_orchestrator.orchestrator.tasks.events import (
    RunCompleted,
    TaskCompleted,
    TaskFailed,
    TaskSkipped,
    TaskStarted,
)

ROLE_NAMES = [
    "Professor",
    "Aluno",
    "Empresa",
    "Administrador",
    "Recrutadores",
    "Setor Pedagógico",
    "Recursos Humanos",
    "Super Administrador",
]


class SeedFailure(RuntimeError):
    pass


def _failing(_context: object) -> None:
    raise SeedFailure("database unavailable")


def test_users_scenario_runs_dependencies_once_in_order(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    calls: list[str] = []
    seen_by_users: dict[str, object] = {}

    def roles(context: Mapping[str, object]) -> dict[str, object]:
        calls.append("roles")
        return {"roles": [{"id": i + 1, "name": name} for i, name in enumerate(ROLE_NAMES)]}

    def admin_user(context: Mapping[str, object]) -> dict[str, object]:
        calls.append("adminUser")
        require_context(context, ["roles"], "adminUser")
        role = next(r for r in context["roles"] if r["name"] == "Super Administrador")
        return {"adminUser": {"id": 100, "roleId": role["id"]}}

    def users(context: Mapping[str, object]) -> dict[str, object]:
        calls.append("users")
        seen_by_users.update(context)
        return {"testUsers": ["u1", "u2"]}

    registry.register("roles", roles)
    registry.register("adminUser", admin_user, ["roles"])
    registry.register("users", users, ["roles", "adminUser"])

    executor = Executor(registry, reporter=reporter)
    executor.run_task("users")

    assert calls == ["roles", "adminUser", "users"]
    assert len(seen_by_users["roles"]) == 8
    assert seen_by_users["adminUser"] == {"id": 100, "roleId": 8}
    assert executor.completed == ("roles", "adminUser", "users")
    assert [e.name for e in reporter.of_type(TaskCompleted)] == ["roles", "adminUser", "users"]


def test_run_task_twice_invokes_body_once(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    body = Mock(return_value={"roles": ["r"]})
    registry.register("roles", body)
    executor = Executor(registry, reporter=reporter)

    first = executor.run_task("roles")
    second = executor.run_task("roles")

    assert body.call_count == 1
    assert first is second
    assert reporter.of_type(TaskSkipped) == [TaskSkipped(name="roles", reason="already complete")]


def test_completed_dependency_is_not_rerun_for_a_later_dependent(registry: TaskRegistry) -> None:
    roles = Mock(return_value={"roles": ["r"]})
    registry.register("roles", roles)
    registry.register("adminUser", Mock(return_value={"adminUser": "a"}), ["roles"])
    executor = Executor(registry)

    executor.run_task("roles")
    executor.run_task("adminUser")

    assert roles.call_count == 1


def test_context_propagates_to_dependents(registry: TaskRegistry) -> None:
    observed: list[object] = []
    registry.register("A", lambda ctx: {"roles": ["admin"]})
    registry.register("B", lambda ctx: observed.append(ctx.get("roles")), ["A"])

    Executor(registry).run_task("B")

    assert observed == [["admin"]]


def test_events_for_a_successful_task(registry: TaskRegistry, reporter: RecordingReporter) -> None:
    registry.register("roles", lambda ctx: None)

    Executor(registry, reporter=reporter).run_task("roles")

    assert isinstance(reporter.events[0], TaskStarted)
    assert isinstance(reporter.events[1], TaskCompleted)
    assert reporter.events[1].duration_ms >= 0


def test_get_context_returns_a_copy(registry: TaskRegistry) -> None:
    registry.register("roles", lambda ctx: {"roles": ["r"]})
    executor = Executor(registry, initial_context={"env": "test"})
    executor.run_task("roles")

    context = executor.get_context()
    context["roles"] = []
    context["injected"] = True

    assert executor.get_context() == {"env": "test", "roles": ["r"]}


def test_require_context_on_executor(registry: TaskRegistry) -> None:
    registry.register("roles", lambda ctx: {"roles": ["r"]})
    executor = Executor(registry)
    executor.run_task("roles")

    executor.require_context(["roles"], "users")
    with pytest.raises(MissingPrerequisiteError) as excinfo:
        executor.require_context(["roles", "adminUser"], "users")

    assert excinfo.value.missing == ("adminUser",)


def test_failing_dependency_stops_dependents(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    dependent = Mock(return_value={})
    registry.register("B", _failing)
    registry.register("C", dependent, ["B"])
    executor = Executor(registry, reporter=reporter)

    with pytest.raises(SeedFailure):
        executor.run_task("C")

    dependent.assert_not_called()
    assert executor.state_of("B") is TaskState.FAILED
    assert executor.state_of("C") is TaskState.REGISTERED
    failed = reporter.of_type(TaskFailed)
    assert [e.name for e in failed] == ["B"]
    assert isinstance(failed[0].error, SeedFailure)


def test_failed_task_can_be_retried(registry: TaskRegistry) -> None:
    attempts = {"count": 0}

    def flaky(_context: object) -> dict[str, object]:
        attempts["count"] += 1
        if attempts["count"] == 1:
            raise SeedFailure("first attempt")
        return {"plans": ["p"]}

    registry.register("plans", flaky)
    executor = Executor(registry)

    with pytest.raises(SeedFailure):
        executor.run_task("plans")
    executor.run_task("plans")

    assert executor.state_of("plans") is TaskState.COMPLETE
    assert executor.get_context()["plans"] == ["p"]


def test_missing_prerequisite_fails_the_task(registry: TaskRegistry) -> None:
    registry.register("users", lambda ctx: require_context(ctx, ["roles"], "users"))
    executor = Executor(registry)

    with pytest.raises(MissingPrerequisiteError):
        executor.run_task("users")

    assert executor.state_of("users") is TaskState.FAILED


def test_unknown_dependency_fails_before_running(registry: TaskRegistry) -> None:
    body = Mock(return_value={})
    registry.register("X", body, ["ghost"])

    with pytest.raises(UnknownTaskError) as excinfo:
        Executor(registry).run_task("X")

    assert (excinfo.value.name, excinfo.value.requested_by) == ("ghost", "X")
    body.assert_not_called()


def test_non_mapping_result_is_rejected(registry: TaskRegistry) -> None:
    registry.register("roles", lambda ctx: ["not", "a", "mapping"])
    executor = Executor(registry)

    with pytest.raises(InvalidTaskResultError):
        executor.run_task("roles")

    assert executor.state_of("roles") is TaskState.FAILED


def test_task_cannot_reenter_itself(registry: TaskRegistry) -> None:
    executor: Executor

    def recursive(_context: object) -> None:
        executor.run_task("loop")

    registry.register("loop", recursive)
    executor = Executor(registry)

    with pytest.raises(TaskReentryError):
        executor.run_task("loop")

    assert executor.state_of("loop") is TaskState.FAILED


def test_run_all_runs_everything_once(registry: TaskRegistry, reporter: RecordingReporter) -> None:
    bodies = {name: Mock(return_value={name: [name]}) for name in ["users", "roles", "plans"]}
    registry.register("users", bodies["users"], ["roles"])
    registry.register("roles", bodies["roles"])
    registry.register("plans", bodies["plans"])
    executor = Executor(registry, reporter=reporter)

    summary = executor.run_all()

    assert summary.succeeded == 3
    assert summary.failed == 0
    assert summary.ok
    assert executor.completed == ("roles", "users", "plans")
    for body in bodies.values():
        assert body.call_count == 1
    assert reporter.of_type(RunCompleted)[0].succeeded == 3


def test_run_all_is_fail_fast_by_default(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    dependent = Mock(return_value={})
    later = Mock(return_value={})
    registry.register("B", _failing)
    registry.register("C", dependent, ["B"])
    registry.register("D", later)

    with pytest.raises(SeedFailure):
        Executor(registry, reporter=reporter).run_all()

    dependent.assert_not_called()
    later.assert_not_called()
    run_completed = reporter.of_type(RunCompleted)
    assert len(run_completed) == 1
    assert run_completed[0].failed == 1


def test_continue_on_error_contains_failures(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    dependent = Mock(return_value={})
    unrelated = Mock(return_value={"courses": ["c"]})
    registry.register("B", _failing)
    registry.register("C", dependent, ["B"])
    registry.register("D", unrelated)
    executor = Executor(registry, reporter=reporter)

    summary = executor.run_all(continue_on_error=True)

    assert summary.failed == 1
    assert list(summary.failures) == ["B"]
    assert isinstance(summary.failures["B"], SeedFailure)
    assert summary.blocked == {"C": ("B",)}
    assert summary.succeeded == 1
    assert not summary.ok
    dependent.assert_not_called()
    unrelated.assert_called_once()
    assert executor.state_of("D") is TaskState.COMPLETE

    run_completed = reporter.of_type(RunCompleted)[0]
    assert (run_completed.succeeded, run_completed.failed, run_completed.blocked) == (1, 1, 1)


def test_continue_on_error_attributes_failure_to_the_failing_dependency(
    registry: TaskRegistry, reporter: RecordingReporter
) -> None:
    dependent = Mock(return_value={})
    registry.register("C", dependent, ["B"])
    registry.register("B", _failing)
    registry.register("D", Mock(return_value={}))

    summary = Executor(registry, reporter=reporter).run_all(continue_on_error=True)

    assert list(summary.failures) == ["B"]
    assert summary.blocked == {"C": ("B",)}
    assert summary.succeeded == 1
    dependent.assert_not_called()
    assert reporter.of_type(TaskSkipped) == [
        TaskSkipped(name="C", reason="dependency failed: B")
    ]
    assert reporter.of_type(RunCompleted)[0].blocked == 1


@pytest.mark.parametrize("order", [["B", "C", "D"], ["C", "B", "D"], ["D", "C", "B"]])
def test_continue_on_error_summary_is_independent_of_registration_order(
    registry: TaskRegistry, order: list[str]
) -> None:
    definitions = {
        "B": (_failing, []),
        "C": (Mock(return_value={}), ["B"]),
        "D": (Mock(return_value={}), []),
    }
    for name in order:
        body, dependencies = definitions[name]
        registry.register(name, body, dependencies)

    summary = Executor(registry).run_all(continue_on_error=True)

    assert (summary.succeeded, summary.failed) == (1, 1)
    assert summary.blocked == {"C": ("B",)}


def test_continue_on_error_still_raises_graph_defects(registry: TaskRegistry) -> None:
    registry.register("A", Mock(return_value={}), ["B"])
    registry.register("B", Mock(return_value={}), ["A"])

    with pytest.raises(CircularDependencyError):
        Executor(registry).run_all(continue_on_error=True)


def test_run_all_skips_tasks_completed_earlier(registry: TaskRegistry) -> None:
    roles = Mock(return_value={"roles": ["r"]})
    registry.register("roles", roles)
    registry.register("users", Mock(return_value={}), ["roles"])
    executor = Executor(registry)
    executor.run_task("roles")

    summary = executor.run_all()

    assert roles.call_count == 1
    assert summary.succeeded == 1
