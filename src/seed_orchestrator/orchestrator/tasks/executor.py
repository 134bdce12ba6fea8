"""Sequential executor for registered seed tasks.

The executor owns the run's Context Store and Execution Record. Each task body
runs at most once per executor; a task only starts after every dependency body
has returned successfully.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .context import ContextStore, require_context
from .errors import STRUCTURAL_ERRORS, InvalidTaskResultError, TaskReentryError
from .events import (
    LoggingReporter,
    Reporter,
    RunCompleted,
    TaskCompleted,
    TaskFailed,
    TaskSkipped,
    TaskStarted,
)
from .registry import TaskDefinition, TaskRegistry
from .resolver import DependencyResolver
from .state_machine import ExecutionRecord, TaskState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Outcome of a full run.

    `blocked` maps tasks that were not attempted to the failed or blocked
    tasks in their dependency chain (continue-on-error mode only).
    """

    succeeded: int
    failures: dict[str, BaseException] = field(default_factory=dict)
    blocked: dict[str, tuple[str, ...]] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures and not self.blocked


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000.0


class Executor:
    """Run tasks from a registry in dependency order, exactly once each."""

    def __init__(
        self,
        registry: TaskRegistry,
        *,
        reporter: Reporter | None = None,
        initial_context: Mapping[str, object] | None = None,
    ) -> None:
        self._registry = registry
        self._resolver = DependencyResolver(registry)
        self._reporter: Reporter = reporter or LoggingReporter()
        self._context = ContextStore(initial_context)
        self._record = ExecutionRecord()
        self._last_failed: str | None = None

    @property
    def completed(self) -> tuple[str, ...]:
        """Names of completed tasks, in completion order."""

        return tuple(self._record.completion_order)

    def state_of(self, name: str) -> TaskState:
        self._registry.get(name)
        return self._record.state_of(name)

    def get_context(self) -> dict[str, object]:
        return self._context.snapshot()

    def require_context(self, names: Iterable[str], caller_label: str) -> None:
        require_context(self._context, names, caller_label)

    def run_task(self, name: str) -> ContextStore:
        """Run `name` after any of its dependencies that have not completed yet.

        Returns:
            The live Context Store.

        Raises:
            UnknownTaskError, CircularDependencyError: before any body runs.
            TaskReentryError: `name` (or a dependency) is already running.
            Exception: whatever a task body raised, unchanged.
        """

        if self._record.is_complete(name):
            logger.debug("Task already complete, skipping", extra={"task": name})
            self._reporter.emit(TaskSkipped(name=name, reason="already complete"))
            return self._context

        if self._record.state_of(name) is TaskState.IN_PROGRESS:
            raise TaskReentryError(name)

        chain = self._resolver.resolve(name, completed=self._record.completion_order)
        if len(chain) > 1:
            logger.info(
                "Resolved task chain",
                extra={"task": name, "chain": chain},
            )

        for task_name in chain:
            self._execute(self._registry.get(task_name))

        return self._context

    def run_all(self, *, continue_on_error: bool = False) -> RunSummary:
        """Run every registered task that has not completed yet.

        With `continue_on_error`, task failures are recorded instead of raised,
        tasks depending on a failed task are not attempted, and unrelated tasks
        still run. Registry and graph defects are raised in either mode.
        """

        started = time.perf_counter()
        completed_before = len(self._record.completion_order)
        failures: dict[str, BaseException] = {}
        blocked: dict[str, tuple[str, ...]] = {}

        logger.info(
            "Starting seed run",
            extra={"tasks": len(self._registry), "continue_on_error": continue_on_error},
        )

        try:
            for name in list(self._registry.names()):
                if self._record.is_complete(name) or name in failures or name in blocked:
                    continue

                if continue_on_error:
                    chain = self._resolver.resolve(name, completed=self._record.completion_order)
                    upstream = tuple(dep for dep in chain if dep in failures or dep in blocked)
                    if upstream:
                        self._block(name, upstream, blocked)
                        continue

                self._last_failed = None
                try:
                    self.run_task(name)
                except STRUCTURAL_ERRORS:
                    raise
                except Exception as exc:
                    failed = self._last_failed or name
                    failures[failed] = exc
                    if not continue_on_error:
                        raise
                    if failed != name:
                        self._block(name, (failed,), blocked)
        finally:
            summary = RunSummary(
                succeeded=len(self._record.completion_order) - completed_before,
                failures=failures,
                blocked=blocked,
                duration_ms=_elapsed_ms(started),
            )
            self._reporter.emit(
                RunCompleted(
                    succeeded=summary.succeeded,
                    failed=summary.failed,
                    blocked=len(summary.blocked),
                    duration_ms=summary.duration_ms,
                )
            )

        return summary

    def _block(
        self,
        name: str,
        upstream: tuple[str, ...],
        blocked: dict[str, tuple[str, ...]],
    ) -> None:
        blocked[name] = upstream
        logger.warning(
            "Task not attempted: a dependency failed",
            extra={"task": name, "upstream": list(upstream)},
        )
        self._reporter.emit(
            TaskSkipped(name=name, reason=f"dependency failed: {', '.join(upstream)}")
        )

    def _execute(self, definition: TaskDefinition) -> None:
        name = definition.name
        if self._record.state_of(name) is TaskState.IN_PROGRESS:
            raise TaskReentryError(name)

        self._record.move(name, TaskState.IN_PROGRESS)
        self._reporter.emit(TaskStarted(name=name))
        started = time.perf_counter()

        try:
            result = definition.body(self._context)
            if result is None or result is self._context:
                partial: Mapping[str, object] = {}
            elif isinstance(result, Mapping):
                partial = result
            else:
                raise InvalidTaskResultError(name, result)
            self._context.merge(partial)
        except Exception as exc:
            self._record.move(name, TaskState.FAILED)
            self._last_failed = name
            logger.exception("Seed task failed", extra={"task": name})
            self._reporter.emit(TaskFailed(name=name, error=exc))
            raise

        duration_ms = _elapsed_ms(started)
        self._record.durations_ms[name] = duration_ms
        self._record.move(name, TaskState.COMPLETE)
        self._reporter.emit(TaskCompleted(name=name, duration_ms=duration_ms))
