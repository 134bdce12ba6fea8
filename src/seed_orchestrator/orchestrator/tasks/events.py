"""Progress events emitted by the executor, and the reporters that consume them.

Reporters observe; they never influence control flow.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TextIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskStarted:
    name: str


@dataclass(frozen=True, slots=True)
class TaskSkipped:
    name: str
    reason: str


@dataclass(frozen=True, slots=True)
class TaskCompleted:
    name: str
    duration_ms: float


@dataclass(frozen=True, slots=True)
class TaskFailed:
    name: str
    error: BaseException


@dataclass(frozen=True, slots=True)
class RunCompleted:
    succeeded: int
    failed: int
    blocked: int
    duration_ms: float


Event = TaskStarted | TaskSkipped | TaskCompleted | TaskFailed | RunCompleted


class Reporter(Protocol):
    def emit(self, event: Event) -> None: ...


class LoggingReporter:
    """Turn events into structured log records."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def emit(self, event: Event) -> None:
        if isinstance(event, TaskStarted):
            self._log.info("Task started", extra={"task": event.name})
        elif isinstance(event, TaskSkipped):
            self._log.info("Task skipped", extra={"task": event.name, "reason": event.reason})
        elif isinstance(event, TaskCompleted):
            self._log.info(
                "Task completed",
                extra={"task": event.name, "duration_ms": round(event.duration_ms, 2)},
            )
        elif isinstance(event, TaskFailed):
            self._log.error(
                "Task failed",
                extra={
                    "task": event.name,
                    "error": str(event.error),
                    "error_type": type(event.error).__name__,
                },
            )
        elif isinstance(event, RunCompleted):
            level = logging.ERROR if event.failed else logging.INFO
            self._log.log(
                level,
                "Run completed",
                extra={
                    "succeeded": event.succeeded,
                    "failed": event.failed,
                    "blocked": event.blocked,
                    "duration_ms": round(event.duration_ms, 2),
                },
            )


class ConsoleReporter:
    """Human-readable per-task lines and a final summary."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)

    def emit(self, event: Event) -> None:
        if isinstance(event, TaskCompleted):
            self._write(f"[ok]      {event.name} ({event.duration_ms / 1000:.2f}s)")
        elif isinstance(event, TaskFailed):
            self._write(f"[failed]  {event.name}: {type(event.error).__name__}: {event.error}")
        elif isinstance(event, TaskSkipped):
            self._write(f"[skipped] {event.name} ({event.reason})")
        elif isinstance(event, RunCompleted):
            self._write(
                f"Seed run finished in {event.duration_ms / 1000:.2f}s: "
                f"{event.succeeded} succeeded, {event.failed} failed, {event.blocked} blocked"
            )


class FanOutReporter:
    def __init__(self, reporters: Iterable[Reporter]) -> None:
        self._reporters = list(reporters)

    def emit(self, event: Event) -> None:
        for reporter in self._reporters:
            reporter.emit(event)
