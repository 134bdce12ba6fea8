from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TaskState(str, Enum):
    REGISTERED = "registered"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"
    FAILED = "failed"


ALLOWED_TRANSITIONS: dict[TaskState, set[TaskState]] = {
    TaskState.REGISTERED: {TaskState.IN_PROGRESS},
    TaskState.IN_PROGRESS: {TaskState.COMPLETE, TaskState.FAILED},
    TaskState.COMPLETE: set(),
    # A failed task may be retried by a fresh run_task call.
    TaskState.FAILED: {TaskState.IN_PROGRESS},
}


class IllegalTransitionError(ValueError):
    pass


def transition(*, name: str, current: TaskState, to: TaskState) -> TaskState:
    allowed = ALLOWED_TRANSITIONS.get(current, set())
    if to not in allowed:
        raise IllegalTransitionError(
            f"Illegal transition for {name!r}: {current.value} -> {to.value}"
        )
    return to


@dataclass(slots=True)
class ExecutionRecord:
    """Per-run bookkeeping of task states.

    Tasks that were never touched are implicitly REGISTERED. The record lives
    as long as the executor that owns it.
    """

    states: dict[str, TaskState] = field(default_factory=dict)
    durations_ms: dict[str, float] = field(default_factory=dict)
    completion_order: list[str] = field(default_factory=list)

    def state_of(self, name: str) -> TaskState:
        return self.states.get(name, TaskState.REGISTERED)

    def move(self, name: str, to: TaskState) -> None:
        self.states[name] = transition(name=name, current=self.state_of(name), to=to)
        if to is TaskState.COMPLETE:
            self.completion_order.append(name)

    def is_complete(self, name: str) -> bool:
        return self.state_of(name) is TaskState.COMPLETE

    def names_in(self, state: TaskState) -> list[str]:
        return [name for name, value in self.states.items() if value is state]
