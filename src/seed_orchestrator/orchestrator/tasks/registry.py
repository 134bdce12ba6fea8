"""Registry of named seed tasks and their declared dependencies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, KeysView, Mapping
from dataclasses import dataclass

from .context import ContextStore
from .errors import DuplicateTaskError, UnknownTaskError

logger = logging.getLogger(__name__)

TaskBody = Callable[[ContextStore], Mapping[str, object] | None]


@dataclass(frozen=True, slots=True)
class TaskDefinition:
    """A named unit of work.

    `dependencies` keeps declaration order; the resolver relies on it to break
    ties deterministically.
    """

    name: str
    body: TaskBody
    dependencies: tuple[str, ...] = ()


class TaskRegistry:
    """Holds task definitions. No execution logic lives here."""

    def __init__(self) -> None:
        self._tasks: dict[str, TaskDefinition] = {}

    def register(
        self, name: str, body: TaskBody, dependencies: Iterable[str] = ()
    ) -> TaskRegistry:
        if not name or not name.strip():
            raise ValueError("Task name must be a non-empty string")
        if name in self._tasks:
            raise DuplicateTaskError(name)

        definition = TaskDefinition(name=name, body=body, dependencies=tuple(dependencies))
        self._tasks[name] = definition
        logger.debug(
            "Task registered",
            extra={"task": name, "dependencies": list(definition.dependencies)},
        )
        return self

    def get(self, name: str) -> TaskDefinition:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(name) from None

    def names(self) -> KeysView[str]:
        """Registered names in registration order.

        The returned view is lazy and can be iterated any number of times.
        """

        return self._tasks.keys()

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)
