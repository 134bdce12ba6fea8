"""Error taxonomy for seed task orchestration.

Registration and graph defects (duplicate names, unknown tasks, cycles) are
always fatal. Task-level failures propagate by default and are only contained
when a full run is started in continue-on-error mode.
"""

from __future__ import annotations

from collections.abc import Sequence


class SeedError(Exception):
    """Base class for orchestration errors."""


class DuplicateTaskError(SeedError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task already registered: {name!r}")
        self.name = name


class UnknownTaskError(SeedError):
    """Raised for a task name that was never registered.

    `requested_by` names the task that declared the missing dependency, or is
    None when the unknown name was requested directly.
    """

    def __init__(self, name: str, requested_by: str | None = None) -> None:
        if requested_by is None:
            message = f"Unknown task: {name!r}"
        else:
            message = f"Unknown task {name!r} (declared as a dependency of {requested_by!r})"
        super().__init__(message)
        self.name = name
        self.requested_by = requested_by


class CircularDependencyError(SeedError):
    def __init__(self, path: Sequence[str]) -> None:
        self.path: tuple[str, ...] = tuple(path)
        super().__init__("Circular dependency: " + " -> ".join(self.path))


class MissingPrerequisiteError(SeedError):
    """Raised when context keys a task relies on are absent or empty."""

    def __init__(self, missing: Sequence[str], caller_label: str) -> None:
        self.missing: tuple[str, ...] = tuple(missing)
        self.caller_label = caller_label
        super().__init__(
            f"Missing context for {caller_label}: {', '.join(self.missing)}. "
            "Run the seeds that provide them first."
        )


class TaskReentryError(SeedError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Task {name!r} is already running")
        self.name = name


class InvalidTaskResultError(SeedError):
    def __init__(self, name: str, result: object) -> None:
        super().__init__(
            f"Task {name!r} returned {type(result).__name__}; expected a mapping or None"
        )
        self.name = name


# Defects in the registry or graph; never contained by continue-on-error.
STRUCTURAL_ERRORS: tuple[type[SeedError], ...] = (
    DuplicateTaskError,
    UnknownTaskError,
    CircularDependencyError,
)
