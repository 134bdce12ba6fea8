"""Dependency-aware seed task orchestration.

This package provides:
- a registry of named tasks with declared dependencies
- a resolver that orders tasks and rejects cycles
- an executor that runs each task once and accumulates a shared context
- progress events for reporters
"""

from .context import ContextStore, require_context
from .errors import (
    CircularDependencyError,
    DuplicateTaskError,
    InvalidTaskResultError,
    MissingPrerequisiteError,
    SeedError,
    TaskReentryError,
    UnknownTaskError,
)
from .executor import Executor, RunSummary
from .registry import TaskDefinition, TaskRegistry
from .resolver import DependencyResolver
from .state_machine import TaskState

__all__ = [
    "CircularDependencyError",
    "ContextStore",
    "DependencyResolver",
    "DuplicateTaskError",
    "Executor",
    "InvalidTaskResultError",
    "MissingPrerequisiteError",
    "RunSummary",
    "SeedError",
    "TaskDefinition",
    "TaskReentryError",
    "TaskRegistry",
    "TaskState",
    "UnknownTaskError",
    "require_context",
]
