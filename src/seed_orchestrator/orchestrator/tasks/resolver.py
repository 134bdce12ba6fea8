"""Dependency resolution for seed tasks.

`resolve` walks the dependency graph depth-first from a task and returns a
linear order in which every dependency precedes its dependents. The walk keeps
two sets:

- `visiting`: the current path; meeting one of these names again is a cycle
- `done`: names already emitted; meeting one prunes the branch

Dependencies are visited in declaration order, so a fixed registry always
yields the same order.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from .errors import CircularDependencyError, UnknownTaskError
from .registry import TaskRegistry


class DependencyResolver:
    def __init__(self, registry: TaskRegistry) -> None:
        self._registry = registry

    def resolve(self, name: str, *, completed: Collection[str] = ()) -> list[str]:
        """Return the execution order for `name` and its transitive dependencies.

        Args:
            name: Task to resolve; it is always last in the result unless it is
                already in `completed`.
            completed: Tasks treated as satisfied. They prune the walk and are
                left out of the result.

        Raises:
            UnknownTaskError: `name` or one of its dependencies is not registered.
            CircularDependencyError: the walk re-entered a name on its own path.
        """

        return self.resolve_all([name], completed=completed)

    def resolve_all(self, names: Iterable[str], *, completed: Collection[str] = ()) -> list[str]:
        """Resolve several roots into one order with no repeated names."""

        order: list[str] = []
        done: set[str] = set(completed)
        for name in names:
            # Surface an unknown root with no requester attached.
            self._registry.get(name)
            self._visit(name, requested_by=None, path=[], visiting=set(), done=done, out=order)
        return order

    def _visit(
        self,
        name: str,
        *,
        requested_by: str | None,
        path: list[str],
        visiting: set[str],
        done: set[str],
        out: list[str],
    ) -> None:
        if name in visiting:
            start = path.index(name)
            raise CircularDependencyError([*path[start:], name])
        if name in done:
            return
        if name not in self._registry:
            raise UnknownTaskError(name, requested_by=requested_by)

        definition = self._registry.get(name)
        visiting.add(name)
        path.append(name)
        for dependency in definition.dependencies:
            self._visit(
                dependency,
                requested_by=name,
                path=path,
                visiting=visiting,
                done=done,
                out=out,
            )
        path.pop()
        visiting.discard(name)

        done.add(name)
        out.append(name)
