"""The accumulating context shared by every task in a run.

Merges are shallow and additive:
- new keys are added
- list/tuple values are concatenated, skipping elements already present by
  identity, and keep the type of the existing value (set values are unioned)
- anything else is overwritten

Seed bodies often hand back the whole context they received plus their own
keys; identity de-duplication makes that harmless.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sized

from .errors import MissingPrerequisiteError

_SEQUENCE_TYPES = (list, tuple)
_SET_TYPES = (set, frozenset)


def merge_value(old: object, new: object) -> object:
    """Combine an existing context value with a newly returned one."""

    if new is old:
        return old

    if isinstance(old, _SEQUENCE_TYPES) and isinstance(new, _SEQUENCE_TYPES):
        merged = list(old)
        seen = {id(item) for item in merged}
        for item in new:
            if id(item) not in seen:
                seen.add(id(item))
                merged.append(item)
        return tuple(merged) if isinstance(old, tuple) else merged

    if isinstance(old, _SET_TYPES) and isinstance(new, _SET_TYPES):
        return set(old) | set(new)

    return new


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def missing_keys(context: Mapping[str, object], names: Iterable[str]) -> list[str]:
    """Return the keys in `names` that are absent from or empty in `context`."""

    return [name for name in names if name not in context or _is_empty(context[name])]


def require_context(
    context: Mapping[str, object], names: Iterable[str], caller_label: str
) -> None:
    """Fail fast when a task's context prerequisites are not met.

    Raises:
        MissingPrerequisiteError: naming exactly which keys are missing.
    """

    missing = missing_keys(context, names)
    if missing:
        raise MissingPrerequisiteError(missing, caller_label)


class ContextStore(MutableMapping[str, object]):
    """Mutable string-keyed mapping owned by the executor for one run."""

    def __init__(self, initial: Mapping[str, object] | None = None) -> None:
        self._data: dict[str, object] = dict(initial or {})

    def __getitem__(self, key: str) -> object:
        return self._data[key]

    def __setitem__(self, key: str, value: object) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ContextStore(keys={list(self._data)!r})"

    def merge(self, partial: Mapping[str, object]) -> list[str]:
        """Merge a task's returned mapping into the store.

        Returns:
            The keys that were written.
        """

        written: list[str] = []
        for key, value in partial.items():
            if key in self._data:
                self._data[key] = merge_value(self._data[key], value)
            else:
                self._data[key] = value
            written.append(key)
        return written

    def snapshot(self) -> dict[str, object]:
        """Shallow copy: callers may rebind keys without touching the store."""

        return dict(self._data)
