"""Test configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.tasks import TaskRegistry
from seed_orchestrator.orchestrator.tasks.events import Event

SETTINGS_ENV_VARS = (
    "DATABASE_URL",
    "LOG_LEVEL",
    "SEED_CONTINUE_ON_ERROR",
    "SEED_DEFAULT_PASSWORD_HASH",
)


class RecordingReporter:
    """Collect emitted events for assertions."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[Event]:
        return [event for event in self.events if isinstance(event, event_type)]


@pytest.fixture
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'seed.db'}"


@pytest.fixture
def seed_db(database_url: str) -> Iterator[SeedDatabase]:
    db = SeedDatabase(database_url)
    db.create_schema()
    yield db
    db.close()


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no settings in the environment."""

    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo `configure_logging` changes to the root logger."""

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
