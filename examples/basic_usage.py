#!/usr/bin/env python3
"""Programmatic seeding example.

This demonstrates using the orchestrator components directly:

* load settings from `.env`
* register the seed catalogue against a database
* run one seed group (and whatever it depends on)
* read the shared context afterwards

The group is passed as an argument; every other setting comes from the
environment.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from seed_orchestrator.orchestrator.config import SeederSettings
from seed_orchestrator.orchestrator.logging import configure_logging
from seed_orchestrator.orchestrator.persistence import SeedDatabase
from seed_orchestrator.orchestrator.seeds import SEED_GROUPS, register_all_seeds
from seed_orchestrator.orchestrator.tasks import Executor, TaskRegistry
from seed_orchestrator.orchestrator.tasks.events import ConsoleReporter


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed one group (programmatic example).")
    parser.add_argument("--group", default="core", choices=sorted(SEED_GROUPS))
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = SeederSettings()
    configure_logging(settings.log_level)

    with SeedDatabase(settings.database_url) as db:
        db.create_schema()
        registry = register_all_seeds(TaskRegistry(), db, settings)
        executor = Executor(registry, reporter=ConsoleReporter())

        for name in SEED_GROUPS[args.group].tasks:
            executor.run_task(name)

        context = executor.get_context()
        print(f"Completed: {', '.join(executor.completed)}")
        print(f"Context keys: {', '.join(sorted(context))}")
        print(f"Records in {settings.database_url}: {db.count()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
